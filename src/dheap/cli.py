import argparse
from typing import Callable, Optional, Sequence

from src.dheap.commands import HeapController, Result
from src.dheap.display import format_heap
from src.dheap.logger import logger, setup_logging
from src.dheap.reader import read_keys
from src.dheap.settings import DEFAULT_INPUT_FILE, MAX_CAPACITY

MENU = (
    "Choose one of the following by inputting the corresponding number:\n"
    "1) Extract max value from d-heap\n"
    "2) Insert new value to d-heap\n"
    "3) Increase the value of a key at a certain index\n"
    "4) Print current d-heap\n"
    "5) Quit program"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Interactive max d-heap built from a file of integers."
    )
    parser.add_argument("--file", type=str, default=DEFAULT_INPUT_FILE,
                        help="comma separated integers to build the heap from.")
    parser.add_argument("-d", "--branching-factor", type=int, default=None,
                        help="number of children per node (prompted if omitted).")
    parser.add_argument("--capacity", type=int, default=MAX_CAPACITY,
                        help="maximum number of keys the heap may hold.")
    parser.add_argument("--verbosity", type=int, choices=[0, 1, 2], default=0,
                        help="the logger level (0: WARNING, 1: INFO, 2: DEBUG).")
    return parser


class Session:
    """Menu loop driving a `HeapController` from line based input."""

    def __init__(
        self,
        controller: HeapController,
        input_fn: Callable[[str], str],
        output: Callable[[str], None]
    ) -> None:
        self.controller = controller
        self.input_fn = input_fn
        self.output = output

    def read_int(self, prompt: str) -> Optional[int]:
        """Prompt for an integer; None when the reply is not one."""
        self.output(prompt)
        reply = self.input_fn("")
        try:
            return int(reply.strip())
        except ValueError:
            self.output("Invalid input, please enter an integer.")
            return None

    def is_valid(self, value: int) -> bool:
        if self.controller.min_key <= value <= self.controller.max_key:
            return True
        self.output("Error, Invalid value")
        return False

    def report(self, result: Result) -> None:
        if not result.ok:
            self.output(f"ERROR, {result.message}")

    def extract_max(self) -> None:
        self.output("Extracting maximum value from heap...")
        result = self.controller.extract_max()
        if result.ok:
            self.output(f"Extracted max: {result.value}")
        else:
            self.report(result)

    def insert(self) -> None:
        value = self.read_int(
            "Enter new (5 digit max) integer value to insert into d-heap"
        )
        if value is None or not self.is_valid(value):
            return
        if self.controller.heap.is_full():
            self.output("ERROR, heap is full")
            return
        self.report(self.controller.insert(value))

    def increase_key(self) -> None:
        index = self.read_int("Enter the index of the key you want to change")
        if index is None:
            return
        value = self.read_int("Enter the new value:")
        if value is None or not self.is_valid(value):
            return
        self.report(self.controller.increase_key(index, value))

    def print_heap(self) -> None:
        self.output(format_heap(self.controller.heap))

    def run(self) -> None:
        actions = {
            1: self.extract_max,
            2: self.insert,
            3: self.increase_key,
            4: self.print_heap,
        }
        while True:
            try:
                choice = self.read_int(MENU)
            except EOFError:
                break
            if choice is None:
                continue
            if choice == 5:
                self.output("Have a nice day!\nQuitting program...")
                break
            action = actions.get(choice)
            if action is None:
                self.output("Invalid choice. Please choose a valid option.")
                continue
            try:
                action()
            except EOFError:
                break


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.capacity < 1:
        parser.error("--capacity must be positive")
    setup_logging(args.verbosity)

    controller = HeapController(capacity=args.capacity)
    keys = read_keys(args.file, capacity=args.capacity)

    branching_factor = args.branching_factor
    if branching_factor is None:
        output("Please enter an integer value >= 2 - d for d-heap")
        try:
            branching_factor = int(input_fn("").strip())
        except (ValueError, EOFError):
            output("Invalid value for d. d should be an integer.")
            return 1

    result = controller.build(branching_factor, keys)
    if not result.ok:
        output(f"ERROR, {result.message}")
        return 1
    logger.info("Built heap of %d keys", result.value)
    output(f"Heap built successfully for d = {branching_factor} value")

    Session(controller, input_fn, output).run()
    return 0
