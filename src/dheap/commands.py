from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from src.dheap.dheap import DHeap
from src.dheap.errors import DHeapError, ErrorKind, HeapNotBuiltError
from src.dheap.logger import logger
from src.dheap.settings import MAX_CAPACITY, MAX_KEY, MIN_KEY


class Command(Enum):
    BUILD = "build"
    INSERT = "insert"
    EXTRACT_MAX = "extract_max"
    INCREASE_KEY = "increase_key"
    QUERY = "query"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a heap at one point in time."""
    branching_factor: int
    size: int
    capacity: int
    height: int
    is_full: bool
    levels: tuple[tuple[int, ...], ...]
    keys: tuple[int, ...]


@dataclass(frozen=True)
class Result:
    command: Command
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


class HeapController:
    """
    Dispatches commands to a single heap and reports discriminated results.

    Engine errors are turned into failed `Result`s instead of propagating;
    the heap is left unchanged whenever a command fails.

    Parameters
    ----------
    capacity : int
        Capacity given to every heap built by this controller.
    min_key, max_key : int
        Inclusive key range given to every heap built by this controller.
    """

    def __init__(
        self,
        capacity: int = MAX_CAPACITY,
        min_key: int = MIN_KEY,
        max_key: int = MAX_KEY
    ) -> None:
        self.capacity = capacity
        self.min_key = min_key
        self.max_key = max_key
        self.heap: Optional[DHeap] = None
        self._handlers = {
            Command.BUILD: self._build,
            Command.INSERT: self._insert,
            Command.EXTRACT_MAX: self._extract_max,
            Command.INCREASE_KEY: self._increase_key,
            Command.QUERY: self._query,
        }

    def execute(self, command: Command, *args: Any) -> Result:
        try:
            value = self._handlers[command](*args)
        except DHeapError as exc:
            logger.warning("%s rejected: %s", command.value, exc)
            return Result(command, error=exc.kind, message=str(exc))
        logger.debug("%s succeeded", command.value)
        return Result(command, value=value)

    def build(self, branching_factor: int, keys: Iterable[int] = ()) -> Result:
        return self.execute(Command.BUILD, branching_factor, keys)

    def insert(self, key: int) -> Result:
        return self.execute(Command.INSERT, key)

    def extract_max(self) -> Result:
        return self.execute(Command.EXTRACT_MAX)

    def increase_key(self, index: int, key: int) -> Result:
        return self.execute(Command.INCREASE_KEY, index, key)

    def query(self) -> Result:
        return self.execute(Command.QUERY)

    def _require_heap(self) -> DHeap:
        if self.heap is None:
            raise HeapNotBuiltError()
        return self.heap

    def _build(self, branching_factor: int, keys: Iterable[int]) -> int:
        self.heap = DHeap(
            keys,
            branching_factor,
            self.capacity,
            self.min_key,
            self.max_key
        )
        return len(self.heap)

    def _insert(self, key: int) -> None:
        self._require_heap().insert(key)

    def _extract_max(self) -> int:
        return self._require_heap().extract_max()

    def _increase_key(self, index: int, key: int) -> None:
        self._require_heap().increase_key(index, key)

    def _query(self) -> Snapshot:
        heap = self._require_heap()
        return Snapshot(
            branching_factor=heap.branching_factor,
            size=len(heap),
            capacity=heap.capacity,
            height=heap.height(),
            is_full=heap.is_full(),
            levels=tuple(tuple(level) for level in heap.levels()),
            keys=tuple(heap.to_list()),
        )
