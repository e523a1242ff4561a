from enum import Enum


class ErrorKind(str, Enum):
    UNDERFLOW = "underflow"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    KEY_DECREASE_REJECTED = "key_decrease_rejected"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    INVALID_BRANCHING_FACTOR = "invalid_branching_factor"
    KEY_OUT_OF_RANGE = "key_out_of_range"
    NOT_BUILT = "not_built"


class DHeapError(Exception):
    """
    Base class for errors raised by the heap engine.

    Every error is raised before the backing buffer is touched, so a caught
    `DHeapError` always leaves the heap exactly as it was.
    """
    kind: ErrorKind


class HeapUnderflowError(DHeapError, RuntimeError):
    kind = ErrorKind.UNDERFLOW

    def __init__(self) -> None:
        super().__init__("Heap underflow")


class HeapIndexError(DHeapError, IndexError):
    kind = ErrorKind.INDEX_OUT_OF_BOUNDS

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(
            f"Index {index} is out of heap bounds (size {size})"
        )


class KeyDecreaseError(DHeapError, ValueError):
    kind = ErrorKind.KEY_DECREASE_REJECTED

    def __init__(self, index: int, current: int, key: int) -> None:
        self.index = index
        self.current = current
        self.key = key
        super().__init__(
            f"Value at index {index} ({current}) is larger than the "
            f"new key {key}"
        )


class CapacityExceededError(DHeapError, OverflowError):
    kind = ErrorKind.CAPACITY_EXCEEDED

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"Heap is full (capacity {capacity})")


class InvalidBranchingFactorError(DHeapError, ValueError):
    kind = ErrorKind.INVALID_BRANCHING_FACTOR

    def __init__(self, branching_factor: int) -> None:
        self.branching_factor = branching_factor
        super().__init__(
            f"Branching factor must be >= 2, got {branching_factor}"
        )


class KeyOutOfRangeError(DHeapError, ValueError):
    kind = ErrorKind.KEY_OUT_OF_RANGE

    def __init__(self, key: int, min_key: int, max_key: int) -> None:
        self.key = key
        super().__init__(
            f"Key {key} is outside the range [{min_key}, {max_key}]"
        )


class HeapNotBuiltError(DHeapError, RuntimeError):
    kind = ErrorKind.NOT_BUILT

    def __init__(self) -> None:
        super().__init__("No heap has been built yet")
