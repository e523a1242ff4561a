from src.dheap.errors import (
    CapacityExceededError,
    DHeapError,
    ErrorKind,
    HeapIndexError,
    HeapNotBuiltError,
    HeapUnderflowError,
    InvalidBranchingFactorError,
    KeyDecreaseError,
    KeyOutOfRangeError,
)
from src.dheap.dheap import DHeap, tree_height
