from src.dheap.dheap import DHeap


def get_topk(heap: DHeap, k: int) -> list[int]:
    """
    Function to get the top-K keys from a heap.

    The keys are drained from a copy of the heap, so the heap passed in is
    left untouched.

    Parameters
    ----------
    heap : DHeap
        A DHeap object
    k : int
        The number of 'top-K' keys to retrieve.

    Returns
    -------
    list[int]
        The 'top-K' keys, largest first.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    drained = heap.copy()
    return [drained.extract_max() for _ in range(min(k, len(drained)))]
