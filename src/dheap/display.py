from src.dheap.dheap import DHeap

RULE = "---------------------------"


def format_heap(heap: DHeap) -> str:
    """Render the heap level by level, followed by its flat array form."""
    if heap.is_empty():
        return "Heap is empty"

    lines = [f"Printing d-heap for d = {heap.branching_factor}", RULE]
    for depth, level in enumerate(heap.levels()):
        lines.append(f"Level {depth}:")
        lines.append(" ".join(str(key) for key in level))
        lines.append(RULE)
    lines.append("Printing as an array:")
    lines.append(",".join(str(key) for key in heap))
    return "\n".join(lines)
