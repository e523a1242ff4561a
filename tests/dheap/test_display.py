from src.dheap.dheap import DHeap
from src.dheap.display import RULE, format_heap


class TestFormatHeap:
    def test_empty(self):
        assert format_heap(DHeap()) == "Heap is empty"

    def test_levels(self):
        heap = DHeap([1, 2, 3, 4], branching_factor=3)
        assert format_heap(heap).splitlines() == [
            "Printing d-heap for d = 3",
            RULE,
            "Level 0:",
            "4",
            RULE,
            "Level 1:",
            "2 3 1",
            RULE,
            "Printing as an array:",
            "4,2,3,1",
        ]

    def test_partial_last_level(self):
        heap = DHeap([3, 1, 6, 5, 2, 4], branching_factor=2)
        lines = format_heap(heap).splitlines()
        assert lines[lines.index("Level 2:") + 1] == "1 2 3"
        assert lines[-1] == "6,5,4,1,2,3"
