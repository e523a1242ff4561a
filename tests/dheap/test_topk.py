from src.dheap.dheap import DHeap
from src.dheap.topk import get_topk


class TestGetTopK:
    def test_get_topk_with_negative_k(self):
        heap = DHeap([10, 5, 3])
        result = get_topk(heap, -1)
        assert result == []

    def test_get_topk_with_empty_heap(self):
        heap = DHeap()
        result = get_topk(heap, 5)
        assert result == []

    def test_get_topk(self):
        heap = DHeap([10, 5, 15, 1, 20])
        result = get_topk(heap, 3)
        expected = [20, 15, 10]
        assert result == expected

    def test_get_topk_does_not_mutate(self):
        heap = DHeap([10, 5, 15, 1, 20], branching_factor=3)
        before = heap.to_list()
        get_topk(heap, 4)
        assert heap.to_list() == before

    def test_get_topk_with_k_larger_than_heap(self):
        heap = DHeap([2, 9, 4])
        assert get_topk(heap, 10) == [9, 4, 2]

    def test_get_topk_with_duplicate_keys(self):
        heap = DHeap([10, 10, 5, 15])
        result = get_topk(heap, 3)
        assert result == [15, 10, 10]

    def test_get_topk_with_negative_keys(self):
        heap = DHeap([-10, 0, 5, -5])
        assert get_topk(heap, 2) == [5, 0]
