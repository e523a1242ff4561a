import pytest

from src.dheap.commands import Command, HeapController, Result, Snapshot
from src.dheap.errors import ErrorKind


@pytest.fixture
def controller():
    controller = HeapController()
    controller.build(2, [3, 1, 6, 5, 2, 4])
    return controller


class TestHeapController:
    def test_commands_before_build(self):
        controller = HeapController()
        for command, args in [
            (Command.INSERT, (1,)),
            (Command.EXTRACT_MAX, ()),
            (Command.INCREASE_KEY, (0, 1)),
            (Command.QUERY, ()),
        ]:
            result = controller.execute(command, *args)
            assert not result.ok
            assert result.error is ErrorKind.NOT_BUILT
            assert result.command is command

    def test_build(self):
        controller = HeapController()
        result = controller.build(3, [5, 9, 1])
        assert result == Result(Command.BUILD, value=3)
        assert result.ok
        assert controller.heap.peek() == 9

    @pytest.mark.parametrize("branching_factor", [1, 0, -3])
    def test_build_rejects_branching_factor(self, branching_factor):
        controller = HeapController()
        result = controller.build(branching_factor, [1, 2])
        assert result.error is ErrorKind.INVALID_BRANCHING_FACTOR
        assert controller.heap is None

    def test_failed_rebuild_keeps_heap(self, controller):
        heap = controller.heap
        result = controller.build(1, [7])
        assert not result.ok
        assert controller.heap is heap

    def test_scenario(self, controller):
        result = controller.extract_max()
        assert result.ok
        assert result.value == 6

        assert controller.insert(10).ok
        snapshot = controller.query().value
        assert snapshot.keys[0] == 10
        assert snapshot.size == 6

        assert controller.increase_key(snapshot.size - 1, 999).ok
        assert controller.query().value.keys[0] == 999
        assert controller.heap._validate()

    def test_extract_max_underflow(self):
        controller = HeapController()
        controller.build(2)
        result = controller.extract_max()
        assert result.error is ErrorKind.UNDERFLOW
        assert result.value is None
        assert len(controller.heap) == 0

    def test_increase_key_errors(self, controller):
        before = controller.query().value.keys

        result = controller.increase_key(len(before), 50)
        assert result.error is ErrorKind.INDEX_OUT_OF_BOUNDS

        result = controller.increase_key(0, before[0] - 1)
        assert result.error is ErrorKind.KEY_DECREASE_REJECTED
        assert result.message

        assert controller.query().value.keys == before

    def test_insert_errors(self):
        controller = HeapController(capacity=2, min_key=0, max_key=9)
        controller.build(2, [4, 5])

        assert controller.insert(6).error is ErrorKind.CAPACITY_EXCEEDED
        assert controller.insert(10).error is ErrorKind.KEY_OUT_OF_RANGE
        assert controller.query().value.keys == (5, 4)

    def test_query(self):
        controller = HeapController(capacity=4)
        controller.build(3, [1, 2, 3, 4])
        snapshot = controller.query().value
        assert snapshot == Snapshot(
            branching_factor=3,
            size=4,
            capacity=4,
            height=1,
            is_full=True,
            levels=((4,), (2, 3, 1)),
            keys=(4, 2, 3, 1),
        )
