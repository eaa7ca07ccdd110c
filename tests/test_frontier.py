"""Tests for frontier disciplines."""

from algorithms.frontier import FifoFrontier, LifoFrontier, PriorityFrontier
from algorithms.step import QueueItem


def item(node_id, priority=0.0, cost=0.0):
    return QueueItem(node_id, (node_id,), (), cost, priority)


def drain_ids(frontier):
    out = []
    while frontier:
        out.append(frontier.pop().node_id)
    return out


class TestFifo:
    def test_insertion_order(self):
        f = FifoFrontier()
        for n in "abc":
            f.push(item(n))
        assert [i.node_id for i in f.items()] == ["a", "b", "c"]
        assert drain_ids(f) == ["a", "b", "c"]


class TestLifo:
    def test_last_pushed_first(self):
        f = LifoFrontier()
        for n in "abc":
            f.push(item(n))
        assert [i.node_id for i in f.items()] == ["c", "b", "a"]
        assert drain_ids(f) == ["c", "b", "a"]


class TestPriority:
    def test_min_first(self):
        f = PriorityFrontier()
        f.push(item("a", 3))
        f.push(item("b", 1))
        f.push(item("c", 2))
        assert drain_ids(f) == ["b", "c", "a"]

    def test_ties_broken_by_insertion(self):
        """Equal priorities come out in push order."""
        f = PriorityFrontier()
        for n in "dcba":
            f.push(item(n, 1.0))
        assert drain_ids(f) == ["d", "c", "b", "a"]

    def test_items_in_pop_order(self):
        f = PriorityFrontier()
        f.push(item("a", 5))
        f.push(item("b", 1))
        f.push(item("c", 5))
        assert [i.node_id for i in f.items()] == ["b", "a", "c"]
        assert len(f) == 3

    def test_injected_key(self):
        """A custom key overrides item.priority."""
        f = PriorityFrontier(key=lambda it: -it.cost)
        f.push(item("cheap", cost=1))
        f.push(item("dear", cost=9))
        assert drain_ids(f) == ["dear", "cheap"]

    def test_duplicates_kept(self):
        """The same node can sit in the heap more than once."""
        f = PriorityFrontier()
        f.push(item("a", 5))
        f.push(item("a", 2))
        assert len(f) == 2
        assert [i.priority for i in f.items()] == [2, 5]
