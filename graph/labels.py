"""
labels.py — Sequential Node Labels
===================================
Hands out "Node 1", "Node 2", … for freshly created nodes.

One NodeLabeler belongs to one editing session; pass it to whatever
creates nodes rather than sharing a module-level counter.
"""


class NodeLabeler:
    def __init__(self, prefix: str = "Node", start: int = 1):
        self.prefix = prefix
        self._start = start
        self._next  = start

    def next_label(self) -> str:
        label = f"{self.prefix} {self._next}"
        self._next += 1
        return label

    def reset(self) -> None:
        """Start numbering again (e.g. after the canvas is cleared)."""
        self._next = self._start

    @property
    def issued(self) -> int:
        return self._next - self._start
