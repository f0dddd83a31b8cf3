"""Reorder Coordinator - tracks one drag session and commits it as a single reorder.

Invariants:
    - dragged_index and drag_over_index are both None between sessions
    - drag_over_index never equals dragged_index (hovering the source snaps back to None)
    - end() invokes on_reorder at most once, and only with two set, unequal indices
    - end() always resets both indices, whether or not a reorder happened

Design Decisions:
    - Consumes resolved integer indices only; raw pointer events stay in the presentation layer
    - A session ending with fewer than two indices is a cancelled drag, not an error
"""

from collections.abc import Callable


class ReorderCoordinator:
    """Per-dashboard drag state machine: start -> hover* -> end."""

    def __init__(self, on_reorder: Callable[[int, int], object]):
        self._on_reorder = on_reorder
        self.dragged_index: int | None = None
        self.drag_over_index: int | None = None

    @property
    def is_dragging(self) -> bool:
        return self.dragged_index is not None

    def start(self, index: int) -> None:
        self.dragged_index = index
        self.drag_over_index = None

    def hover(self, index: int) -> None:
        """Record the current drop target."""
        if self.dragged_index is None:
            return
        if index == self.dragged_index:
            self.drag_over_index = None
            return
        if self.drag_over_index != index:
            self.drag_over_index = index

    def leave(self) -> None:
        """Pointer left the current drop target."""
        self.drag_over_index = None

    def end(self) -> bool:
        """Commit the session; True when a reorder was invoked."""
        source, target = self.dragged_index, self.drag_over_index
        self.dragged_index = None
        self.drag_over_index = None
        if source is None or target is None or source == target:
            return False
        self._on_reorder(source, target)
        return True
