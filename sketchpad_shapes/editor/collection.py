"""
Shape Collection Module
=======================

Ordered shape stack with a single selection pointer.

Design:
- Insertion order = paint order (last inserted is topmost)
- Selection is an Optional[str] shape id, never a global
- Every selection change goes through select()
"""

from typing import Dict, Iterator, List, Optional

from sketchpad_shapes.geometry.shapes import Shape


class ShapeCollection:
    """
    Ordered collection of shapes with at most one selected shape.

    State:
        shapes: bottom-most first
        selected_id: id of the selected shape, or None

    Usage:
        collection = ShapeCollection()
        collection.add(rectangle)
        hit = collection.hit_test(120, 40)
        collection.select(hit)
    """

    def __init__(self):
        """Initialize an empty collection."""
        self._shapes: List[Shape] = []
        self._selected_id: Optional[str] = None

    @property
    def shapes(self) -> List[Shape]:
        """Snapshot of the shapes, bottom-most first."""
        return list(self._shapes)

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected(self) -> Optional[Shape]:
        """The selected shape, if any."""
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    def add(self, shape: Shape) -> Shape:
        """Append a shape on top of the stack."""
        shape.is_selected = False
        self._shapes.append(shape)
        return shape

    def get(self, shape_id: str) -> Optional[Shape]:
        """Look up a shape by id."""
        for shape in self._shapes:
            if shape.id == shape_id:
                return shape
        return None

    def at(self, index: int) -> Optional[Shape]:
        """Shape at ``index`` (insertion order), None if out of range."""
        if 0 <= index < len(self._shapes):
            return self._shapes[index]
        return None

    def index_of(self, shape: Shape) -> Optional[int]:
        for index, candidate in enumerate(self._shapes):
            if candidate is shape:
                return index
        return None

    def select(self, shape: Optional[Shape]) -> None:
        """
        Move the selection to ``shape`` (None clears it).

        The previously selected shape is unflagged before the new one is
        flagged, so at most one shape is ever selected. Shapes that are not
        members of the collection clear the selection.
        """
        previous = self.selected
        if previous is not None:
            previous.is_selected = False

        if shape is None or self.index_of(shape) is None:
            self._selected_id = None
            return

        shape.is_selected = True
        self._selected_id = shape.id

    def clear_selection(self) -> None:
        self.select(None)

    def remove(self, shape: Shape) -> bool:
        """
        Remove a shape; clears the selection if it was selected.

        Returns:
            True if the shape was a member
        """
        index = self.index_of(shape)
        if index is None:
            return False

        if shape.id == self._selected_id:
            self.select(None)
        del self._shapes[index]
        return True

    def hit_test(self, x: float, y: float) -> Optional[Shape]:
        """
        Topmost shape containing (x, y).

        Iterates last-inserted to first-inserted.
        """
        for shape in reversed(self._shapes):
            if shape.contains_point(x, y):
                return shape
        return None

    def clear(self) -> None:
        """Remove all shapes."""
        self.select(None)
        self._shapes.clear()

    def counts_by_kind(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for shape in self._shapes:
            counts[shape.kind.value] = counts.get(shape.kind.value, 0) + 1
        return counts

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes))

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, shape: object) -> bool:
        return any(candidate is shape for candidate in self._shapes)

    def __repr__(self) -> str:
        return f"ShapeCollection(shapes={len(self._shapes)}, selected={self._selected_id!r})"
