"""Drag gesture state and drop-index resolution from row geometry."""

import logging
from dataclasses import dataclass
from typing import Sequence

import style


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Box:
    """Vertical extent of one rendered row."""
    top: float
    bottom: float

    @property
    def middle(self) -> float:
        return (self.top + self.bottom) / 2


def resolve_index(boxes: Sequence[Box], pointer_y: float) -> int:
    """
    Map a pointer Y coordinate to an insertion index.

    The result is the first row (top to bottom) whose midpoint lies strictly
    below the pointer, or len(boxes) when the pointer is below every row.
    """
    for i, box in enumerate(boxes):
        if box.middle > pointer_y:
            return i
    return len(boxes)


def auto_scroll_step(
    pointer_y: float,
    view_top: float,
    view_bottom: float,
    threshold: int = style.SCROLL_THRESHOLD,
    speed: int = style.SCROLL_SPEED,
) -> int:
    """Scroll delta to apply while dragging near an edge of the viewport."""
    if pointer_y - view_top < threshold:
        return -speed
    if view_bottom - pointer_y < threshold:
        return speed
    return 0


class DragSession:
    """Which item is being dragged, and from which list. Idle when both are None."""

    def __init__(self):
        self._item_id: str | None = None
        self._source_list_id: str | None = None

    def __repr__(self):
        if not self.is_active:
            return "DragSession(idle)"
        return f"DragSession({self._item_id!r} from {self._source_list_id!r})"

    @property
    def is_active(self) -> bool:
        return self._item_id is not None

    @property
    def item_id(self) -> str | None:
        return self._item_id

    @property
    def source_list_id(self) -> str | None:
        return self._source_list_id

    def is_dragging(self, item_id: str) -> bool:
        return self.is_active and self._item_id == item_id

    def start(self, item_id: str, source_list_id: str) -> None:
        if self.is_active:
            logger.debug("Replacing %r with a new drag of %r", self, item_id)
        self._item_id = item_id
        self._source_list_id = source_list_id
        logger.debug("Drag started: %r", self)

    def end(self) -> None:
        if self.is_active:
            logger.debug("Drag ended: %r", self)
        self._item_id = None
        self._source_list_id = None
