"""Apply drag moves to the lists: live same-list reorders and cross-list transfers."""

import logging
from typing import Callable, Sequence

from data import Board, Item, NotFound, OrderedList
from drag import Box, DragSession, resolve_index


logger = logging.getLogger(__name__)


def reorder(lst: OrderedList, item_id: str, target_index: int) -> bool:
    """
    Move *item_id* to *target_index* within *lst*.

    The target index is interpreted against the list with the item already
    removed. Returns False when the item is already there; raises NotFound
    when it is not in the list at all.
    """
    current = lst.index_of(item_id)
    if current < 0:
        raise NotFound(item_id, lst.name)
    if current == target_index:
        return False
    item = lst.items.pop(current)
    if lst.insert_at(target_index, item) == current:
        # Clamping put it straight back
        return False
    return True


def transfer(source: OrderedList, target: OrderedList, item_id: str, target_index: int) -> Item:
    """Move *item_id* from *source* into *target* at the clamped *target_index*."""
    item = source.remove_by_id(item_id)
    target.insert_at(target_index, item)
    return item


class DragController:
    """
    Routes gesture events to the resolver and the reorder functions.

    on_change(committed) is called with committed=False after each live
    reorder, and once with committed=True when a gesture that changed
    anything ends.
    """

    def __init__(self, board: Board, on_change: Callable[[bool], None] | None = None):
        self.board = board
        self.session = DragSession()
        self._on_change = on_change
        self._dirty = False

    def start(self, item_id: str, list_id: str) -> None:
        if self.session.is_active:
            # Live moves of the replaced gesture are already applied
            self._finish()
        self.session.start(item_id, list_id)

    def hover(self, list_id: str, boxes: Sequence[Box], pointer_y: float) -> bool:
        session = self.session
        if not session.is_active or session.source_list_id != list_id:
            return False
        index = resolve_index(boxes, pointer_y)
        try:
            moved = reorder(self.board.get(list_id), session.item_id, index)
        except NotFound:
            logger.info("Dragged item %r vanished from %r", session.item_id, list_id)
            return False
        if moved:
            self._dirty = True
            self._notify(False)
        return moved

    def drop(self, list_id: str | None, boxes: Sequence[Box] = (), pointer_y: float = 0) -> bool:
        session = self.session
        if not session.is_active:
            logger.debug("Drop on %r without an active drag ignored", list_id)
            return False
        moved = False
        if list_id is None:
            logger.debug("Dropped outside any list")
        else:
            index = resolve_index(boxes, pointer_y)
            source = self.board.get(session.source_list_id)
            try:
                if list_id == session.source_list_id:
                    moved = reorder(source, session.item_id, index)
                else:
                    transfer(source, self.board.get(list_id), session.item_id, index)
                    moved = True
            except NotFound as exc:
                logger.info("Drop ignored: %s", exc)
        self._dirty = self._dirty or moved
        self._finish()
        return moved

    def cancel(self) -> None:
        if self.session.is_active:
            self._finish()

    def _finish(self) -> None:
        self.session.end()
        if self._dirty:
            self._dirty = False
            self._notify(True)

    def _notify(self, committed: bool) -> None:
        if self._on_change is not None:
            self._on_change(committed)
