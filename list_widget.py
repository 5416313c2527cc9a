"""List view for one column: renders the rows and routes drag events to the controller."""

import logging

from PySide6.QtWidgets import QListWidget, QListWidgetItem, QAbstractItemView, QSizePolicy
from PySide6.QtCore import Qt, Signal, QMimeData, QByteArray, QTimer
from PySide6.QtGui import QDrag, QPainter, QColor

import style
from drag import Box, auto_scroll_step
from item_widget import ItemWidget
from reorder import DragController


logger = logging.getLogger(__name__)

_MIME_TYPE = "application/x-braindump-item"
_ID_ROLE = Qt.ItemDataRole.UserRole


class TodoListWidget(QListWidget):
    """
    Displays one OrderedList as ItemWidgets inside QListWidgetItems.

    The widget owns no order of its own: every change goes through the
    DragController or the window and the rows are rebuilt from the model.
    """
    delete_requested = Signal(str)   # item id

    def __init__(self, list_id: str, controller: DragController, ranked: bool = False, parent=None):
        super().__init__(parent)
        self.list_id = list_id
        self._controller = controller
        self._ranked = ranked

        self.setDragDropMode(QAbstractItemView.DragDropMode.DropOnly)
        self.setAcceptDrops(True)
        self.setDragEnabled(False)   # drags start from the row handle only
        self.setAutoScroll(False)    # see _auto_scroll
        self.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setSpacing(4)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setStyleSheet(
            "QListWidget { border: none; background: transparent; }"
            "QListWidget::item { background: transparent; border: none; }"
        )

        self.refresh()

    # ------------------------------------------------------------------ #
    # Model access                                                         #
    # ------------------------------------------------------------------ #

    @property
    def model_list(self):
        return self._controller.board.get(self.list_id)

    def all_ids(self) -> list[str]:
        return [self.item(i).data(_ID_ROLE) for i in range(self.count())]

    def row_widget(self, index: int) -> ItemWidget | None:
        item = self.item(index)
        return self.itemWidget(item) if item else None

    def refresh(self) -> None:
        """Rebuild the rows from the model, keeping the scroll position."""
        scroll = self.verticalScrollBar().value()
        self.clear()
        session = self._controller.session
        for rank, task in enumerate(self.model_list, start=1):
            row = self._append_row(task.id, task.text, rank if self._ranked else None)
            row.set_dragging(session.is_dragging(task.id))
        self.verticalScrollBar().setValue(scroll)
        self.viewport().update()

    def geometry_snapshot(self) -> list[Box]:
        """Row extents in viewport coordinates, top to bottom."""
        boxes = []
        for i in range(self.count()):
            rect = self.visualItemRect(self.item(i))
            boxes.append(Box(rect.top(), rect.bottom() + 1))
        return boxes

    # ------------------------------------------------------------------ #
    # Drag and drop overrides                                              #
    # ------------------------------------------------------------------ #

    def dragEnterEvent(self, event):
        if event.mimeData().hasFormat(_MIME_TYPE):
            event.acceptProposedAction()
        else:
            event.ignore()

    def dragMoveEvent(self, event):
        if not event.mimeData().hasFormat(_MIME_TYPE):
            event.ignore()
            return
        y = event.position().y()
        self._auto_scroll(y)
        self._controller.hover(self.list_id, self.geometry_snapshot(), y)
        event.acceptProposedAction()

    def dropEvent(self, event):
        if not event.mimeData().hasFormat(_MIME_TYPE):
            event.ignore()
            return
        self._controller.drop(self.list_id, self.geometry_snapshot(), event.position().y())
        event.acceptProposedAction()

    def paintEvent(self, event):
        super().paintEvent(event)
        if self.count():
            return
        painter = QPainter(self.viewport())
        painter.setPen(QColor(style.EMPTY_PLACEHOLDER_COLOR))
        font = painter.font()
        font.setItalic(True)
        painter.setFont(font)
        painter.drawText(
            self.viewport().rect().adjusted(0, 24, 0, 0),
            Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
            style.EMPTY_PLACEHOLDER,
        )
        painter.end()

    # ------------------------------------------------------------------ #
    # Private helpers                                                      #
    # ------------------------------------------------------------------ #

    def _append_row(self, item_id: str, text: str, rank: int | None) -> ItemWidget:
        item = QListWidgetItem()
        item.setData(_ID_ROLE, item_id)
        self.addItem(item)
        w = ItemWidget(text, rank, self)
        w.drag_requested.connect(lambda: self._on_drag_requested(item_id))
        w.delete_requested.connect(lambda: self.delete_requested.emit(item_id))
        self.setItemWidget(item, w)
        item.setSizeHint(w.sizeHint())
        return w

    def _on_drag_requested(self, item_id: str) -> None:
        # Leave the handle's mouse handler before the row can be rebuilt
        QTimer.singleShot(0, lambda: self._exec_drag(item_id))

    def _exec_drag(self, item_id: str) -> None:
        if self.model_list.index_of(item_id) < 0:
            return
        mime = QMimeData()
        mime.setData(_MIME_TYPE, QByteArray(f"{self.list_id}|{item_id}".encode()))

        self._controller.start(item_id, self.list_id)
        self.refresh()

        drag = QDrag(self)
        drag.setMimeData(mime)
        drag.exec(Qt.DropAction.MoveAction)

        if self._controller.session.is_active:
            # Released outside both lists
            self._controller.drop(None)
        self.refresh()

    def _auto_scroll(self, y: float) -> None:
        step = auto_scroll_step(y, 0, self.viewport().height())
        if step:
            bar = self.verticalScrollBar()
            bar.setValue(bar.value() + step)
