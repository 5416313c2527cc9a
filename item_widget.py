"""Custom widget for a single task row: a drag handle, the text and a delete button."""

from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QLabel, QSizePolicy, QPushButton, QApplication,
    QGraphicsOpacityEffect
)
from PySide6.QtCore import Qt, Signal, QPoint

import style


class DragHandle(QLabel):
    """Grip strip (or rank badge) on the left of a row; dragging it starts a drag."""
    drag_requested = Signal()

    def __init__(self, rank: int | None = None, parent=None):
        super().__init__(parent)
        self._drag_start: QPoint | None = None
        self.setFixedWidth(style.ITEM_HANDLE_WIDTH)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self.setToolTip("Drag to reorder or move to the other list")
        self.set_rank(rank)

    def set_rank(self, rank: int | None) -> None:
        if rank is None:
            self.setText("⋮⋮")
            self.setStyleSheet(
                f"QLabel {{ color: {style.ITEM_HANDLE_COLOR}; font-weight: bold; }}"
                f"QLabel:hover {{ color: {style.ITEM_HANDLE_HOVER_COLOR}; }}"
            )
        else:
            self.setText(str(rank))
            self.setFixedHeight(style.ITEM_HANDLE_WIDTH)
            self.setStyleSheet(
                f"QLabel {{ background: {style.ITEM_BADGE_BG}; color: {style.ITEM_BADGE_COLOR};"
                f"  border-radius: {style.ITEM_HANDLE_WIDTH // 2}px; font-size: 11px; }}"
            )

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._drag_start = event.position().toPoint()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if (self._drag_start is not None
                and event.buttons() & Qt.MouseButton.LeftButton):
            dist = (event.position().toPoint() - self._drag_start).manhattanLength()
            if dist >= QApplication.startDragDistance():
                self._drag_start = None
                self.drag_requested.emit()
                return  # widget may be deleted by the time drag completes
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        self._drag_start = None
        super().mouseReleaseEvent(event)


class ItemWidget(QWidget):
    """A single task row: [handle | text | ×]."""
    drag_requested = Signal()
    delete_requested = Signal()

    def __init__(self, text: str, rank: int | None = None, parent=None):
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setObjectName("itemRow")
        self.setStyleSheet(
            f"#itemRow {{ background: {style.ITEM_BG}; border: 1px solid {style.ITEM_BORDER};"
            "  border-radius: 8px; }"
        )

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self.handle = DragHandle(rank, self)
        self.handle.drag_requested.connect(self.drag_requested)

        self.label = QLabel(text, self)
        self.label.setWordWrap(True)
        self.label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self.label.setStyleSheet(f"QLabel {{ color: {style.ITEM_TEXT_COLOR}; }}")

        self.delete_button = QPushButton("×", self)
        self.delete_button.setFlat(True)
        self.delete_button.setFixedSize(22, 22)
        self.delete_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.delete_button.setStyleSheet(
            f"QPushButton {{ color: {style.DELETE_BUTTON_COLOR}; border: none; font-size: 14px; }}"
            f"QPushButton:hover {{ color: {style.DELETE_BUTTON_HOVER_COLOR}; }}"
        )
        self.delete_button.clicked.connect(self.delete_requested)

        layout.addWidget(self.handle)
        layout.addWidget(self.label)
        layout.addWidget(self.delete_button)

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Minimum)

    def text(self) -> str:
        return self.label.text()

    def set_dragging(self, dragging: bool) -> None:
        if dragging:
            effect = QGraphicsOpacityEffect(self)
            effect.setOpacity(style.DRAGGING_OPACITY)
            self.setGraphicsEffect(effect)
        else:
            self.setGraphicsEffect(None)

    def is_dragging(self) -> bool:
        return self.graphicsEffect() is not None
