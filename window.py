"""Main application window: two task columns side by side."""

import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QFrame
)
from PySide6.QtCore import Qt, Signal, QTimer
from PySide6.QtGui import QKeySequence, QShortcut

import storage
import style
from data import BRAIN_DUMP, TODO_TODAY, NotFound
from list_widget import TodoListWidget
from reorder import DragController


logger = logging.getLogger(__name__)


class TaskColumn(QFrame):
    """Title, an add-item form and the list view for one list."""
    submitted = Signal(str, str)   # list_id, raw text

    def __init__(self, list_id: str, controller: DragController, parent=None):
        super().__init__(parent)
        self.list_id = list_id
        self.setObjectName("taskColumn")
        self.setStyleSheet(
            f"#taskColumn {{ background: {style.COLUMN_BG}; border-radius: 12px; }}"
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        title = QLabel(style.COLUMN_TITLES[list_id].upper(), self)
        title.setStyleSheet(
            f"QLabel {{ color: {style.COLUMN_TITLE_COLOR}; font-size: 12px;"
            "  font-weight: 500; letter-spacing: 1px; }"
        )
        layout.addWidget(title)

        form = QHBoxLayout()
        self.input = QLineEdit(self)
        self.input.setPlaceholderText(style.INPUT_PLACEHOLDER)
        self.input.returnPressed.connect(self._submit)
        self.add_button = QPushButton("+", self)
        self.add_button.setFixedSize(32, 32)
        self.add_button.setStyleSheet(
            f"QPushButton {{ background: {style.ADD_BUTTON_BG}; color: white;"
            "  border-radius: 8px; font-size: 16px; }"
            f"QPushButton:hover {{ background: {style.ADD_BUTTON_HOVER_BG}; }}"
        )
        self.add_button.clicked.connect(self._submit)
        form.addWidget(self.input)
        form.addWidget(self.add_button)
        layout.addLayout(form)

        self.list_widget = TodoListWidget(
            list_id, controller, ranked=(list_id == TODO_TODAY), parent=self
        )
        layout.addWidget(self.list_widget)

    def _submit(self):
        self.submitted.emit(self.list_id, self.input.text())


class MainWindow(QMainWindow):
    def __init__(self, data_path: Path = storage.DEFAULT_PATH):
        super().__init__()
        self.setWindowTitle(style.WINDOW_TITLE)
        self.resize(*style.WINDOW_SIZE)

        self._data_path = data_path
        self._board = storage.load_board(data_path)
        self._controller = DragController(self._board, on_change=self._on_board_changed)
        self._save_pending = False

        QShortcut(QKeySequence.StandardKey.Save, self, self._save)

        self._build_ui()

    # ------------------------------------------------------------------ #
    # UI construction                                                      #
    # ------------------------------------------------------------------ #

    def _build_ui(self):
        central = QWidget()
        central.setStyleSheet(f"background: {style.WINDOW_BG};")
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(24, 24, 24, 24)
        root.setSpacing(24)

        heading = QLabel(style.WINDOW_TITLE)
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        heading.setStyleSheet(
            f"QLabel {{ color: {style.HEADING_COLOR}; font-size: 22px; font-weight: 300; }}"
        )
        root.addWidget(heading)

        columns = QHBoxLayout()
        columns.setSpacing(24)
        self._columns: dict[str, TaskColumn] = {}
        for list_id in (BRAIN_DUMP, TODO_TODAY):
            column = TaskColumn(list_id, self._controller)
            column.submitted.connect(self._on_submitted)
            column.list_widget.delete_requested.connect(
                lambda item_id, list_id=list_id: self._on_delete_requested(list_id, item_id)
            )
            self._columns[list_id] = column
            columns.addWidget(column)
        root.addLayout(columns)

    def list_widget(self, list_id: str) -> TodoListWidget:
        return self._columns[list_id].list_widget

    @property
    def board(self):
        return self._board

    # ------------------------------------------------------------------ #
    # Input surface                                                        #
    # ------------------------------------------------------------------ #

    def _on_submitted(self, list_id: str, text: str) -> None:
        item = self._board.add_item(list_id, text)
        if item is None:
            return
        self._columns[list_id].input.clear()
        self.list_widget(list_id).refresh()
        self._schedule_save()

    def _on_delete_requested(self, list_id: str, item_id: str) -> None:
        try:
            self._board.delete_item(list_id, item_id)
        except NotFound as exc:
            logger.info("Delete ignored: %s", exc)
            return
        self.list_widget(list_id).refresh()
        self._schedule_save()

    # ------------------------------------------------------------------ #
    # Drag results                                                         #
    # ------------------------------------------------------------------ #

    def _on_board_changed(self, committed: bool) -> None:
        for column in self._columns.values():
            column.list_widget.refresh()
        if committed:
            self._schedule_save()

    # ------------------------------------------------------------------ #
    # Persistence                                                          #
    # ------------------------------------------------------------------ #

    def _schedule_save(self) -> None:
        """Coalesce saves into one write on the next event-loop pass."""
        if self._save_pending:
            return
        self._save_pending = True
        QTimer.singleShot(0, self._save)

    def _save(self):
        self._save_pending = False
        storage.save_board(self._board, self._data_path)

    def closeEvent(self, event):
        self._save()
        event.accept()
