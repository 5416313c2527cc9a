"""Tests for the list view and main window."""

import pytest

from data import BRAIN_DUMP, TODO_TODAY, Board, Item, OrderedList
from item_widget import ItemWidget
from list_widget import TodoListWidget
from reorder import DragController


@pytest.fixture
def board():
    b = Board()
    b.lists[TODO_TODAY] = OrderedList(TODO_TODAY, [Item("a", "first"), Item("b", "second")])
    return b


def test_list_widget_renders_model(qapp, board):
    widget = TodoListWidget(TODO_TODAY, DragController(board), ranked=True)
    assert widget.all_ids() == ["a", "b"]
    assert widget.row_widget(0).text() == "first"
    assert widget.row_widget(1).handle.text() == "2"
    assert len(widget.geometry_snapshot()) == 2


def test_brain_dump_rows_show_grip(qapp, board):
    board.add_item(BRAIN_DUMP, "idea")
    widget = TodoListWidget(BRAIN_DUMP, DragController(board))
    assert widget.row_widget(0).handle.text() == "⋮⋮"


def test_refresh_follows_model_and_marks_dragged_row(qapp, board):
    controller = DragController(board)
    widget = TodoListWidget(TODO_TODAY, controller)

    controller.start("b", TODO_TODAY)
    board.get(TODO_TODAY).insert_at(0, board.get(TODO_TODAY).remove_by_id("b"))
    widget.refresh()
    assert widget.all_ids() == ["b", "a"]
    assert widget.row_widget(0).is_dragging()
    assert not widget.row_widget(1).is_dragging()

    controller.cancel()
    widget.refresh()
    assert not widget.row_widget(0).is_dragging()


def test_delete_button_emits_item_id(qapp, board):
    widget = TodoListWidget(TODO_TODAY, DragController(board))
    seen = []
    widget.delete_requested.connect(seen.append)
    widget.row_widget(1).delete_button.click()
    assert seen == ["b"]


def test_item_widget_dragging_flag(qapp):
    w = ItemWidget("text")
    w.set_dragging(True)
    assert w.is_dragging()
    w.set_dragging(False)
    assert not w.is_dragging()


def test_window_add_and_delete(qapp, tmp_path):
    from window import MainWindow
    import storage

    path = tmp_path / "data.toml"
    window = MainWindow(path)
    column = window._columns[BRAIN_DUMP]

    column.input.setText("   ")
    column.add_button.click()
    assert window.board.total() == 0

    column.input.setText("  write report ")
    column.add_button.click()
    lst = window.board.get(BRAIN_DUMP)
    assert [item.text for item in lst] == ["write report"]
    assert column.input.text() == ""
    assert window.list_widget(BRAIN_DUMP).all_ids() == lst.ids()

    window.list_widget(BRAIN_DUMP).row_widget(0).delete_button.click()
    assert window.board.total() == 0

    window._save()
    assert storage.load_board(path).total() == 0


def test_window_saves_on_close(qapp, tmp_path):
    from window import MainWindow
    import storage

    path = tmp_path / "data.toml"
    window = MainWindow(path)
    window.show()
    window.board.add_item(TODO_TODAY, "persist me")
    window.close()

    loaded = storage.load_board(path)
    assert [item.text for item in loaded.get(TODO_TODAY)] == ["persist me"]


# ---------------------------------------------------------------------- #
# Drag events and saving                                                 #
# ---------------------------------------------------------------------- #

def _seeded_window(tmp_path):
    from window import MainWindow
    import storage

    path = tmp_path / "data.toml"
    seed = Board()
    seed.lists[BRAIN_DUMP] = OrderedList(BRAIN_DUMP, [Item("a", "first"), Item("b", "second")])
    storage.save_board(seed, path)
    return MainWindow(path), path


def _drag_mime():
    from PySide6.QtCore import QByteArray, QMimeData
    from list_widget import _MIME_TYPE

    mime = QMimeData()
    mime.setData(_MIME_TYPE, QByteArray(b"x|y"))
    return mime


def _move_event(mime, y):
    from PySide6.QtCore import QPoint, Qt
    from PySide6.QtGui import QDragMoveEvent

    return QDragMoveEvent(
        QPoint(10, y), Qt.DropAction.MoveAction, mime,
        Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier,
    )


def _drop_event(mime, y):
    from PySide6.QtCore import QPointF, Qt
    from PySide6.QtGui import QDropEvent

    return QDropEvent(
        QPointF(10, y), Qt.DropAction.MoveAction, mime,
        Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier,
    )


def test_drop_into_other_list_saves_and_refreshes(qapp, tmp_path):
    import storage

    window, path = _seeded_window(tmp_path)
    mime = _drag_mime()
    window._controller.start("a", BRAIN_DUMP)
    window.list_widget(TODO_TODAY).dropEvent(_drop_event(mime, 0))
    qapp.processEvents()

    assert not window._controller.session.is_active
    assert window.list_widget(BRAIN_DUMP).all_ids() == ["b"]
    assert window.list_widget(TODO_TODAY).all_ids() == ["a"]
    saved = storage.load_board(path)
    assert saved.get(BRAIN_DUMP).ids() == ["b"]
    assert saved.get(TODO_TODAY).ids() == ["a"]


def test_live_hover_is_saved_only_when_the_drop_lands(qapp, tmp_path):
    import storage

    window, path = _seeded_window(tmp_path)
    before = path.read_bytes()
    mime = _drag_mime()
    brain = window.list_widget(BRAIN_DUMP)

    window._controller.start("a", BRAIN_DUMP)
    brain.dragMoveEvent(_move_event(mime, 10_000))
    qapp.processEvents()
    assert brain.all_ids() == ["b", "a"]
    assert path.read_bytes() == before

    brain.dropEvent(_drop_event(mime, 10_000))
    qapp.processEvents()
    assert storage.load_board(path).get(BRAIN_DUMP).ids() == ["b", "a"]


def test_hover_over_other_list_changes_nothing(qapp, tmp_path):
    window, path = _seeded_window(tmp_path)
    before = path.read_bytes()
    mime = _drag_mime()
    window._controller.start("a", BRAIN_DUMP)
    window.list_widget(TODO_TODAY).dragMoveEvent(_move_event(mime, 0))
    qapp.processEvents()

    assert window.list_widget(BRAIN_DUMP).all_ids() == ["a", "b"]
    assert window.list_widget(TODO_TODAY).all_ids() == []
    assert path.read_bytes() == before


def test_saves_within_one_pass_are_merged(qapp, tmp_path, monkeypatch):
    import storage

    window, path = _seeded_window(tmp_path)
    qapp.processEvents()
    calls = []
    monkeypatch.setattr(storage, "save_board", lambda board, path: calls.append(path))

    window._columns[TODO_TODAY].input.setText("one")
    window._columns[TODO_TODAY].add_button.click()
    window._columns[TODO_TODAY].input.setText("two")
    window._columns[TODO_TODAY].add_button.click()
    assert calls == []

    qapp.processEvents()
    assert calls.count(path) == 1
