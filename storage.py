"""Load and save the task lists as a TOML file, one array of tables per list."""

import contextlib
import logging
import os
import tomllib
import tomli_w
from pathlib import Path
from data import Board, Item, OrderedList, LIST_IDS

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path(os.environ.get("BRAINDUMP_FILE", Path.home() / ".braindump.toml"))


class PersistenceFailure(Exception):
    """The data file could not be read or written."""


def _read(path: Path) -> dict:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise PersistenceFailure(f"cannot read {path}: {exc}") from exc


def _write(raw: dict, path: Path) -> None:
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("wb") as f:
            tomli_w.dump(raw, f)
        tmp.replace(path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise PersistenceFailure(f"cannot write {path}: {exc}") from exc


def _parse_items(list_id: str, entries) -> OrderedList:
    lst = OrderedList(list_id)
    if not isinstance(entries, list):
        logger.warning("Ignoring malformed list %r", list_id)
        return lst
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        item_id = entry.get("id")
        text = entry.get("text")
        if not isinstance(item_id, str) or not isinstance(text, str):
            continue
        text = text.strip()
        if not item_id or not text or item_id in lst:
            continue
        lst.append(Item(id=item_id, text=text))
    return lst


def load(list_id: str, path: Path = DEFAULT_PATH) -> OrderedList:
    try:
        raw = _read(path)
    except PersistenceFailure as exc:
        logger.warning("%s; starting with an empty %r", exc, list_id)
        return OrderedList(list_id)
    return _parse_items(list_id, raw.get(list_id, []))


def save(list_id: str, lst: OrderedList, path: Path = DEFAULT_PATH) -> None:
    """Write one list, keeping the others already in the file. Failures are only logged."""
    try:
        try:
            raw = _read(path)
        except PersistenceFailure:
            raw = {}
        raw[list_id] = [{"id": item.id, "text": item.text} for item in lst]
        _write(raw, path)
    except PersistenceFailure as exc:
        logger.warning("Save of %r failed: %s", list_id, exc)


def load_board(path: Path = DEFAULT_PATH) -> Board:
    board = Board()
    seen: set[str] = set()
    for list_id in LIST_IDS:
        lst = load(list_id, path)
        # An id may live in only one list; the first list wins
        lst.items = [item for item in lst if item.id not in seen]
        seen.update(lst.ids())
        board.lists[list_id] = lst
    return board


def save_board(board: Board, path: Path = DEFAULT_PATH) -> None:
    for list_id in board.list_ids():
        save(list_id, board.get(list_id), path)
