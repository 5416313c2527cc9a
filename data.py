"""In-memory data model for the two task lists."""

import uuid
from dataclasses import dataclass, field
from typing import Iterator


BRAIN_DUMP = "brainDump"
TODO_TODAY = "todoToday"
LIST_IDS = (BRAIN_DUMP, TODO_TODAY)


class NotFound(LookupError):
    """An item id was not present in the list it was looked up in."""

    def __init__(self, item_id: str, list_id: str | None = None):
        where = f" in {list_id!r}" if list_id else ""
        super().__init__(f"item {item_id!r} not found{where}")
        self.item_id = item_id
        self.list_id = list_id


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Item:
    id: str
    text: str


@dataclass
class OrderedList:
    name: str
    items: list[Item] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __contains__(self, item_id: object) -> bool:
        return self.index_of(item_id) >= 0

    def ids(self) -> list[str]:
        return [item.id for item in self.items]

    def append(self, item: Item) -> None:
        self.items.append(item)

    def index_of(self, item_id: str) -> int:
        for i, item in enumerate(self.items):
            if item.id == item_id:
                return i
        return -1

    def remove_by_id(self, item_id: str) -> Item:
        index = self.index_of(item_id)
        if index < 0:
            raise NotFound(item_id, self.name)
        return self.items.pop(index)

    def insert_at(self, index: int, item: Item) -> int:
        """Insert *item* at *index* clamped into [0, len]; returns the slot used."""
        index = max(0, min(index, len(self.items)))
        self.items.insert(index, item)
        return index


@dataclass
class Board:
    """The two fixed lists, keyed by list id."""
    lists: dict[str, OrderedList] = field(
        default_factory=lambda: {name: OrderedList(name) for name in LIST_IDS}
    )

    def get(self, list_id: str) -> OrderedList:
        return self.lists[list_id]

    def list_ids(self) -> list[str]:
        return list(self.lists)

    def total(self) -> int:
        return sum(len(lst) for lst in self.lists.values())

    def add_item(self, list_id: str, text: str) -> Item | None:
        text = text.strip()
        if not text:
            return None
        item = Item(id=new_id(), text=text)
        self.get(list_id).append(item)
        return item

    def delete_item(self, list_id: str, item_id: str) -> Item:
        return self.get(list_id).remove_by_id(item_id)
