from __future__ import annotations

import uuid
from dataclasses import replace
from threading import Lock
from typing import Dict, Iterable, List, Optional, Protocol

from .records import ItemId, ItemRecord, ItemStatus, ItemType, MatchRecord


class ItemStore(Protocol):
    def get(self, item_id: ItemId) -> Optional[ItemRecord]: ...

    def list_active(self, type: ItemType, category: str) -> List[ItemRecord]: ...


class MatchStore(Protocol):
    def append(self, match: MatchRecord) -> MatchRecord: ...


class InMemoryItemStore:
    """Dict-backed item store, iteration order is insertion order."""

    def __init__(self, items: Iterable[ItemRecord] = ()) -> None:
        self._items: Dict[ItemId, ItemRecord] = {}
        self._lock = Lock()
        for it in items:
            self.add(it)

    def add(self, item: ItemRecord) -> ItemRecord:
        with self._lock:
            self._items[item.id] = item
        return item

    def set_status(self, item_id: ItemId, status: ItemStatus) -> ItemRecord:
        with self._lock:
            item = replace(self._items[item_id], status=status)
            self._items[item_id] = item
        return item

    def get(self, item_id: ItemId) -> Optional[ItemRecord]:
        return self._items.get(item_id)

    def all(self) -> List[ItemRecord]:
        with self._lock:
            return list(self._items.values())

    def list_active(self, type: ItemType, category: str) -> List[ItemRecord]:
        return [
            it for it in self.all()
            if it.type is type and it.category == category and it.status is ItemStatus.ACTIVE
        ]


class InMemoryMatchStore:
    """Append-only match store assigning random hex ids."""

    def __init__(self) -> None:
        self._matches: List[MatchRecord] = []
        self._lock = Lock()

    def append(self, match: MatchRecord) -> MatchRecord:
        stored = replace(match, id=uuid.uuid4().hex)
        with self._lock:
            self._matches.append(stored)
        return stored

    def all(self) -> List[MatchRecord]:
        with self._lock:
            return list(self._matches)

    def for_item(self, item_id: ItemId) -> List[MatchRecord]:
        return [m for m in self.all() if item_id in (m.lost_item_id, m.found_item_id)]

    def __len__(self) -> int:
        return len(self._matches)
