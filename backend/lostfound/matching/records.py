from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union

from ..errors import InvalidItem

ItemId = Union[int, str]
UserId = Union[int, str]


class ItemType(str, Enum):
    LOST = "lost"
    FOUND = "found"

    @property
    def opposite(self) -> "ItemType":
        return ItemType.FOUND if self is ItemType.LOST else ItemType.LOST


class ItemStatus(str, Enum):
    ACTIVE = "active"
    RECOVERED = "recovered"
    REMOVED = "removed"


class MatchStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _required_text(name: str, value: Any) -> str:
    if value is None:
        raise InvalidItem(f"{name} is required")
    if not isinstance(value, str):
        raise InvalidItem(f"{name} must be a string")
    if not value.strip():
        raise InvalidItem(f"{name} must not be blank")
    return value


def _enum_value(enum_cls, name: str, value: Any):
    if value is None:
        raise InvalidItem(f"{name} is required")
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidItem(f"{name} must be one of: {allowed}") from None


@dataclass(frozen=True)
class ItemRecord:
    """A lost/found report as seen by the matching engine.

    Field presence is checked here so the scorer never compares against
    placeholder empty strings.
    """

    id: ItemId
    type: ItemType
    category: str
    title: str
    description: str
    location: str = ""
    status: ItemStatus = ItemStatus.ACTIVE
    owner_id: Optional[UserId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.id is None:
            raise InvalidItem("id is required")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "type", _enum_value(ItemType, "type", self.type))
        object.__setattr__(self, "status", _enum_value(ItemStatus, "status", self.status))
        for name in ("category", "title", "description"):
            _required_text(name, getattr(self, name))
        if self.location is None:
            object.__setattr__(self, "location", "")
        elif not isinstance(self.location, str):
            raise InvalidItem("location must be a string")

    @property
    def is_active(self) -> bool:
        return self.status is ItemStatus.ACTIVE


@dataclass(frozen=True)
class MatchRecord:
    """One scored association between a lost item and a found item."""

    lost_item_id: ItemId
    found_item_id: ItemId
    confidence: float
    status: MatchStatus = MatchStatus.PENDING
    method: str = "ai"
    created_at: datetime = field(default_factory=utcnow)
    id: Optional[ItemId] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must lie in [0, 1], got {self.confidence!r}")
        if self.lost_item_id == self.found_item_id:
            raise ValueError("an item cannot be matched with itself")
        object.__setattr__(self, "status", MatchStatus(self.status))

    def other_item_id(self, item_id: ItemId) -> ItemId:
        return self.found_item_id if item_id == self.lost_item_id else self.lost_item_id

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "lostItemId": self.lost_item_id,
            "foundItemId": self.found_item_id,
            "confidence": self.confidence,
            "status": self.status.value,
            "method": self.method,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
