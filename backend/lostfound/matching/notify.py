from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence

from .records import ItemRecord, MatchRecord, UserId
from .stores import ItemStore


class MatchNotifier(Protocol):
    def notify(self, new_item: ItemRecord, matches: Sequence[MatchRecord]) -> None: ...


@dataclass(frozen=True)
class MatchEvent:
    """A new match addressed to the owner of the counterpart item."""

    recipient: UserId
    match: MatchRecord
    new_item: ItemRecord
    other_item: ItemRecord

    def payload(self) -> dict:
        return {
            "kind": "match",
            "match": self.match.to_dict(),
            "item": _item_summary(self.new_item),
            "targetItem": _item_summary(self.other_item),
        }


def _item_summary(it: ItemRecord) -> dict:
    return {
        "id": it.id,
        "type": it.type.value,
        "category": it.category,
        "title": it.title,
        "location": it.location,
    }


def match_events(new_item: ItemRecord, matches: Sequence[MatchRecord], items: ItemStore) -> List[MatchEvent]:
    """Resolve the counterpart of each match and address an event to its owner.

    Matches whose counterpart is gone or has no owner produce no event.
    """
    events: List[MatchEvent] = []
    for m in matches:
        other = items.get(m.other_item_id(new_item.id))
        if other is None or other.owner_id is None:
            continue
        events.append(MatchEvent(recipient=other.owner_id, match=m, new_item=new_item, other_item=other))
    return events


class NullNotifier:
    def notify(self, new_item: ItemRecord, matches: Sequence[MatchRecord]) -> None:
        return None
