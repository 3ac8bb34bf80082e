from __future__ import annotations

from typing import Iterable, List, Optional

from .records import ItemRecord, ItemStatus


def is_candidate(new_item: ItemRecord, other: ItemRecord) -> bool:
    return (
        other.type is new_item.type.opposite
        and other.category == new_item.category
        and other.status is ItemStatus.ACTIVE
        and other.id != new_item.id
    )


def find_candidates(new_item: ItemRecord, all_items: Iterable[ItemRecord], limit: Optional[int] = None) -> List[ItemRecord]:
    """Active items of the opposite type in the same category, in input order."""
    out: List[ItemRecord] = []
    for other in all_items:
        if limit is not None and len(out) >= limit:
            break
        if is_candidate(new_item, other):
            out.append(other)
    return out
