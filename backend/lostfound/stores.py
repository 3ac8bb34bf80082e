from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from .errors import StorageUnavailable
from .extensions import db
from .matching.records import ItemId, ItemRecord, ItemStatus, ItemType, MatchRecord
from .models.item import Item
from .models.match import Match

logger = logging.getLogger(__name__)


class SqlItemStore:
    """Read-only view of the items table for the matching engine."""

    def __init__(self, session=None) -> None:
        self.session = session or db.session

    def get(self, item_id: ItemId) -> Optional[ItemRecord]:
        it = self.session.get(Item, item_id)
        return it.to_record() if it else None

    def list_active(self, type: ItemType, category: str) -> List[ItemRecord]:
        rows = (
            self.session.query(Item)
            .filter(
                Item.type == ItemType(type).value,
                Item.category == category,
                Item.status == ItemStatus.ACTIVE.value,
            )
            .order_by(Item.id.asc())
            .all()
        )
        return [it.to_record() for it in rows]


class SqlMatchStore:
    """Appends matches one commit at a time so earlier rows survive a later failure."""

    def __init__(self, session=None) -> None:
        self.session = session or db.session

    def append(self, match: MatchRecord) -> MatchRecord:
        row = Match.from_record(match)
        try:
            self.session.add(row)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("could not persist match %s/%s: %s", match.lost_item_id, match.found_item_id, e)
            raise StorageUnavailable("match store unavailable") from e
        return replace(match, id=row.id)

    def for_item(self, item_id: ItemId, limit: int | None = None) -> List[MatchRecord]:
        q = (
            self.session.query(Match)
            .filter(db.or_(Match.lost_item_id == item_id, Match.found_item_id == item_id))
            .order_by(Match.id.asc())
        )
        if limit is not None:
            q = q.limit(limit)
        return [m.to_record() for m in q.all()]

    def count_for_item(self, item_id: ItemId) -> int:
        return (
            self.session.query(db.func.count(Match.id))
            .filter(db.or_(Match.lost_item_id == item_id, Match.found_item_id == item_id))
            .scalar()
            or 0
        )
