from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from ...extensions import db
from ...matching.notify import MatchEvent, match_events
from ...matching.records import ItemRecord, MatchRecord
from ...matching.stores import ItemStore
from ...models.notification import Notification
from . import bus

logger = logging.getLogger(__name__)


class BusNotifier:
    """Pushes match events to live sessions through the in-process bus."""

    def __init__(self, items: ItemStore, publish: Optional[Callable[..., int]] = None) -> None:
        self.items = items
        self._publish = publish

    def publish(self, recipient, event: dict) -> int:
        return (self._publish or bus.publish)(recipient, event)

    def notify(self, new_item: ItemRecord, matches: Sequence[MatchRecord]) -> None:
        for event in match_events(new_item, matches, self.items):
            try:
                self.deliver(event)
            except Exception:
                # One unreachable recipient must not silence the others
                logger.exception("delivery of match %s to user %s failed", event.match.id, event.recipient)

    def deliver(self, event: MatchEvent) -> None:
        delivered = self.publish(event.recipient, {"type": "new_match", **event.payload()})
        logger.debug("match %s delivered to %d session(s) of user %s", event.match.id, delivered, event.recipient)


class SqlNotifier(BusNotifier):
    """Stores an in-app notification row per event, then publishes it."""

    def __init__(self, items: ItemStore, session=None, publish: Optional[Callable[..., int]] = None) -> None:
        super().__init__(items, publish=publish)
        self.session = session or db.session

    def deliver(self, event: MatchEvent) -> None:
        pct = int(round(event.match.confidence * 100))
        n = Notification(
            user_id=event.recipient,
            match_id=event.match.id,
            channel="inapp",
            title="Potential match found",
            body=f"A {event.new_item.type.value} report may match your ‘{event.other_item.title}’ ({pct}% match).",
            payload=event.payload(),
            status="sent",
            sent_at=datetime.now(timezone.utc),
        )
        try:
            self.session.add(n)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("could not store notification for user %s", event.recipient)
            n = None
        self.publish(event.recipient, {
            "type": "new_match",
            **event.payload(),
            "notificationId": n.id if n is not None else None,
        })
