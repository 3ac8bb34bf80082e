from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from ..errors import InvalidItem
from .candidates import find_candidates
from .notify import MatchNotifier, NullNotifier
from .recorder import DEFAULT_METHOD, DEFAULT_THRESHOLD, record_matches
from .records import ItemRecord, MatchRecord, utcnow
from .scoring import confidence
from .stores import ItemStore, MatchStore

logger = logging.getLogger(__name__)


class MatchingEngine:
    """Runs matching for newly created items.

    The engine owns no storage: the item store is read, the match store is
    appended to, and the notifier receives whatever was created.
    """

    def __init__(
        self,
        items: ItemStore,
        matches: MatchStore,
        notifier: Optional[MatchNotifier] = None,
        *,
        threshold: float = DEFAULT_THRESHOLD,
        method: str = DEFAULT_METHOD,
        candidate_limit: Optional[int] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.items = items
        self.matches = matches
        self.notifier = notifier or NullNotifier()
        self.threshold = threshold
        self.method = method
        self.candidate_limit = candidate_limit
        self.clock = clock

    def score(self, a: ItemRecord, b: ItemRecord) -> float:
        return confidence(a, b)

    def candidates_for(self, item: ItemRecord) -> List[ItemRecord]:
        pool = self.items.list_active(item.type.opposite, item.category)
        return find_candidates(item, pool, limit=self.candidate_limit)

    def on_item_created(self, item: ItemRecord) -> List[MatchRecord]:
        if not isinstance(item, ItemRecord):
            raise InvalidItem(f"expected ItemRecord, got {type(item).__name__}")
        if not item.is_active:
            logger.info("item %s is %s, skipping matching", item.id, item.status.value)
            return []

        candidates = self.candidates_for(item)
        created = record_matches(
            item,
            candidates,
            self.matches,
            threshold=self.threshold,
            method=self.method,
            clock=self.clock,
        )
        logger.info(
            "matching for %s item %s: %d candidates, %d matches",
            item.type.value, item.id, len(candidates), len(created),
        )
        if created:
            try:
                self.notifier.notify(item, created)
            except Exception:
                # Delivery is fire-and-forget; the matches are already stored
                logger.exception("match notification failed for item %s", item.id)
        return created
