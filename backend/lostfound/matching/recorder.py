from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, List

from .candidates import is_candidate
from .records import ItemRecord, ItemType, MatchRecord, MatchStatus, utcnow
from .scoring import confidence
from .stores import MatchStore

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.6
DEFAULT_METHOD = "ai"


def record_matches(
    new_item: ItemRecord,
    candidates: Iterable[ItemRecord],
    store: MatchStore,
    *,
    threshold: float = DEFAULT_THRESHOLD,
    method: str = DEFAULT_METHOD,
    clock: Callable[[], datetime] = utcnow,
) -> List[MatchRecord]:
    """Score every candidate against ``new_item`` and persist those above ``threshold``.

    The threshold is strict. Existing matches are never looked up, so running
    this twice for the same pair stores two records. Each append is
    independent: if the store fails half way, earlier records stay and the
    error propagates. Anything that is not an active opposite-type item of
    the same category is skipped, so every stored pair is a lost/found pair.
    """
    created: List[MatchRecord] = []
    for cand in candidates:
        if not is_candidate(new_item, cand):
            logger.warning("skipping %s: not an active %s item in category %r", cand.id, new_item.type.opposite.value, new_item.category)
            continue
        score = confidence(new_item, cand)
        logger.debug("scored item %s against %s: %.4f", new_item.id, cand.id, score)
        if score <= threshold:
            continue
        if new_item.type is ItemType.LOST:
            lost_id, found_id = new_item.id, cand.id
        else:
            lost_id, found_id = cand.id, new_item.id
        match = MatchRecord(
            lost_item_id=lost_id,
            found_item_id=found_id,
            confidence=score,
            status=MatchStatus.PENDING,
            method=method,
            created_at=clock(),
        )
        created.append(store.append(match))
    return created
