from __future__ import annotations

from flask import current_app

from .extensions import db
from .matching import MatchingEngine
from .modules.notifications.notifier import SqlNotifier
from .stores import SqlItemStore, SqlMatchStore


def build_engine(session=None) -> MatchingEngine:
    """Matching engine bound to the SQL stores and the current app's settings."""
    session = session or db.session
    items = SqlItemStore(session)
    cfg = current_app.config
    return MatchingEngine(
        items,
        SqlMatchStore(session),
        SqlNotifier(items, session),
        threshold=float(cfg.get("MATCH_THRESHOLD", 0.6)),
        method=cfg.get("MATCH_METHOD", "ai"),
        candidate_limit=cfg.get("MATCH_CANDIDATE_LIMIT"),
    )


def run_matching(item_id: int) -> list:
    """Match an already persisted item; used inline and by the background job."""
    from .models.item import Item

    it = db.session.get(Item, item_id)
    if it is None:
        return []
    return build_engine().on_item_created(it.to_record())
