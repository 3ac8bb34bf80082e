from .candidates import find_candidates, is_candidate
from .engine import MatchingEngine
from .notify import MatchEvent, MatchNotifier, NullNotifier, match_events
from .recorder import DEFAULT_METHOD, DEFAULT_THRESHOLD, record_matches
from .records import ItemId, ItemRecord, ItemStatus, ItemType, MatchRecord, MatchStatus, UserId
from .scoring import WEIGHTS, confidence, score_breakdown
from .stores import InMemoryItemStore, InMemoryMatchStore, ItemStore, MatchStore
from .text import extract_tags, similarity

__all__ = [
    "DEFAULT_METHOD",
    "DEFAULT_THRESHOLD",
    "InMemoryItemStore",
    "InMemoryMatchStore",
    "ItemId",
    "ItemRecord",
    "ItemStatus",
    "ItemStore",
    "ItemType",
    "MatchEvent",
    "MatchNotifier",
    "MatchRecord",
    "MatchStatus",
    "MatchStore",
    "MatchingEngine",
    "NullNotifier",
    "UserId",
    "WEIGHTS",
    "confidence",
    "extract_tags",
    "find_candidates",
    "is_candidate",
    "match_events",
    "record_matches",
    "score_breakdown",
    "similarity",
]
