from __future__ import annotations

from typing import List, Optional, Set

MAX_TAGS = 10
MIN_TAG_LENGTH = 4


def _token_set(text: Optional[str]) -> Set[str]:
    if not text:
        return set()
    return set(text.lower().split())


def similarity(a: Optional[str], b: Optional[str]) -> float:
    """Jaccard overlap of the lowercase whitespace token sets of ``a`` and ``b``.

    Repeated tokens collapse. Two texts with no tokens at all score 0.0.
    """
    ta = _token_set(a)
    tb = _token_set(b)
    union = ta | tb
    if not union:
        return 0.0
    return len(ta & tb) / len(union)


def extract_tags(text: Optional[str]) -> List[str]:
    """Keyword tags for indexing: tokens longer than 3 chars, first 10, in order."""
    if not text:
        return []
    words = text.lower().split()
    return [w for w in words if len(w) >= MIN_TAG_LENGTH][:MAX_TAGS]
