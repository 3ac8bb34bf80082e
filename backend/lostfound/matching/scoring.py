from __future__ import annotations

import math
from typing import Dict

from .records import ItemRecord
from .text import similarity

# Contribution of each factor; must sum to 1.0
WEIGHTS: Dict[str, float] = {
    "category": 0.3,
    "title": 0.4,
    "description": 0.2,
    "location": 0.1,
}


def score_breakdown(a: ItemRecord, b: ItemRecord) -> Dict[str, float]:
    """Weighted contribution of every factor for the pair ``(a, b)``."""
    return {
        "category": WEIGHTS["category"] if a.category == b.category else 0.0,
        "title": similarity(a.title, b.title) * WEIGHTS["title"],
        "description": similarity(a.description, b.description) * WEIGHTS["description"],
        "location": similarity(a.location, b.location) * WEIGHTS["location"],
    }


def confidence(a: ItemRecord, b: ItemRecord) -> float:
    # fsum keeps four perfect sub-scores at exactly 1.0
    total = math.fsum(score_breakdown(a, b).values())
    return min(total, 1.0)
