import math

import pytest

from lostfound.matching import WEIGHTS, confidence, score_breakdown


def test_weights_sum_to_one():
    assert math.fsum(WEIGHTS.values()) == 1.0


def test_identical_items_score_exactly_one(make_item):
    a = make_item(type="lost")
    b = make_item(type="found")
    assert confidence(a, b) == 1.0


def test_different_category_and_no_overlap_scores_zero(make_item):
    a = make_item(type="lost", category="bags", title="red wallet", description="leather", location="gym")
    b = make_item(type="found", category="electronics", title="silver laptop", description="charger included", location="cafeteria")
    assert confidence(a, b) == 0.0


def test_breakdown_matches_weights(make_item):
    a = make_item(type="lost", title="iPhone 13 black", description="cracked screen", location="library")
    b = make_item(type="found", title="black iPhone", description="screen is cracked", location="library 2nd floor")
    parts = score_breakdown(a, b)
    assert parts["category"] == 0.3
    assert parts["title"] == pytest.approx(2 / 3 * 0.4)
    assert parts["description"] == pytest.approx(2 / 3 * 0.2)
    assert parts["location"] == pytest.approx(1 / 3 * 0.1)
    assert confidence(a, b) == pytest.approx(0.3 + 0.8 / 3 + 0.4 / 3 + 0.1 / 3)


def test_confidence_is_pure_and_symmetric(make_item):
    a = make_item(type="lost")
    b = make_item(type="found", title="black iPhone", description="screen is cracked")
    first = confidence(a, b)
    assert confidence(a, b) == first
    assert confidence(b, a) == first
    assert 0.0 <= first <= 1.0


def test_confidence_is_clamped(make_item, monkeypatch):
    monkeypatch.setitem(WEIGHTS, "category", 0.9)
    a = make_item(type="lost")
    b = make_item(type="found")
    assert confidence(a, b) == 1.0
