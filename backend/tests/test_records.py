import pytest

from lostfound.errors import InvalidItem
from lostfound.matching import ItemRecord, ItemStatus, ItemType, MatchRecord, MatchStatus


def test_item_record_parses_enums(make_item):
    it = make_item(type="found", status="recovered")
    assert it.type is ItemType.FOUND
    assert it.status is ItemStatus.RECOVERED
    assert it.type.opposite is ItemType.LOST
    assert not it.is_active


@pytest.mark.parametrize("field", ["type", "category", "title", "description"])
def test_missing_required_field_is_invalid(make_item, field):
    with pytest.raises(InvalidItem):
        make_item(**{field: None})


@pytest.mark.parametrize("field", ["category", "title", "description"])
def test_blank_required_text_is_invalid(make_item, field):
    with pytest.raises(InvalidItem):
        make_item(**{field: "   "})


def test_unknown_type_is_invalid(make_item):
    with pytest.raises(InvalidItem):
        make_item(type="stolen")


def test_missing_id_is_invalid():
    with pytest.raises(InvalidItem):
        ItemRecord(id=None, type="lost", category="bags", title="wallet", description="brown")


def test_location_defaults_to_empty(make_item):
    assert make_item(location=None).location == ""


def test_match_record_defaults():
    m = MatchRecord(lost_item_id=1, found_item_id=2, confidence=0.7)
    assert m.status is MatchStatus.PENDING
    assert m.method == "ai"
    assert m.id is None
    assert m.other_item_id(1) == 2
    assert m.other_item_id(2) == 1


@pytest.mark.parametrize("value", [-0.01, 1.01])
def test_match_confidence_must_be_in_unit_interval(value):
    with pytest.raises(ValueError):
        MatchRecord(lost_item_id=1, found_item_id=2, confidence=value)


def test_match_cannot_pair_item_with_itself():
    with pytest.raises(ValueError):
        MatchRecord(lost_item_id=1, found_item_id=1, confidence=0.9)
