import pytest

from lostfound.matching import extract_tags, similarity


def test_similarity_red_vs_blue_backpack():
    # {red, backpack} vs {blue, backpack}: 1 shared of 3 distinct
    assert similarity("red backpack", "blue backpack") == pytest.approx(1 / 3)


@pytest.mark.parametrize("a,b", [
    ("red backpack", "blue backpack"),
    ("iPhone 13 black", "black iPhone"),
    ("", "library"),
    ("a b c d", "d e"),
])
def test_similarity_is_symmetric(a, b):
    assert similarity(a, b) == similarity(b, a)


@pytest.mark.parametrize("text", ["library", "Black iPhone 13", "  spaced   out  words "])
def test_similarity_with_itself_is_one(text):
    assert similarity(text, text) == 1.0


def test_similarity_ignores_case_and_whitespace_runs():
    assert similarity("Black  IPHONE", "black\tiphone") == 1.0


def test_similarity_collapses_repeated_tokens():
    # set semantics: {blue} vs {blue, bag}
    assert similarity("blue blue blue", "blue bag") == 0.5


def test_similarity_of_two_empty_texts_is_zero():
    assert similarity("", "") == 0.0
    assert similarity("   ", "\n") == 0.0
    assert similarity(None, None) == 0.0


def test_similarity_empty_against_text_is_zero():
    assert similarity("", "library") == 0.0


def test_similarity_disjoint_is_zero():
    assert similarity("red wallet", "blue umbrella") == 0.0


def test_extract_tags_keeps_long_tokens_in_order():
    assert extract_tags("Black iPhone 13 Pro with cracked screen") == ["black", "iphone", "with", "cracked", "screen"]


def test_extract_tags_caps_at_ten_without_dedup():
    text = " ".join(["word"] * 12)
    tags = extract_tags(text)
    assert tags == ["word"] * 10


def test_extract_tags_drops_short_tokens():
    assert extract_tags("a an the bag keys") == ["keys"]
    assert extract_tags("") == []
