from __future__ import annotations

import pytest

from hangul_fuzzy.domain.similarity import (
    KOREAN_SIMILARITY_PENALTY,
    distance,
    is_contained,
    matches,
)

SAMPLES = [
    "",
    "foo",
    "FOo",
    "kitten",
    "sitting",
    "한글",
    "ㅎㄱ",
    "하그",
    "홍길동",
    "A학급",
    "Aㅎㄱ",
    "서울시 강남구 삼성동",
    "Be Right Back!",
]


def test_penalty_is_strictly_between_match_and_substitution() -> None:
    assert 0.0 < KOREAN_SIMILARITY_PENALTY < 1.0
    assert KOREAN_SIMILARITY_PENALTY == 0.01


# -----------------------------------------------------------------------------
# distance
# -----------------------------------------------------------------------------

def test_distance_between_two_english_words() -> None:
    assert distance("kitten", "sitting", False) == 3.0


def test_distance_when_one_string_is_empty() -> None:
    assert distance("", "foo", False) == 3.0
    assert distance("hello", "", False) == 5.0
    assert distance("", "한글", False) == 2.0
    assert distance("", "", False) == 0.0


def test_distance_when_korean_letters_exist() -> None:
    assert distance("A학급", "B학급", False) == 1.0
    assert distance("Aㅎㄱ", "B학급", True) == 1.02


def test_distance_case_folding() -> None:
    assert distance("FOO", "foo") == 0.0
    assert distance("FOO", "foo", True) == 3.0


def test_distance_similar_korean_is_discounted_not_free() -> None:
    d = distance("가", "강")
    assert 0.0 < d < 1.0
    assert d == pytest.approx(KOREAN_SIMILARITY_PENALTY)
    assert distance("거", "강") == 1.0


def test_distance_discount_needs_both_characters_korean() -> None:
    assert distance("a", "강") == 1.0
    assert distance("ㄱ", "g") == 1.0


def test_distance_returns_float() -> None:
    assert isinstance(distance("abc", "abd"), float)
    assert isinstance(distance("", "abc"), float)


@pytest.mark.parametrize("s", SAMPLES)
def test_distance_identity(s: str) -> None:
    assert distance(s, s, False) == 0.0


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", ["한글", "kitten", "Aㅎㄱ", ""])
def test_distance_symmetry(a: str, b: str) -> None:
    assert distance(a, b, True) == pytest.approx(distance(b, a, True))
    assert distance(a, b, False) == pytest.approx(distance(b, a, False))


@pytest.mark.parametrize("s", SAMPLES)
def test_distance_from_empty_is_length(s: str) -> None:
    assert distance("", s, False) == len(s)
    assert distance(s, "", False) == len(s)


# -----------------------------------------------------------------------------
# is_contained
# -----------------------------------------------------------------------------

def test_is_contained_is_an_ordered_subsequence_test() -> None:
    assert is_contained("brb", "be right back")
    assert is_contained("", "anything")
    assert not is_contained("bbr", "be right")
    assert not is_contained("dog", "digging")


def test_is_contained_korean_rules() -> None:
    # Bare consonant needle matches a syllable starting with it
    assert is_contained("ㄱㅅ", "서울시 강남구 삼성동")
    # A bare consonant in the haystack only matches itself
    assert is_contained("ㄱ", "ㄱ")
    assert not is_contained("가", "ㄱ")
    # Needle syllables with a final need an exact match
    assert not is_contained("강", "가")
    assert is_contained("가", "강")


# -----------------------------------------------------------------------------
# matches
# -----------------------------------------------------------------------------

def test_matches_when_needle_is_same_with_haystack() -> None:
    assert matches("foo", "foo", True) == 1.0
    assert matches("foo", "FOo", False) == 1.0
    assert matches("foo", "FOo", True) == 0.0
    assert matches("홍길동", "홍길동", True) == 1.0


@pytest.mark.parametrize("s", [s for s in SAMPLES if s])
def test_matches_self_is_one(s: str) -> None:
    assert matches(s, s, True) == 1.0


@pytest.mark.parametrize("needle,haystack", [
    ("foo", "bar"),
    ("dog", "digging"),
    ("longer", "long"),
    ("홍길동", "박문수"),
    ("홍길동", "호길동"),
    ("홍가동", "홍길동"),
    ("홍가두", "홍길동"),
    ("고성", "군산"),
    ("우산", "ㅇ산"),
])
def test_matches_when_needle_is_not_in_the_haystack(needle: str, haystack: str) -> None:
    assert matches(needle, haystack, False) == 0.0
    assert matches(needle, haystack, True) == 0.0


def test_matches_needle_longer_than_haystack_counts_characters() -> None:
    # 2 characters (6 bytes in UTF-8) against 3 characters
    assert matches("한글", "한글자", False) > 0.0
    assert matches("한글자", "한글", False) == 0.0


def test_matches_shows_how_much_similar_two_strings_are() -> None:
    address = "서울시 강남구 삼성동"
    assert matches("brb", "Be Right Back!", False) > 0.0
    assert matches("br", "bring back", False) > 0.0
    assert matches("brb", "bring back", False) > matches("brb", "Be Right Back", False)
    assert matches("강성", address, False) > 0.0
    assert matches("강남", address, False) > 0.0
    assert matches("ㄱㅅ", address, False) > 0.0
    assert matches("강남", address, False) > matches("ㄱㄴ", address, False)


def test_matches_when_korean_characters_partially_match() -> None:
    assert matches("ㅎㄱ", "한글", False) > 0.0
    assert matches("하그", "한글", False) > 0.0
    assert matches("하ㄱ", "한글", False) > 0.0
    assert matches("하그", "한글", False) == matches("ㅎㄱ", "한글", False)
    assert matches("하그", "한글", False) == matches("하ㄱ", "한글", False)
    assert matches("ㅎㄱ", "한글", False) == pytest.approx(0.99)


def test_matches_scores_with_case_folding() -> None:
    # Containment passes either way; scoring always ignores case.
    assert matches("ab", "ABc", False) == pytest.approx(2 / 3)
    assert matches("AB", "ABc", True) == pytest.approx(2 / 3)


def test_matches_empty_inputs() -> None:
    assert matches("", "abc", False) == 0.0
    assert matches("", "", False) == 0.0


def test_matches_stays_in_range_when_lowercase_grows() -> None:
    # "İ".lower() is two characters long
    assert matches("", "İ", False) == 0.0
    assert 0.0 <= matches("i", "İ", False) <= 1.0


@pytest.mark.parametrize("needle", SAMPLES)
@pytest.mark.parametrize("haystack", SAMPLES)
def test_matches_range(needle: str, haystack: str) -> None:
    for case_sensitive in (True, False):
        score = matches(needle, haystack, case_sensitive)
        assert 0.0 <= score <= 1.0
