from __future__ import annotations

"""Hangul composition helpers (domain layer).

This module has no I/O and no dependencies beyond the standard library.

It centralises:
- The Unicode Hangul Syllables block arithmetic (base, vowel / final counts)
- Compatibility jamo ordering constants
- The leading-consonant -> base-syllable table used by the classifier

Primary API:
- compose_lvt(lead, vowel, tail)
- compose_cv(lead, vowel)
"""

from typing import Final


# -----------------------------------------------------------------------------
# Unicode Hangul Syllables block
# -----------------------------------------------------------------------------

S_BASE: Final[int] = 0xAC00
S_LAST: Final[int] = 0xD7A3
V_COUNT: Final[int] = 21
T_COUNT: Final[int] = 28
# Codes sharing one leading consonant (21 vowels x 28 finals)
N_COUNT: Final[int] = V_COUNT * T_COUNT

# Compatibility jamo range treated as "consonant" by the classifier.
# NOTE: U+3131..U+314E (ㄱ..ㅎ) also covers cluster jamo such as ㄳ, ㄵ, ㄺ that
# never lead a syllable.
JAMO_FIRST: Final[int] = 0x3131
JAMO_LAST: Final[int] = 0x314E


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG)}


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def compose_lvt(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if inputs are invalid.

    Notes:
        This uses the Unicode Hangul Syllables algorithm:
        SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    l = (lead or "").strip()
    v = (vowel or "").strip()
    t = (tail or "").strip()

    if not l or not v:
        return ""

    li = _CHO_MAP.get(l)
    vi = _JUNG_MAP.get(v)
    ti = _JONG_MAP.get(t)

    if li is None or vi is None or ti is None:
        return ""

    return chr(S_BASE + (li * V_COUNT + vi) * T_COUNT + ti)


def compose_cv(lead: str, vowel: str) -> str:
    """Compose a Hangul syllable from a leading consonant and a vowel."""
    return compose_lvt(lead, vowel, "")


# -----------------------------------------------------------------------------
# Leading consonant table
# -----------------------------------------------------------------------------
#
# Maps the "ㅏ, no final" syllable of every leading-consonant group back to the
# bare consonant jamo (가 -> ㄱ, 까 -> ㄲ, ... 하 -> ㅎ). Exactly 19 entries.

BASE_SYLLABLE_TO_CONSONANT: Final[dict[str, str]] = {
    compose_cv(lead, "ㅏ"): lead for lead in CHOSEONG
}
