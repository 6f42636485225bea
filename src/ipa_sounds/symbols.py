"""Fixed IPA symbol tables: vowels, consonants and diacritics.

Each phoneme identity maps to exactly one display character and back.
The tables are checked once at import time; a broken table is a
programming error, not a user error.
"""

from enum import Enum, unique

PALATALIZATION = "ʲ"
LENGTH = "ː"
SPACE = " "
DIACRITICS = frozenset({PALATALIZATION, LENGTH})


class _Phoneme(Enum):
    """Shared accessors for the phoneme enumerations."""

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


@unique
class Vowel(_Phoneme):
    CLOSE_BACK_ROUNDED = "u"
    CLOSE_BACK_UNROUNDED = "ɯ"
    CLOSE_CENTRAL_ROUNDED = "ʉ"
    CLOSE_CENTRAL_UNROUNDED = "ɨ"
    CLOSE_FRONT_ROUNDED = "y"
    CLOSE_FRONT_UNROUNDED = "i"
    CLOSE_MID_BACK_ROUNDED = "o"
    CLOSE_MID_BACK_UNROUNDED = "ɤ"
    CLOSE_MID_CENTRAL_ROUNDED = "ɵ"
    CLOSE_MID_CENTRAL_UNROUNDED = "ɘ"
    CLOSE_MID_FRONT_ROUNDED = "ø"
    CLOSE_MID_FRONT_UNROUNDED = "e"
    MID_CENTRAL = "ə"
    NEAR_CLOSE_NEAR_BACK_ROUNDED = "ʊ"
    NEAR_CLOSE_NEAR_FRONT_ROUNDED = "ʏ"
    NEAR_CLOSE_NEAR_FRONT_UNROUNDED = "ɪ"
    NEAR_OPEN_FRONT_UNROUNDED = "æ"
    OPEN_BACK_UNROUNDED = "ɑ"
    OPEN_FRONT_UNROUNDED = "a"
    OPEN_MID_BACK_UNROUNDED = "ʌ"


@unique
class Consonant(_Phoneme):
    VOICED_ALVEOLAR_NASAL = "n"
    VOICED_BILABIAL_NASAL = "m"
    VOICED_PALATAL_APPROXIMANT = "j"
    VOICELESS_BILABIAL_PLOSIVE = "p"


# Height/place names keep their IPA hyphenation ("close-mid", "near-open").
_HYPHENATED = ("close mid", "open mid", "near close", "near open", "near back", "near front")


def _describe(name: str) -> str:
    text = name.lower().replace("_", " ")
    for phrase in _HYPHENATED:
        text = text.replace(phrase, phrase.replace(" ", "-"))
    return text


_DESCRIPTIONS: dict[_Phoneme, str] = {
    member: _describe(member.name)
    for table in (Vowel, Consonant)
    for member in table
}

_VOWELS_BY_SYMBOL: dict[str, Vowel] = {v.value: v for v in Vowel}
_CONSONANTS_BY_SYMBOL: dict[str, Consonant] = {c.value: c for c in Consonant}


def _validate_tables() -> None:
    """Check the tables form disjoint single-character bijections."""
    reserved = DIACRITICS | {SPACE}
    for table in (Vowel, Consonant):
        for member in table:
            if len(member.value) != 1:
                raise RuntimeError(
                    f"{table.__name__}.{member.name} must map to one character, "
                    f"got {member.value!r}"
                )
            if member.value in reserved:
                raise RuntimeError(
                    f"{table.__name__}.{member.name} uses reserved character {member.value!r}"
                )

    shared = _VOWELS_BY_SYMBOL.keys() & _CONSONANTS_BY_SYMBOL.keys()
    if shared:
        raise RuntimeError(
            f"vowel and consonant tables share characters: {sorted(shared)}"
        )


_validate_tables()


def vowel_for(char: str) -> Vowel | None:
    """Return the vowel displayed as ``char``, or None."""
    return _VOWELS_BY_SYMBOL.get(char)


def consonant_for(char: str) -> Consonant | None:
    """Return the consonant displayed as ``char``, or None."""
    return _CONSONANTS_BY_SYMBOL.get(char)


def inventory() -> list[tuple[str, str, str]]:
    """List every supported phoneme as (kind, symbol, description) rows.

    Vowels come first, each table in declaration order.
    """
    rows = [("vowel", v.symbol, v.description) for v in Vowel]
    rows.extend(("consonant", c.symbol, c.description) for c in Consonant)
    return rows
