"""Tests for the IPA symbol tables."""

from ipa_sounds.symbols import (
    DIACRITICS,
    LENGTH,
    PALATALIZATION,
    SPACE,
    Consonant,
    Vowel,
    consonant_for,
    inventory,
    vowel_for,
)


class TestTables:
    def test_vowel_count(self):
        assert len(Vowel) == 20

    def test_consonant_count(self):
        assert len(Consonant) == 4

    def test_symbols_are_single_characters(self):
        for member in [*Vowel, *Consonant]:
            assert len(member.symbol) == 1

    def test_vowel_symbols_unique(self):
        symbols = [v.symbol for v in Vowel]
        assert len(symbols) == len(set(symbols))

    def test_consonant_symbols_unique(self):
        symbols = [c.symbol for c in Consonant]
        assert len(symbols) == len(set(symbols))

    def test_tables_disjoint(self):
        vowels = {v.symbol for v in Vowel}
        consonants = {c.symbol for c in Consonant}
        assert not vowels & consonants

    def test_reserved_characters_not_in_tables(self):
        symbols = {m.symbol for m in [*Vowel, *Consonant]}
        assert not symbols & (DIACRITICS | {SPACE})

    def test_diacritics(self):
        assert PALATALIZATION == "ʲ"
        assert LENGTH == "ː"
        assert DIACRITICS == {"ʲ", "ː"}


class TestLookup:
    def test_vowel_for(self):
        assert vowel_for("æ") is Vowel.NEAR_OPEN_FRONT_UNROUNDED
        assert vowel_for("u") is Vowel.CLOSE_BACK_ROUNDED

    def test_consonant_for(self):
        assert consonant_for("n") is Consonant.VOICED_ALVEOLAR_NASAL
        assert consonant_for("p") is Consonant.VOICELESS_BILABIAL_PLOSIVE

    def test_lookup_misses(self):
        assert vowel_for("n") is None
        assert consonant_for("æ") is None
        assert vowel_for("þ") is None
        assert consonant_for(" ") is None

    def test_bijection_round_trip(self):
        for v in Vowel:
            assert vowel_for(v.symbol) is v
        for c in Consonant:
            assert consonant_for(c.symbol) is c


class TestDescriptions:
    def test_simple(self):
        assert Consonant.VOICED_ALVEOLAR_NASAL.description == "voiced alveolar nasal"
        assert Vowel.MID_CENTRAL.description == "mid central"

    def test_hyphenated_heights(self):
        assert Vowel.NEAR_OPEN_FRONT_UNROUNDED.description == "near-open front unrounded"
        assert Vowel.CLOSE_MID_BACK_ROUNDED.description == "close-mid back rounded"
        assert Vowel.OPEN_MID_BACK_UNROUNDED.description == "open-mid back unrounded"
        assert (
            Vowel.NEAR_CLOSE_NEAR_BACK_ROUNDED.description
            == "near-close near-back rounded"
        )


class TestInventory:
    def test_covers_every_phoneme(self):
        rows = inventory()
        assert len(rows) == len(Vowel) + len(Consonant)

    def test_vowels_first(self):
        rows = inventory()
        kinds = [kind for kind, _, _ in rows]
        assert kinds == ["vowel"] * len(Vowel) + ["consonant"] * len(Consonant)

    def test_row_shape(self):
        assert inventory()[0] == ("vowel", "u", "close back rounded")
        assert ("consonant", "n", "voiced alveolar nasal") in inventory()
