"""Parse IPA text into a Transcription.

The scan takes one base symbol per step and inspects up to two following
characters for diacritics. Palatalization must come before length, so
``nʲː`` is a long palatalized n while ``nːʲ`` is a long n followed by an
orphan palatalization mark. Diacritics reached directly by the scan are
skipped: they were either attributed to the preceding symbol already or
have no symbol to attach to.
"""

import logging
from collections.abc import Iterable

from ipa_sounds.errors import NotYetImplementedError, PalatalizedVowelError
from ipa_sounds.symbols import (
    DIACRITICS,
    LENGTH,
    PALATALIZATION,
    SPACE,
    consonant_for,
    vowel_for,
)
from ipa_sounds.types import ConsonantSound, Sound, Space, Transcription, VowelSound

logger = logging.getLogger(__name__)


def _lookahead(chars: list[str], i: int) -> tuple[bool, bool]:
    """Return (is_palatalized, is_long) for the base symbol at ``i``."""
    n = len(chars)
    is_palatalized = i + 1 < n and chars[i + 1] == PALATALIZATION
    if is_palatalized:
        is_long = i + 2 < n and chars[i + 2] == LENGTH
    else:
        is_long = i + 1 < n and chars[i + 1] == LENGTH
    return is_palatalized, is_long


def _classify(char: str, is_palatalized: bool, is_long: bool) -> Sound:
    """Turn one base character and its diacritic flags into a Sound.

    Raises:
        PalatalizedVowelError: ``char`` is a vowel and ``is_palatalized``.
        NotYetImplementedError: ``char`` is in neither table.
    """
    if char == SPACE:
        return Space()

    consonant = consonant_for(char)
    if consonant is not None:
        return ConsonantSound(
            phoneme=consonant,
            is_long=is_long,
            is_palatalized=is_palatalized,
        )

    vowel = vowel_for(char)
    if vowel is not None:
        if is_palatalized:
            logger.debug(f"Rejecting palatalized vowel {char!r}")
            raise PalatalizedVowelError(char)
        return VowelSound(phoneme=vowel, is_long=is_long)

    logger.debug(f"Rejecting unsupported symbol {char!r}")
    raise NotYetImplementedError(char)


def parse(text: str | Iterable[str]) -> Transcription:
    """Parse IPA text into a Transcription.

    Args:
        text: A string, or any iterable of single characters.

    Returns:
        The sounds in reading order. Empty input gives an empty
        Transcription.

    Raises:
        TranscriptionError: On the first invalid character, scanning left
            to right. Nothing is returned for the rest of the input.
    """
    chars = list(text)
    sounds: list[Sound] = []

    for i, char in enumerate(chars):
        if not isinstance(char, str) or len(char) != 1:
            logger.debug(f"Rejecting element {char!r}: not a single character")
            raise NotYetImplementedError(char)
        if char in DIACRITICS:
            continue
        is_palatalized, is_long = _lookahead(chars, i)
        sounds.append(_classify(char, is_palatalized, is_long))

    logger.debug(f"Parsed {len(chars)} characters into {len(sounds)} sounds")
    return Transcription(sounds)
