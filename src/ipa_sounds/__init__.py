"""Parse IPA transcriptions into structured sounds and render them back.

    >>> from ipa_sounds import parse, format_transcription
    >>> format_transcription(parse("nʲæ nʲæn"))
    'nʲæ nʲæn'
"""

from ipa_sounds.errors import (
    NotYetImplementedError,
    PalatalizedVowelError,
    TranscriptionError,
)
from ipa_sounds.formatter import format_transcription
from ipa_sounds.parser import parse
from ipa_sounds.symbols import Consonant, Vowel
from ipa_sounds.types import ConsonantSound, Sound, Space, Transcription, VowelSound

__version__ = "0.1.0"

__all__ = [
    "Consonant",
    "ConsonantSound",
    "NotYetImplementedError",
    "PalatalizedVowelError",
    "Sound",
    "Space",
    "Transcription",
    "TranscriptionError",
    "Vowel",
    "VowelSound",
    "format_transcription",
    "parse",
]
