"""Render Transcriptions back to canonical IPA text."""

from ipa_sounds.symbols import LENGTH, PALATALIZATION, SPACE
from ipa_sounds.types import ConsonantSound, Sound, Space, Transcription, VowelSound


def format_sound(sound: Sound) -> str:
    """Render one sound. Palatalization is always written before length."""
    if isinstance(sound, VowelSound):
        return sound.phoneme.symbol + (LENGTH if sound.is_long else "")
    if isinstance(sound, ConsonantSound):
        return (
            sound.phoneme.symbol
            + (PALATALIZATION if sound.is_palatalized else "")
            + (LENGTH if sound.is_long else "")
        )
    if isinstance(sound, Space):
        return SPACE
    raise TypeError(f"not a sound: {sound!r}")


def format_transcription(transcription: Transcription) -> str:
    """Render a Transcription as canonical IPA text.

    ``parse(format_transcription(t)) == t`` for any parsed ``t``.
    """
    return "".join(format_sound(sound) for sound in transcription)


def describe_sound(sound: Sound) -> str:
    """Human-readable one-line description, e.g. ``nʲ  voiced alveolar nasal, palatalized``."""
    if isinstance(sound, Space):
        return "(space)"

    flags = []
    if isinstance(sound, ConsonantSound) and sound.is_palatalized:
        flags.append("palatalized")
    if sound.is_long:
        flags.append("long")

    description = sound.phoneme.description
    if flags:
        description += ", " + ", ".join(flags)
    return f"{format_sound(sound)}  {description}"
