"""Core data types for ipa_sounds."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ipa_sounds.symbols import Consonant, Vowel


@dataclass(frozen=True)
class VowelSound:
    """A vowel with optional length. Vowels cannot be palatalized."""
    phoneme: Vowel
    is_long: bool = False


@dataclass(frozen=True)
class ConsonantSound:
    """A consonant with independent length and palatalization flags."""
    phoneme: Consonant
    is_long: bool = False
    is_palatalized: bool = False


@dataclass(frozen=True)
class Space:
    """Word boundary."""


Sound = VowelSound | ConsonantSound | Space


@dataclass(frozen=True, init=False)
class Transcription(Sequence):
    """An immutable, ordered sequence of sounds in reading order.

    Build one with :func:`ipa_sounds.parse`, or copy an existing one with
    ``Transcription(other)``. Indexing, slicing and iteration are
    read-only; there is no mutation API.
    """
    sounds: tuple[Sound, ...]

    def __init__(self, sounds: Iterable[Sound] = ()):
        sounds = tuple(sounds)
        for sound in sounds:
            if not isinstance(sound, (VowelSound, ConsonantSound, Space)):
                raise TypeError(f"not a sound: {sound!r}")
        object.__setattr__(self, "sounds", sounds)

    def __getitem__(self, index):
        return self.sounds[index]

    def __len__(self) -> int:
        return len(self.sounds)

    def __iter__(self):
        return iter(self.sounds)

    def __str__(self) -> str:
        from ipa_sounds.formatter import format_transcription

        return format_transcription(self)

    def words(self) -> list[tuple[Sound, ...]]:
        """Split the sounds into groups separated by ``Space``.

        Consecutive, leading or trailing spaces yield empty groups, so
        the group count is always one more than the space count.
        """
        groups: list[tuple[Sound, ...]] = []
        current: list[Sound] = []
        for sound in self.sounds:
            if isinstance(sound, Space):
                groups.append(tuple(current))
                current = []
            else:
                current.append(sound)
        groups.append(tuple(current))
        return groups
