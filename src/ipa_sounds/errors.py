"""Errors raised while building a Transcription from text."""


class TranscriptionError(ValueError):
    """Base class for parse failures. ``symbol`` is the offending character."""

    def __init__(self, symbol: str, message: str):
        super().__init__(message)
        self.symbol = symbol

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.symbol == other.symbol

    def __hash__(self) -> int:
        return hash((type(self), self.symbol))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.symbol!r})"


class PalatalizedVowelError(TranscriptionError):
    """A vowel was immediately followed by the palatalization mark."""

    def __init__(self, symbol: str):
        super().__init__(symbol, f"Vowel ({symbol}) cannot be palatalized")


class NotYetImplementedError(TranscriptionError):
    """A character is not a known vowel, consonant, diacritic or space."""

    def __init__(self, symbol: str):
        super().__init__(symbol, f"'{symbol}' is not yet implemented")
