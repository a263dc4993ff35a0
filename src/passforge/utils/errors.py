"""Typed exceptions for password generation and its surrounding tooling."""


class GenerationError(ValueError):
    """Base class for generation core errors."""


class CorpusExhausted(GenerationError):
    """Raised when more distinct words are requested than the corpus holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"requested {requested} distinct words but the corpus only has {available}"
        )
        self.requested = requested
        self.available = available


class InvalidWeightConfiguration(GenerationError):
    """Raised when a character class weight vector cannot be sampled from."""


class CorpusLoadError(GenerationError):
    """Raised when a word list file cannot be decoded."""


class ClipboardError(RuntimeError):
    """Raised when the generated password cannot be copied to the clipboard."""
