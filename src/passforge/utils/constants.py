"""Shared character tables for the password generators."""

from __future__ import annotations

__all__ = [
    "LETTER_CHARS",
    "NUMBER_CHARS",
    "SYMBOL_CHARS",
    "SEPARATOR_CHARS",
    "MIN_WORD_LENGTH",
]

LETTER_CHARS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBER_CHARS: str = "0123456789"
SYMBOL_CHARS: str = "!@#$%^&*()"

# Symbols first, then digits; sampled as one flat alphabet.
SEPARATOR_CHARS: str = SYMBOL_CHARS + NUMBER_CHARS

MIN_WORD_LENGTH: int = 4
