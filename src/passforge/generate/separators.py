"""Separator policies for joining the words of a memorable password.

A policy is chosen once per password and produces a lazy, endless stream of
gap values.  :func:`join_words` pulls exactly one value per gap between
consecutive words, so random policies consume entropy only for the gaps that
exist.  The digit-or-symbol policy samples one flat alphabet of symbols and
digits; the two groups are not weighted separately.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from passforge.utils.constants import NUMBER_CHARS, SEPARATOR_CHARS

from .random_source import RandomSource


class SeparatorPolicy(Protocol):
    """Produces the values inserted between consecutive words."""

    def gaps(self, source: RandomSource) -> Iterator[str]:
        """Return an endless iterator of per-gap separator values."""

        ...


@dataclass(slots=True, frozen=True)
class FixedSeparator:
    """Every gap receives the same literal ``text``."""

    text: str

    def gaps(self, source: RandomSource) -> Iterator[str]:
        return itertools.repeat(self.text)


@dataclass(slots=True, frozen=True)
class RandomCharSeparator:
    """Every gap receives one character drawn uniformly from ``alphabet``."""

    alphabet: str

    def __post_init__(self) -> None:
        if not self.alphabet:
            raise ValueError("separator alphabet must not be empty")

    def gaps(self, source: RandomSource) -> Iterator[str]:
        size = len(self.alphabet)
        while True:
            yield self.alphabet[source.uniform_in_range(0, size)]


NO_SEPARATOR = FixedSeparator("")
DIGIT_SEPARATOR = RandomCharSeparator(NUMBER_CHARS)
DIGIT_OR_SYMBOL_SEPARATOR = RandomCharSeparator(SEPARATOR_CHARS)


class Separator(str, Enum):
    """Named separator choices exposed to users."""

    SPACE = "space"
    COMMA = "comma"
    HYPHEN = "hyphen"
    PERIOD = "period"
    UNDERSCORE = "underscore"
    NUMBERS = "numbers"
    NUMBERS_AND_SYMBOLS = "numbers-and-symbols"
    NONE = "none"

    @property
    def policy(self) -> SeparatorPolicy:
        """Return the policy implementing this choice."""

        return _POLICIES[self]


_POLICIES: dict[Separator, SeparatorPolicy] = {
    Separator.SPACE: FixedSeparator(" "),
    Separator.COMMA: FixedSeparator(","),
    Separator.HYPHEN: FixedSeparator("-"),
    Separator.PERIOD: FixedSeparator("."),
    Separator.UNDERSCORE: FixedSeparator("_"),
    Separator.NUMBERS: DIGIT_SEPARATOR,
    Separator.NUMBERS_AND_SYMBOLS: DIGIT_OR_SYMBOL_SEPARATOR,
    Separator.NONE: NO_SEPARATOR,
}


def join_words(words: Iterable[str], policy: SeparatorPolicy, source: RandomSource) -> str:
    """Join ``words`` drawing one separator per gap from ``policy``."""

    gaps = policy.gaps(source)
    parts: list[str] = []
    for index, word in enumerate(words):
        if index:
            parts.append(next(gaps))
        parts.append(word)
    return "".join(parts)


__all__ = [
    "SeparatorPolicy",
    "FixedSeparator",
    "RandomCharSeparator",
    "NO_SEPARATOR",
    "DIGIT_SEPARATOR",
    "DIGIT_OR_SYMBOL_SEPARATOR",
    "Separator",
    "join_words",
]
