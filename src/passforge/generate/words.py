"""Word selection and per-word transforms for memorable passwords."""

from __future__ import annotations

from collections.abc import Sequence

from passforge.utils.errors import CorpusExhausted

from .random_source import RandomSource


def select_words(corpus: Sequence[str], count: int, source: RandomSource) -> list[str]:
    """Draw ``count`` distinct words from ``corpus``.

    This is a partial Fisher-Yates shuffle over a virtual copy of the corpus:
    the result is distributed exactly like the first ``count`` items of a
    uniform permutation.  Displaced indices are tracked in a dict so the
    corpus itself is neither copied nor mutated.
    """

    size = len(corpus)
    if count > size:
        raise CorpusExhausted(count, size)

    displaced: dict[int, int] = {}
    chosen: list[str] = []
    for i in range(count):
        j = source.uniform_in_range(i, size)
        chosen.append(corpus[displaced.get(j, j)])
        displaced[j] = displaced.get(i, i)
    return chosen


def scramble(word: str, source: RandomSource) -> str:
    """Return a uniformly random rearrangement of the characters of ``word``."""

    chars = list(word)
    source.shuffle(chars)
    return "".join(chars)


def capitalize(word: str) -> str:
    """Uppercase the first character if it is an ASCII letter."""

    if word and word[0].isascii():
        return word[0].upper() + word[1:]
    return word


def transform(word: str, source: RandomSource, *, scramble_word: bool, capitalize_word: bool) -> str:
    """Apply the optional transforms in order: scramble, then capitalize."""

    if scramble_word:
        word = scramble(word, source)
    if capitalize_word:
        word = capitalize(word)
    return word


__all__ = ["select_words", "scramble", "capitalize", "transform"]
