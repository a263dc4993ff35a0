from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

import pytest

from passforge.generate import WordCorpus


class ScriptedSource:
    """Randomness double replaying pre-recorded draws.

    ``ints`` feeds :meth:`uniform_in_range` and ``choices`` feeds
    :meth:`weighted_choice`; :meth:`shuffle` reverses the sequence.  Every
    call is recorded so tests can assert on the exact entropy consumed.
    """

    def __init__(self, ints: Sequence[int] = (), choices: Sequence[int] = ()) -> None:
        self.ints = list(ints)
        self.choices = list(choices)
        self.calls: list[tuple[str, Any]] = []

    def uniform_in_range(self, low: int, high: int) -> int:
        value = self.ints.pop(0)
        assert low <= value < high, f"{value} outside [{low}, {high})"
        self.calls.append(("range", (low, high)))
        return value

    def shuffle(self, sequence: MutableSequence[Any]) -> None:
        self.calls.append(("shuffle", len(sequence)))
        sequence.reverse()

    def weighted_choice(self, weights: Sequence[float]) -> int:
        self.calls.append(("weighted", tuple(weights)))
        return self.choices.pop(0)


@pytest.fixture
def small_corpus() -> WordCorpus:
    return WordCorpus(["alpha", "bravo", "charlie", "delta", "echo"], source="test")


@pytest.fixture
def scripted() -> type[ScriptedSource]:
    return ScriptedSource
