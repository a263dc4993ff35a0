"""The three password generators and their request types.

Each generator is a pure function of its parameters and a
:class:`~passforge.generate.random_source.RandomSource`.  When no source is
given a fresh :class:`~passforge.generate.random_source.SecureSource` is
used.  Parameters are assumed to be within the documented bounds; range
checking belongs to the caller (see :mod:`passforge.cli` and
:mod:`passforge.config`).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from passforge.utils.constants import LETTER_CHARS, NUMBER_CHARS, SYMBOL_CHARS
from passforge.utils.errors import InvalidWeightConfiguration
from passforge.utils.logging import get_logger

from .corpus import get_corpus
from .random_source import RandomSource, SecureSource
from .separators import Separator, SeparatorPolicy, join_words
from .words import select_words, transform

log = get_logger(__name__)


class CharacterClass(Enum):
    """Disjoint alphabets random passwords are drawn from."""

    LETTERS = LETTER_CHARS
    DIGITS = NUMBER_CHARS
    SYMBOLS = SYMBOL_CHARS

    @property
    def alphabet(self) -> str:
        return self.value


# (numbers, symbols) -> relative weights of the enabled classes, in the order
# letters, digits, symbols.
CLASS_WEIGHTS: dict[tuple[bool, bool], tuple[int, ...]] = {
    (False, False): (10,),
    (True, False): (8, 2),
    (False, True): (8, 2),
    (True, True): (7, 2, 1),
}


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class MemorableRequest:
    """Parameters of a word based password."""

    words: int = 5
    separator: Separator | SeparatorPolicy = Separator.SPACE
    capitalize: bool = False
    scramble: bool = False


@dataclass(slots=True, frozen=True)
class RandomRequest:
    """Parameters of a character based password."""

    characters: int = 20
    numbers: bool = False
    symbols: bool = False


@dataclass(slots=True, frozen=True)
class PinRequest:
    """Parameters of a numeric PIN."""

    numbers: int = 7


GenerationRequest = MemorableRequest | RandomRequest | PinRequest


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


def memorable_password(
    words: int,
    separator: Separator | SeparatorPolicy = Separator.SPACE,
    capitalize: bool = False,
    scramble: bool = False,
    *,
    source: RandomSource | None = None,
    corpus: Sequence[str] | None = None,
) -> str:
    """Return ``words`` distinct corpus words joined by ``separator``.

    Words are drawn first, then each one is optionally scrambled and
    capitalized, and finally separators are drawn gap by gap.  ``corpus``
    defaults to the shared EFF word list.

    Raises
    ------
    CorpusExhausted
        If ``words`` exceeds the number of distinct words in ``corpus``.
    """

    source = source if source is not None else SecureSource()
    corpus = corpus if corpus is not None else get_corpus()
    policy = separator.policy if isinstance(separator, Separator) else separator

    chosen = select_words(corpus, words, source)
    formatted = [
        transform(w, source, scramble_word=scramble, capitalize_word=capitalize)
        for w in chosen
    ]
    return join_words(formatted, policy, source)


def enabled_classes(numbers: bool, symbols: bool) -> list[CharacterClass]:
    """Return the enabled character classes in their fixed order."""

    classes = [CharacterClass.LETTERS]
    if numbers:
        classes.append(CharacterClass.DIGITS)
    if symbols:
        classes.append(CharacterClass.SYMBOLS)
    return classes


def check_weights(weights: Sequence[int], classes: Sequence[CharacterClass]) -> None:
    """Raise :class:`InvalidWeightConfiguration` unless ``weights`` is usable."""

    if not weights:
        raise InvalidWeightConfiguration("weight vector is empty")
    if len(weights) != len(classes):
        raise InvalidWeightConfiguration(
            f"{len(weights)} weights given for {len(classes)} character classes"
        )
    if any(w < 0 for w in weights):
        raise InvalidWeightConfiguration(f"negative weight in {tuple(weights)}")
    if sum(weights) <= 0:
        raise InvalidWeightConfiguration(f"weights {tuple(weights)} sum to zero")


def random_password(
    characters: int,
    numbers: bool = False,
    symbols: bool = False,
    *,
    source: RandomSource | None = None,
) -> str:
    """Return ``characters`` characters drawn class by class.

    For each position a class is picked with the weights of
    :data:`CLASS_WEIGHTS`, then a character is picked uniformly inside that
    class.  The per-class counts are therefore random; only the total length
    is fixed.
    """

    source = source if source is not None else SecureSource()
    classes = enabled_classes(numbers, symbols)
    weights = CLASS_WEIGHTS[(numbers, symbols)]
    check_weights(weights, classes)

    out: list[str] = []
    for _ in range(characters):
        alphabet = classes[source.weighted_choice(weights)].alphabet
        out.append(alphabet[source.uniform_in_range(0, len(alphabet))])
    return "".join(out)


def pin_password(numbers: int, *, source: RandomSource | None = None) -> str:
    """Return ``numbers`` independent uniform digits."""

    source = source if source is not None else SecureSource()
    return "".join(
        NUMBER_CHARS[source.uniform_in_range(0, len(NUMBER_CHARS))] for _ in range(numbers)
    )


def generate(
    request: GenerationRequest,
    source: RandomSource | None = None,
    *,
    corpus: Sequence[str] | None = None,
) -> str:
    """Dispatch ``request`` to the matching generator."""

    log.debug("generating %s", type(request).__name__)
    if isinstance(request, MemorableRequest):
        return memorable_password(
            request.words,
            request.separator,
            request.capitalize,
            request.scramble,
            source=source,
            corpus=corpus,
        )
    if isinstance(request, RandomRequest):
        return random_password(
            request.characters, request.numbers, request.symbols, source=source
        )
    if isinstance(request, PinRequest):
        return pin_password(request.numbers, source=source)
    raise TypeError(f"unsupported request type: {type(request).__name__}")


__all__ = [
    "CLASS_WEIGHTS",
    "CharacterClass",
    "GenerationRequest",
    "MemorableRequest",
    "PinRequest",
    "RandomRequest",
    "check_weights",
    "enabled_classes",
    "generate",
    "memorable_password",
    "pin_password",
    "random_password",
]
