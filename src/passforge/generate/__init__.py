"""Password generation core.

Everything here is synchronous and free of I/O apart from the one-time load
of the word corpus.
"""

from .corpus import WordCorpus, get_corpus, load_corpus
from .passwords import (
    CLASS_WEIGHTS,
    CharacterClass,
    GenerationRequest,
    MemorableRequest,
    PinRequest,
    RandomRequest,
    generate,
    memorable_password,
    pin_password,
    random_password,
)
from .random_source import RandomSource, SecureSource, SeededSource, derive_seed, source_for
from .separators import FixedSeparator, RandomCharSeparator, Separator, join_words
from .words import capitalize, scramble, select_words

__all__ = [
    "CLASS_WEIGHTS",
    "CharacterClass",
    "FixedSeparator",
    "GenerationRequest",
    "MemorableRequest",
    "PinRequest",
    "RandomCharSeparator",
    "RandomRequest",
    "RandomSource",
    "SecureSource",
    "SeededSource",
    "Separator",
    "WordCorpus",
    "capitalize",
    "derive_seed",
    "generate",
    "get_corpus",
    "join_words",
    "load_corpus",
    "memorable_password",
    "pin_password",
    "random_password",
    "scramble",
    "select_words",
    "source_for",
]
