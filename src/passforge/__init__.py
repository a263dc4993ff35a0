"""Password generation toolkit.

The :mod:`passforge.generate` package holds the generation core: the word
corpus, the randomness sources and the three generators.  The command line
interface lives in :mod:`passforge.cli`.
"""

from .generate import (
    MemorableRequest,
    PinRequest,
    RandomRequest,
    SecureSource,
    SeededSource,
    Separator,
    generate,
    memorable_password,
    pin_password,
    random_password,
)

__version__ = "0.1.0"

__all__ = [
    "MemorableRequest",
    "PinRequest",
    "RandomRequest",
    "SecureSource",
    "SeededSource",
    "Separator",
    "generate",
    "memorable_password",
    "pin_password",
    "random_password",
    "__version__",
]
