"""Randomness sources for the password generators.

Generators never touch :mod:`random` directly.  They receive a
:class:`RandomSource` capability offering three operations (uniform integer
sampling, in-place shuffling and weighted index selection) and consume
entropy from it for the duration of a single call.

Two implementations are provided:

- :class:`SecureSource` draws from the operating system entropy pool through
  :class:`random.SystemRandom`.  It is the default everywhere.
- :class:`SeededSource` wraps a :class:`random.Random` seeded by the caller.
  Identically seeded sources produce identical passwords, which makes it
  suitable for tests and reproducible examples only.

String seeds are stretched with HMAC-SHA256 under a fixed namespace so that
any secret, however short, maps to a full-width integer seed.  Seeds and
secrets are never logged.
"""

from __future__ import annotations

import hashlib
import hmac
import random
from collections.abc import MutableSequence, Sequence
from typing import Any, Final, Protocol, runtime_checkable

# ---------------------------------------------------------------------------
# Domain separation constants
# ---------------------------------------------------------------------------

_NS_RNG: Final = b"passforge/v1/rng"


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class RandomSource(Protocol):
    """Capability object supplying the randomness the generators need."""

    def uniform_in_range(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high)``."""

        ...

    def shuffle(self, sequence: MutableSequence[Any]) -> None:
        """Permute ``sequence`` in place, every ordering equally likely."""

        ...

    def weighted_choice(self, weights: Sequence[float]) -> int:
        """Return an index of ``weights`` drawn proportionally to its weight."""

        ...


# ---------------------------------------------------------------------------
# Implementations
# ---------------------------------------------------------------------------


class _RandomBackedSource:
    """Adapter exposing a :class:`random.Random` instance as a source."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def uniform_in_range(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"empty range [{low}, {high})")
        return self._rng.randrange(low, high)

    def shuffle(self, sequence: MutableSequence[Any]) -> None:
        self._rng.shuffle(sequence)

    def weighted_choice(self, weights: Sequence[float]) -> int:
        return self._rng.choices(range(len(weights)), weights=weights, k=1)[0]


class SecureSource(_RandomBackedSource):
    """Unpredictable source backed by ``os.urandom``."""

    def __init__(self) -> None:
        super().__init__(random.SystemRandom())

    def __repr__(self) -> str:
        return "SecureSource()"


class SeededSource(_RandomBackedSource):
    """Deterministic source for reproducible generation.

    Parameters
    ----------
    seed:
        Integer seeds are used directly.  String seeds are derived into an
        integer with :func:`derive_seed`.
    """

    def __init__(self, seed: int | str) -> None:
        if isinstance(seed, str):
            seed = derive_seed(seed)
        super().__init__(random.Random(seed))

    def __repr__(self) -> str:
        # never expose the seed
        return "SeededSource(...)"


# ---------------------------------------------------------------------------
# Seed helpers
# ---------------------------------------------------------------------------


def derive_seed(secret: str) -> int:
    """Derive a 256-bit integer seed from ``secret``.

    The seed is ``HMAC(secret, _NS_RNG)`` interpreted as a big-endian
    integer.  An empty secret is rejected since it would silently make every
    run identical.
    """

    if not secret:
        raise ValueError("seed secret must not be empty")
    digest = hmac.new(secret.encode("utf-8"), _NS_RNG, hashlib.sha256).digest()
    return int.from_bytes(digest, "big")


def source_for(seed: int | str | None = None) -> RandomSource:
    """Return a seeded source when ``seed`` is given, else a secure one."""

    if seed is None:
        return SecureSource()
    return SeededSource(seed)


__all__ = [
    "RandomSource",
    "SecureSource",
    "SeededSource",
    "derive_seed",
    "source_for",
]
