"""Strength analysis of generated passwords using ``zxcvbn``.

The analysis treats the password as an opaque string: it is never modified,
and the result only reports zxcvbn's score, its guess estimate and the four
standard crack time scenarios.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from zxcvbn import zxcvbn


class Strength(Enum):
    """Human readable label for zxcvbn's 0-4 score."""

    VERY_WEAK = "very weak"
    WEAK = "weak"
    REASONABLE = "reasonable"
    STRONG = "strong"
    VERY_STRONG = "very strong"

    @classmethod
    def from_score(cls, score: int) -> Strength:
        try:
            return _BY_SCORE[score]
        except KeyError:
            raise ValueError(f"invalid zxcvbn score: {score!r}") from None

    def __str__(self) -> str:
        return self.value


_BY_SCORE: dict[int, Strength] = {
    0: Strength.VERY_WEAK,
    1: Strength.WEAK,
    2: Strength.REASONABLE,
    3: Strength.STRONG,
    4: Strength.VERY_STRONG,
}

# (json key, table label, zxcvbn scenario)
CRACK_SCENARIOS: tuple[tuple[str, str, str], ...] = (
    ("100/h", "100 attempts/hour", "online_throttling_100_per_hour"),
    ("10/s", "10 attempts/second", "online_no_throttling_10_per_second"),
    ("10^4/s", "10^4 attempts/second", "offline_slow_hashing_1e4_per_second"),
    ("10^10/s", "10^10 attempts/second", "offline_fast_hashing_1e10_per_second"),
)


@dataclass(slots=True, frozen=True)
class SecurityAnalysis:
    """Summary of a zxcvbn estimate."""

    strength: Strength
    guesses_log10: float
    crack_times: dict[str, str] = field(default_factory=dict)

    @property
    def guesses(self) -> str:
        """Guess estimate rendered as a power of ten, e.g. ``10^12``."""

        return f"10^{self.guesses_log10:.0f}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "strength": str(self.strength),
            "guesses": self.guesses_log10,
            "crack_times": dict(self.crack_times),
        }


def analyze(password: str) -> SecurityAnalysis:
    """Run zxcvbn on ``password`` and summarise the result."""

    result = zxcvbn(password)
    display = result["crack_times_display"]
    return SecurityAnalysis(
        strength=Strength.from_score(int(result["score"])),
        guesses_log10=float(result["guesses_log10"]),
        crack_times={key: str(display[scenario]) for key, _, scenario in CRACK_SCENARIOS},
    )


__all__ = ["CRACK_SCENARIOS", "SecurityAnalysis", "Strength", "analyze"]
