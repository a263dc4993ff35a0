"""Rendering of generated passwords for the terminal.

Two formats are supported.  ``text`` prints the bare password, or, when an
analysis is attached, three grid tables (password, security analysis and
crack time estimations).  ``json`` prints a single object with the password
kind, the password and the optional analysis.
"""

from __future__ import annotations

import json
from enum import Enum

import typer
from tabulate import tabulate

from .analysis import CRACK_SCENARIOS, SecurityAnalysis, Strength

TABLE_FORMAT = "grid"
MAX_COLUMN_WIDTH = 80


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


class PasswordKind(str, Enum):
    MEMORABLE = "memorable"
    RANDOM = "random"
    PIN = "pin"


_STRENGTH_COLORS: dict[Strength, str] = {
    Strength.VERY_WEAK: typer.colors.RED,
    Strength.WEAK: typer.colors.BRIGHT_RED,
    Strength.REASONABLE: typer.colors.YELLOW,
    Strength.STRONG: typer.colors.BRIGHT_GREEN,
    Strength.VERY_STRONG: typer.colors.GREEN,
}


def _table(rows: list[list[str]], header: str) -> str:
    ncols = max(len(row) for row in rows)
    return tabulate(
        rows,
        headers=[header] + [""] * (ncols - 1),
        tablefmt=TABLE_FORMAT,
        maxcolwidths=[MAX_COLUMN_WIDTH] * ncols,
        disable_numparse=True,
    )


def render_text(password: str, analysis: SecurityAnalysis | None = None, *, color: bool = False) -> str:
    """Return the text rendering of ``password``."""

    if analysis is None:
        return password

    strength = str(analysis.strength)
    if color:
        strength = typer.style(strength, fg=_STRENGTH_COLORS[analysis.strength])

    tables = [
        _table([[password]], "Generated Password"),
        _table([["Strength", strength], ["Guesses", analysis.guesses]], "Security Analysis"),
        _table(
            [[label, analysis.crack_times[key]] for key, label, _ in CRACK_SCENARIOS],
            "Crack time estimations",
        ),
    ]
    return "\n\n".join(tables)


def render_json(kind: PasswordKind, password: str, analysis: SecurityAnalysis | None = None) -> str:
    """Return the JSON rendering; ``analysis`` is omitted when ``None``."""

    payload: dict[str, object] = {"kind": kind.value, "password": password}
    if analysis is not None:
        payload["analysis"] = analysis.to_dict()
    return json.dumps(payload)


def render(
    fmt: OutputFormat,
    kind: PasswordKind,
    password: str,
    analysis: SecurityAnalysis | None = None,
    *,
    color: bool = False,
) -> str:
    if fmt is OutputFormat.JSON:
        return render_json(kind, password, analysis)
    return render_text(password, analysis, color=color)


__all__ = ["OutputFormat", "PasswordKind", "render", "render_json", "render_text"]
