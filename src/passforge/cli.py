"""Typer-based command line interface for password generation.

Global options (clipboard, output format, analysis, seed, configuration) are
given before the subcommand; each subcommand (``memorable``, ``random`` and
``pin``) takes the parameters of its generator.  Values not given on the
command line fall back to the loaded configuration.  Range checks happen here
and in the configuration schema: the generation core trusts its inputs.

Exit codes
----------
0 success
2 usage error (invalid option value, out of range count)
3 clipboard error
4 configuration error
5 generation error
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .analysis import analyze as run_analysis
from .clipboard import copy_to_clipboard
from .config import ConfigModel, load_config
from .config.schema import (
    CHARACTERS_MAX,
    CHARACTERS_MIN,
    PIN_MAX,
    PIN_MIN,
    WORDS_MAX,
    WORDS_MIN,
)
from .generate import (
    GenerationRequest,
    MemorableRequest,
    PinRequest,
    RandomRequest,
    RandomSource,
    SecureSource,
    SeededSource,
    Separator,
    generate,
    get_corpus,
)
from .render import OutputFormat, PasswordKind, render
from .utils.errors import ClipboardError, GenerationError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

log = get_logger(__name__)

app = typer.Typer(
    name="passforge",
    help="Generate secure memorable, random and PIN passwords.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class _State:
    """Settings shared by every subcommand of one invocation."""

    cfg: ConfigModel
    source: RandomSource
    output: OutputFormat
    analyze: bool
    clipboard: bool


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _pick(value: Optional[bool], default: bool) -> bool:
    return default if value is None else value


def _select_source(seed: int | None, cfg: ConfigModel) -> RandomSource:
    """Return the randomness source: ``--seed``, then env secret, else secure."""

    if seed is not None:
        log.debug("using seeded randomness source from --seed")
        return SeededSource(seed)
    if cfg.seed.secret is not None:
        log.debug("using seeded randomness source from $%s", cfg.seed.secret_env)
        return SeededSource(cfg.seed.secret.get_secret_value())
    return SecureSource()


def _emit(ctx: typer.Context, kind: PasswordKind, request: GenerationRequest) -> None:
    """Generate, copy and print one password for ``request``."""

    state: _State = ctx.obj
    try:
        corpus = None
        if isinstance(request, MemorableRequest):
            corpus = get_corpus(state.cfg.corpus.path)
        password = generate(request, state.source, corpus=corpus)
    except (GenerationError, OSError) as exc:
        _safe_exit(5, str(exc))

    if state.clipboard:
        try:
            copy_to_clipboard(password)
        except ClipboardError as exc:
            _safe_exit(3, f"{exc} (use --no-clipboard to disable copying)")

    analysis = run_analysis(password) if state.analyze else None
    typer.echo(
        render(
            state.output,
            kind,
            password,
            analysis,
            color=sys.stdout.isatty() and "NO_COLOR" not in os.environ,
        )
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main(  # noqa: PLR0913
    ctx: typer.Context,
    clipboard: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--clipboard/--no-clipboard",
        help="Copy the generated password to the clipboard (default from config)",
    ),
    output: Optional[OutputFormat] = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Output format", case_sensitive=False
    ),
    analyze: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--analyze/--no-analyze",
        help="Display a safety analysis along the generated password",
    ),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None,
        "--seed",
        min=0,
        help="Seed for deterministic generation (for testing purposes only)",
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug messages to stderr"
    ),
) -> None:
    """Generate secure memorable, random and PIN passwords."""

    configure_logging(verbose)
    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    log.debug("loaded config%s", f" from {config_path}" if config_path else "")

    ctx.obj = _State(
        cfg=cfg,
        source=_select_source(seed, cfg),
        output=output if output is not None else OutputFormat(cfg.output.format),
        analyze=_pick(analyze, cfg.output.analyze),
        clipboard=_pick(clipboard, cfg.output.clipboard),
    )


@app.command()
def memorable(
    ctx: typer.Context,
    words: Optional[int] = typer.Option(  # noqa: B008
        None,
        "--words",
        "-w",
        min=WORDS_MIN,
        max=WORDS_MAX,
        help=f"Number of words in the password [{WORDS_MIN}-{WORDS_MAX}]",
    ),
    separator: Optional[Separator] = typer.Option(  # noqa: B008
        None, "--separator", "-s", help="Separator inserted between words"
    ),
    capitalize: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--capitalize/--no-capitalize",
        "-c/-C",
        help="Capitalize the first letter of each word",
    ),
    scramble: Optional[bool] = typer.Option(  # noqa: B008
        None,
        "--no-full-words/--full-words",
        help="Scramble the letters of each word",
    ),
) -> None:
    """Generate a human-friendly memorable password."""

    defaults = ctx.obj.cfg.memorable
    request = MemorableRequest(
        words=words if words is not None else defaults.words,
        separator=separator if separator is not None else defaults.separator,
        capitalize=_pick(capitalize, defaults.capitalize),
        scramble=_pick(scramble, defaults.scramble),
    )
    _emit(ctx, PasswordKind.MEMORABLE, request)


@app.command("random")
def random_(
    ctx: typer.Context,
    characters: Optional[int] = typer.Option(  # noqa: B008
        None,
        "--characters",
        "-c",
        min=CHARACTERS_MIN,
        max=CHARACTERS_MAX,
        help=f"Number of characters in the password [{CHARACTERS_MIN}-{CHARACTERS_MAX}]",
    ),
    numbers: Optional[bool] = typer.Option(  # noqa: B008
        None, "--numbers/--no-numbers", "-n/-N", help="Include digits"
    ),
    symbols: Optional[bool] = typer.Option(  # noqa: B008
        None, "--symbols/--no-symbols", "-s/-S", help="Include symbols"
    ),
) -> None:
    """Generate a random password with specified complexity."""

    defaults = ctx.obj.cfg.random
    request = RandomRequest(
        characters=characters if characters is not None else defaults.characters,
        numbers=_pick(numbers, defaults.numbers),
        symbols=_pick(symbols, defaults.symbols),
    )
    _emit(ctx, PasswordKind.RANDOM, request)


@app.command()
def pin(
    ctx: typer.Context,
    numbers: Optional[int] = typer.Option(  # noqa: B008
        None,
        "--numbers",
        "-n",
        min=PIN_MIN,
        max=PIN_MAX,
        help=f"Number of digits in the PIN [{PIN_MIN}-{PIN_MAX}]",
    ),
) -> None:
    """Generate a random numeric PIN code."""

    defaults = ctx.obj.cfg.pin
    request = PinRequest(numbers=numbers if numbers is not None else defaults.numbers)
    _emit(ctx, PasswordKind.PIN, request)
