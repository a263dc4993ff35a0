"""Typed configuration schema and loader for the passforge package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, conint

from passforge.generate.separators import Separator

# ---------------------------------------------------------------------------
# Bounds enforced on behalf of the generation core
# ---------------------------------------------------------------------------

WORDS_MIN, WORDS_MAX = 3, 15
CHARACTERS_MIN, CHARACTERS_MAX = 8, 100
PIN_MIN, PIN_MAX = 3, 12

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class MemorableSettings(BaseModel):
    """Defaults for memorable passwords."""

    words: conint(ge=WORDS_MIN, le=WORDS_MAX)  # type: ignore[valid-type]
    separator: Separator
    capitalize: bool
    scramble: bool

    model_config = ConfigDict(extra="forbid")


class RandomSettings(BaseModel):
    """Defaults for random passwords."""

    characters: conint(ge=CHARACTERS_MIN, le=CHARACTERS_MAX)  # type: ignore[valid-type]
    numbers: bool
    symbols: bool

    model_config = ConfigDict(extra="forbid")


class PinSettings(BaseModel):
    """Defaults for PIN codes."""

    numbers: conint(ge=PIN_MIN, le=PIN_MAX)  # type: ignore[valid-type]

    model_config = ConfigDict(extra="forbid")


class CorpusSettings(BaseModel):
    """Word list used for memorable passwords."""

    path: Path | None = None

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """How generated passwords are delivered."""

    format: Literal["text", "json"]
    clipboard: bool
    analyze: bool

    model_config = ConfigDict(extra="forbid")


class SeedSettings(BaseModel):
    """Settings for deterministic generation seed values."""

    secret_env: str
    secret: SecretStr | None = None

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    memorable: MemorableSettings
    random: RandomSettings
    pin: PinSettings
    corpus: CorpusSettings
    output: OutputSettings
    seed: SeedSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable for the seed secret.  An empty environment value is
    treated as unset.
    """

    with (
        importlib_resources.files("passforge.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    secret = environ.get(cfg.seed.secret_env)
    if secret:
        cfg.seed.secret = SecretStr(secret)

    return cfg


__all__ = [
    "CHARACTERS_MAX",
    "CHARACTERS_MIN",
    "ConfigModel",
    "CorpusSettings",
    "MemorableSettings",
    "OutputSettings",
    "PIN_MAX",
    "PIN_MIN",
    "PinSettings",
    "RandomSettings",
    "SeedSettings",
    "WORDS_MAX",
    "WORDS_MIN",
    "deep_merge_dicts",
    "load_config",
]
