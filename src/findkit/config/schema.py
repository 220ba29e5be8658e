"""Typed configuration schema and loader for the findkit package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint

from findkit.utils.errors import ConfigError

Sink = Literal["discard", "stdout", "stderr"]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Sink of each log handle."""

    trace: Sink = "discard"
    info: Sink = "stdout"
    debug: Sink = "stdout"
    warning: Sink = "stdout"
    error: Sink = "stderr"

    model_config = ConfigDict(extra="forbid")


class RandomSettings(BaseModel):
    """Seeding of the random string source."""

    seed: int | None = None
    seed_env: str

    model_config = ConfigDict(extra="forbid")


class CodecSettings(BaseModel):
    """Default compression level."""

    level: conint(ge=0, le=9) = 9

    model_config = ConfigDict(extra="forbid")


class NetworkSettings(BaseModel):
    """Local address discovery settings."""

    prefix: str = "192.168"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    logging: LoggingSettings
    random: RandomSettings
    codec: CodecSettings
    network: NetworkSettings

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
    environment variable named by ``random.seed_env``.

    Raises
    ------
    pydantic.ValidationError
        If the merged configuration does not match the schema.
    ConfigError
        If the seed environment variable does not hold an integer.
    """

    with (
        importlib_resources.files("findkit.config")
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
    seed_env = cfg.random.seed_env
    if seed_env in environ:
        raw = environ[seed_env]
        try:
            cfg.random.seed = int(raw)
        except ValueError:
            raise ConfigError(f"{seed_env} must be an integer, got {raw!r}") from None

    return cfg


__all__ = [
    "ConfigModel",
    "LoggingSettings",
    "RandomSettings",
    "CodecSettings",
    "NetworkSettings",
    "deep_merge_dicts",
    "load_config",
]
