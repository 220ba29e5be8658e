"""Typer-based command line interface for the findkit helpers.

Each command is a thin wrapper over one helper module.  Configuration is
loaded from the package defaults, optionally overridden by ``--config``, and
rewires the log handles before the command runs.

Exit codes
----------
0 success
3 I/O error (missing input, unwritable output)
4 configuration error (bad config file, invalid compression level)
5 data error (corrupt or truncated compressed input)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from .codec import compress, decompress
from .config import ConfigModel, load_config
from .hashing import md5_hex
from .netaddr import get_local_ip
from .randstr import ClockSeededSource, RandomStringGenerator, default_source
from .stats import average, standard_deviation
from .utils.errors import CompressionLevelError, ConfigError, DecompressionError
from .utils.logging import Timing, configure_from

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="findkit",
    help="Standalone helpers: random strings, DEFLATE compression, LAN address, hashing, stats.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> ConfigModel:
    """Load configuration and wire the log handles, exiting with 4 on failure.

    Log records never go to stdout, which carries the command output.
    """

    try:
        cfg = load_config(config_path)
    except (ValidationError, ConfigError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_from(cfg, reserve_stdout=True)
    return cfg


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        _safe_exit(3, str(exc))
    return b""  # pragma: no cover - _safe_exit always raises


def _write_bytes(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as exc:
        _safe_exit(3, str(exc))


@app.callback()
def main() -> None:
    """Entry point for the findkit command group."""
    pass


@app.command()
def randstr(
    length: int = typer.Argument(..., min=0, help="Number of letters to generate"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Print a random string of LENGTH letters."""

    cfg = _load(config_path)
    seed = seed if seed is not None else cfg.random.seed
    source = ClockSeededSource(seed) if seed is not None else default_source()
    typer.echo(RandomStringGenerator(source).generate(length))


@app.command("compress")
def compress_cmd(
    in_path: Path = typer.Option(..., "--in", "--input", help="File to compress"),
    out_path: Path = typer.Option(..., "--out", help="Destination of the compressed bytes"),
    level: Optional[int] = typer.Option(None, "--level", help="Compression level 0-9"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Emit sizes and timing to stderr"
    ),
) -> None:
    """Compress a file with raw DEFLATE."""

    cfg = _load(config_path)
    level = cfg.codec.level if level is None else level
    data = _read_bytes(in_path)
    try:
        with Timing() as t:
            packed = compress(data, level)
    except CompressionLevelError as exc:
        _safe_exit(4, str(exc))
    _write_bytes(out_path, packed)
    if verbose:
        typer.echo(f"{len(data)} -> {len(packed)} bytes at level {level} in {t.ms:.1f} ms", err=True)


@app.command("decompress")
def decompress_cmd(
    in_path: Path = typer.Option(..., "--in", "--input", help="Compressed file"),
    out_path: Path = typer.Option(..., "--out", help="Destination of the decompressed bytes"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Emit sizes and timing to stderr"
    ),
) -> None:
    """Decompress a raw DEFLATE file."""

    _load(config_path)
    data = _read_bytes(in_path)
    try:
        with Timing() as t:
            unpacked = decompress(data)
    except DecompressionError as exc:
        _safe_exit(5, str(exc))
    _write_bytes(out_path, unpacked)
    if verbose:
        typer.echo(f"{len(data)} -> {len(unpacked)} bytes in {t.ms:.1f} ms", err=True)


@app.command("local-ip")
def local_ip(
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Address prefix to match"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Print the first LAN IPv4 address, or 'localhost'."""

    cfg = _load(config_path)
    typer.echo(get_local_ip(prefix if prefix is not None else cfg.network.prefix))


@app.command()
def md5(text: str = typer.Argument(..., help="Text to hash")) -> None:
    """Print the hex MD5 digest of TEXT."""

    typer.echo(md5_hex(text))


@app.command()
def stats(values: List[float] = typer.Argument(..., help="Numbers to summarize")) -> None:
    """Print the mean and sample standard deviation of VALUES."""

    typer.echo(f"mean={average(values):g}")
    typer.echo(f"sd={standard_deviation(values):g}")
