"""Tests for package layout, version and packaging metadata."""

from __future__ import annotations

import importlib
import pkgutil
import tomllib
from pathlib import Path
from typing import Any

import findkit


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def test_version() -> None:
    assert findkit.__version__ == "0.1.0"


def test_all_modules_have_docstrings() -> None:
    """Ensure every submodule can be imported and has a docstring."""
    assert findkit.__doc__ and findkit.__doc__.strip()
    for module_info in pkgutil.walk_packages(findkit.__path__, findkit.__name__ + "."):
        module = importlib.import_module(module_info.name)
        assert module.__doc__ and module.__doc__.strip(), f"Missing docstring in {module_info.name}"


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject().get("project", {}).get("scripts", {})
    assert scripts.get("findkit") == "findkit.cli:app"


def test_runtime_dependencies_declared() -> None:
    deps = " ".join(_load_pyproject()["project"]["dependencies"])
    for name in ("pydantic", "PyYAML", "typer", "psutil"):
        assert name in deps
