"""Sidebar and site configuration builder for the backend course notes."""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]

_VERSION_LINE = re.compile(r'^version\s*=\s*"(?P<version>[^"]+)"\s*$')


def _read_project_version(pyproject: Path) -> str | None:
    """Return `[project].version` from one pyproject file, if declared."""
    section = ""
    for line in pyproject.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if stripped.startswith("[") and stripped.endswith("]"):
            section = stripped
        elif section == "[project]":
            match = _VERSION_LINE.match(stripped)
            if match:
                return match.group("version")
    return None


def _source_tree_version() -> str | None:
    """Look upwards from this file for the checkout's pyproject.toml."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if pyproject.is_file():
            return _read_project_version(pyproject)
    return None


try:
    __version__ = _source_tree_version() or version("coursenav")
except PackageNotFoundError:
    __version__ = "0+unknown"
