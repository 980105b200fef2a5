"""Package version lookup.

A source checkout reports the ``[project]`` version of its ``pyproject.toml``
so that ``--version`` tracks edits without a reinstall. An installed wheel has
no such file next to it and falls back to the distribution metadata.
"""

from __future__ import annotations

import tomllib
from importlib import metadata
from pathlib import Path

DISTRIBUTION = "commacalc"
UNKNOWN_VERSION = "0.0.0"

# src/commacalc/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version(pyproject: Path) -> str | None:
    if not pyproject.is_file():
        return None
    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    project = data.get("project", {})
    if project.get("name") != DISTRIBUTION:
        return None
    version = project.get("version")
    return version if isinstance(version, str) else None


def get_version(pyproject: Path = _PYPROJECT) -> str:
    """Return the commacalc version string."""
    found = _checkout_version(pyproject)
    if found is not None:
        return found
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return UNKNOWN_VERSION
