"""
Project name/version lookup for log stamping.

The installed distribution metadata wins; a source checkout falls back to
the nearest pyproject.toml.
"""

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any

DIST_NAME = "tasktracker"


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    p = start
    for _ in range(max_up):
        candidate = p / "pyproject.toml"
        if candidate.exists():
            return candidate
        if p.parent == p:
            break
        p = p.parent
    return None


def get_pyproject_value(key: str, start: Path | None = None, default: Any = None) -> Any:
    """Dot-separated lookup such as "project.version"; `default` on any miss."""
    pyproject = find_pyproject(start or Path(__file__).resolve().parent)
    if pyproject is None:
        return default
    try:
        with pyproject.open("rb") as f:
            cur = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return default
    for part in key.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def get_project_name(default: str = DIST_NAME) -> str:
    return get_pyproject_value("project.name", default=default)


def get_project_version(default: str = "unknown") -> str:
    try:
        return importlib_metadata.version(DIST_NAME)
    except importlib_metadata.PackageNotFoundError:
        return get_pyproject_value("project.version", default=default)
