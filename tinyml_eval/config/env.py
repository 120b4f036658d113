"""
Environment variable loading for TinyML Eval.

- Loads the nearest .env found from the working directory upwards.
- Typed readers for integer / path / choice variables; malformed values
  raise ConfigurationError instead of falling back silently.
- Relative paths (from variables or CLI flags) resolve against the working
  directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from tinyml_eval.core.exceptions import ConfigurationError


def load_eval_env() -> None:
    """Load .env for the working directory. Safe to call multiple times; never overrides the real environment."""
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file, override=False)


def resolve_path(path: str | Path) -> Path:
    """Expand ~ and anchor relative paths at the working directory."""
    path = Path(path).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def env_str(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip()
    return raw or default


def env_int(name: str, default: int) -> int:
    """Read an integer variable. Unset or blank returns default."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def env_path(name: str, default: Path | None = None) -> Path | None:
    """Read a path variable (or the default) through resolve_path()."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None if default is None else resolve_path(default)
    return resolve_path(raw)


def env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    value = env_str(name, default).lower()
    if value not in choices:
        raise ConfigurationError(f"{name} must be one of {', '.join(choices)}; got {value!r}")
    return value
