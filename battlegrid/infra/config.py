"""Board configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from battlegrid.core.models import DEFAULT_BOARD_DIMENSION

BOARD_DIMENSION_ENV = "BATTLEGRID_BOARD_DIMENSION"


@dataclass(frozen=True, slots=True)
class BoardSettings:
    """Immutable board defaults sourced from environment."""

    dimension: int = DEFAULT_BOARD_DIMENSION


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left to right; later files win.

    Default order is ``.env`` then ``.env.local``.
    """
    to_load = tuple(paths) if paths is not None else (".env", ".env.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_board_settings() -> BoardSettings:
    """Load board settings from env vars."""
    return BoardSettings(dimension=_positive_int(BOARD_DIMENSION_ENV, DEFAULT_BOARD_DIMENSION))


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default
