"""Environment-driven defaults for grid composition."""

from __future__ import annotations

import os
from pathlib import Path

BACKGROUND_ENV = "TILEGRID_BACKGROUND"
MAX_WORKERS_ENV = "TILEGRID_MAX_WORKERS"
FALLBACK_BACKGROUND = "transparent"


def load_env_file() -> None:
    """Best-effort load TILEGRID_* settings from .env files.

    Checks (in order): this repo root, cwd, and HOME/.env. Values already in
    the environment are never overwritten.
    """

    candidates = [
        Path(__file__).resolve().parents[2] / ".env",  # this repo root
        Path.cwd() / ".env",
        Path.home() / ".env",
    ]

    for path in candidates:
        if not path.exists():
            continue
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            if not key.startswith("TILEGRID_") or key in os.environ:
                continue
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                value = value[1:-1]
            os.environ[key] = value


def default_background() -> str:
    return os.environ.get(BACKGROUND_ENV) or FALLBACK_BACKGROUND


def default_max_workers() -> int | None:
    """Worker count from the environment, or None for the executor default."""

    raw = os.environ.get(MAX_WORKERS_ENV, "").strip()
    if not raw:
        return None
    workers = int(raw)
    if workers <= 0:
        raise ValueError(f"{MAX_WORKERS_ENV} must be > 0")
    return workers
