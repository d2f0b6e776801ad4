"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env.app",
    "appdata/config/.env.app.local",
    ".env.app",
    ".env.app.local",
)


def parse_env_lines(lines: Iterable[str]) -> dict[str, str]:
    """Parse KEY=VALUE lines, skipping blanks, comments and malformed entries."""
    values: dict[str, str] = {}
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        values[key] = value
    return values


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load an env file into the process environment.

    Existing variables are overwritten unless `override_existing` is False.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return
    parsed = parse_env_lines(env_path.read_text(encoding="utf-8").splitlines())
    for key, value in parsed.items():
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files left-to-right; later files win.

    Default order: appdata/config/.env.app, its .local override, then the
    root-level .env.app and .env.app.local.
    """
    to_load = tuple(paths) if paths is not None else DEFAULT_ENV_FILES
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
