"""Application configuration and env loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from stackviz.core.models import DEFAULT_LIMITS, DEFAULT_SPEED, MAX_SPEED, MIN_SPEED, StackLimits


@dataclass(frozen=True, slots=True)
class VisualizerConfig:
    """Immutable startup configuration."""

    initial_speed: int = DEFAULT_SPEED
    dark_mode: bool = False
    frame_interval_ms: int = 16
    limits: StackLimits = field(default_factory=lambda: DEFAULT_LIMITS)


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
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
    """Load env files, later files overriding earlier ones.

    Default order:
    1) appdata/config/.env.app
    2) appdata/config/.env.app.local
    3) .env
    4) .env.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_visualizer_config() -> VisualizerConfig:
    """Build startup configuration from ``STACKVIZ_*`` env vars."""
    speed = _int("STACKVIZ_INITIAL_SPEED", DEFAULT_SPEED)
    return VisualizerConfig(
        initial_speed=min(MAX_SPEED, max(MIN_SPEED, speed)),
        dark_mode=_flag("STACKVIZ_DARK_MODE"),
        frame_interval_ms=max(1, _int("STACKVIZ_FRAME_INTERVAL_MS", 16)),
    )


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[2]
    return project_root / path
