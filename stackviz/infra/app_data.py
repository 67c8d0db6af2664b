"""App-data paths for visualizer runtime files."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def resolve_app_root() -> Path:
    """Resolve the runtime application root directory."""
    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            return Path(executable).resolve().parent
    return Path(__file__).resolve().parents[2]


def resolve_app_data_root() -> Path:
    """Resolve app-data root, honoring ``STACKVIZ_APP_DATA_DIR``."""
    configured = os.getenv("STACKVIZ_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return resolve_app_root() / candidate
    return resolve_app_root() / "appdata"


def resolve_logs_dir() -> Path:
    """Resolve logs directory, honoring ``STACKVIZ_LOG_DIR``."""
    configured = os.getenv("STACKVIZ_LOG_DIR", "").strip()
    if configured:
        return Path(configured)
    return resolve_app_data_root() / "logs"
