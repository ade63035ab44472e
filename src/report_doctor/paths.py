"""Workspace path resolution.

Resolves the workspace the doctor runs against. Uses environment
variables when available, falls back to the current directory.

Environment variables:
    REPORT_DOCTOR_WORKSPACE_DIR — workspace root (default: current directory)
    REPORT_DOCTOR_CONFIG — config file (default: <workspace>/.report-doctor.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = ".report-doctor.yaml"


def workspace_root(raw: str | Path | None = None) -> Path:
    """Return the workspace root: explicit arg, then env, then cwd."""
    if raw:
        return Path(raw).expanduser().resolve()
    env = os.environ.get("REPORT_DOCTOR_WORKSPACE_DIR")
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd()


def config_path(workspace: Path) -> Path:
    """Return the path to the doctor config file for a workspace."""
    env = os.environ.get("REPORT_DOCTOR_CONFIG")
    if env:
        return Path(env).expanduser()
    return workspace / CONFIG_FILENAME
