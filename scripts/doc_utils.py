#!/usr/bin/env python3
"""Shared helpers for the site build scripts."""
from __future__ import annotations

import os
import pathlib
import sys

def repo_root(module_path: pathlib.Path | None = None) -> pathlib.Path:
    """Return the checkout root, or the working directory for installed modules."""
    here = (module_path or pathlib.Path(__file__)).resolve().parent
    if here.name == "scripts":
        return here.parent
    return pathlib.Path.cwd()


def _env_path(name: str, default: str) -> pathlib.Path:
    value = os.getenv(name)
    if value:
        return pathlib.Path(value)
    return repo_root() / default


def config_dir() -> pathlib.Path:
    """Return the YAML source root ($PREBUILD_CONFIG_DIR or <root>/config)."""
    return _env_path("PREBUILD_CONFIG_DIR", "config")


def data_dir() -> pathlib.Path:
    """Return the JSON output root ($PREBUILD_DATA_DIR or <root>/data)."""
    return _env_path("PREBUILD_DATA_DIR", "data")


def artifacts_dir() -> pathlib.Path:
    return _env_path("PREBUILD_ARTIFACTS_DIR", "artifacts")


# Diagnostics ---------------------------------------------------------------
def info(message: str) -> None:
    print(f"[INFO] {message}")


def warn(message: str) -> None:
    print(f"[WARN] {message}", file=sys.stderr)


def error(message: str) -> None:
    print(f"[ERROR] {message}", file=sys.stderr)


def describe_error(exc: BaseException) -> str:
    """Return the message shown after `Failed to ...:` in error lines."""
    text = str(exc).strip()
    return text or type(exc).__name__


def display_path(path: pathlib.Path, base: pathlib.Path) -> str:
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)


def ensure_dir(path: pathlib.Path) -> bool:
    """Create path (and parents) if missing. Return True when it was created."""
    if path.is_dir():
        return False
    info(f"Creating Data Directory: {path}")
    path.mkdir(parents=True, exist_ok=True)
    return True
