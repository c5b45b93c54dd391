#!/usr/bin/env python3
"""Stamp artifacts/portfolio/version.json with today's date (YYYY.MM.DD)."""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import pathlib as _pl
import re
import sys
from typing import List, Optional

from doc_utils import artifacts_dir, describe_error, error, info

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def default_version_path() -> _pl.Path:
    return artifacts_dir() / "portfolio" / "version.json"


def version_stamp(today: _dt.date) -> str:
    return f"{today.year:04d}.{today.month:02d}.{today.day:02d}"


def set_version(path: _pl.Path, stamp: str) -> Optional[str]:
    if not path.exists():
        error(f"version.json not Found at {path}")
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{path} root must be an object")
        data["version"] = stamp
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    except (OSError, ValueError) as exc:
        error(f"Failed to Update Version: {describe_error(exc)}")
        return None

    info(f"Version Updated: {stamp}")
    return stamp


class PostBuild:
    def __init__(self, version_path: Optional[_pl.Path] = None) -> None:
        self.version_path = _pl.Path(version_path) if version_path else default_version_path()

    def process(self, today: Optional[_dt.date] = None) -> Optional[str]:
        try:
            info("Starting Post Build Process...")
            stamp = set_version(self.version_path, version_stamp(today or _dt.date.today()))
            info("Post Build Process Completed Successfully")
            return stamp
        except Exception as exc:
            error(f"Post Build Process Failed: {describe_error(exc)}")
            return None


def resolve_date(value: Optional[str]) -> _dt.date:
    if value is None:
        return _dt.date.today()
    if not DATE_RE.fullmatch(value):
        raise SystemExit(f"error: invalid --date value '{value}' (expected YYYY-MM-DD)")
    try:
        return _dt.date.fromisoformat(value)
    except ValueError as exc:
        raise SystemExit(f"error: invalid --date value '{value}': {exc}") from exc


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--version-file",
        type=_pl.Path,
        help="version.json to stamp (defaults to artifacts/portfolio/version.json).",
    )
    parser.add_argument(
        "--date",
        type=str,
        help="Explicit YYYY-MM-DD date to stamp (defaults to today's date).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    today = resolve_date(args.date)
    PostBuild(args.version_file).process(today)
    return 0


if __name__ == "__main__":
    sys.exit(main())
