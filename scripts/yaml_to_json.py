#!/usr/bin/env python3
"""
Mirror a tree of YAML files into a tree of pretty-printed JSON files.

Every `*.yml` / `*.yaml` under the source root is written to the same
relative path under the destination root with a `.json` extension. Other
files are ignored. A file that fails to convert is reported and skipped;
the rest of the tree is still processed.

Usage:
  python3 scripts/yaml_to_json.py [--src DIR] [--dest DIR] [--strict]
  python3 scripts/yaml_to_json.py <input.yaml> <output.json>
"""
from __future__ import annotations

import argparse
import datetime as _dt
import json
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml

from doc_utils import config_dir, data_dir, describe_error, display_path, error, info, warn

YAML_SUFFIXES = (".yml", ".yaml")


@dataclass
class ConversionFailure:
    path: Path
    message: str


@dataclass
class ConversionReport:
    converted: List[Tuple[Path, Path]] = field(default_factory=list)
    failures: List[ConversionFailure] = field(default_factory=list)

    @property
    def processed_count(self) -> int:
        return len(self.converted)

    @property
    def ok(self) -> bool:
        return not self.failures


def is_yaml(name: str) -> bool:
    return name.endswith(YAML_SUFFIXES)


def json_name(name: str) -> str:
    for suffix in YAML_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)] + ".json"
    return name + ".json"


def _json_default(value: Any) -> Any:
    # safe_load turns unquoted timestamps into date/datetime objects
    if isinstance(value, (_dt.date, _dt.datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _finite(value: Any) -> Any:
    # .inf and .nan have no JSON form; write null like JSON.stringify does
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_finite(item) for item in value]
    return value


def dump_json(data: Any) -> str:
    return json.dumps(_finite(data), allow_nan=False, ensure_ascii=False, indent=2, default=_json_default) + "\n"


def convert_file(src: Path, dst: Path) -> None:
    """Convert one YAML document to JSON. Errors propagate to the caller."""
    data = yaml.safe_load(src.read_text(encoding="utf-8"))
    text = dump_json(data)
    dst.parent.mkdir(parents=True, exist_ok=True)
    dst.write_text(text, encoding="utf-8")


def convert(source_root: Path, dest_root: Path) -> ConversionReport:
    """Mirror YAML files under source_root as JSON files under dest_root.

    Never raises for a single file: each failure is logged and recorded in
    the returned report. Entries are visited depth-first, sorted by name
    within each directory. Symlinked files and directories are skipped.
    """
    source_root = Path(source_root)
    dest_root = Path(dest_root)
    report = ConversionReport()

    if not source_root.is_dir():
        warn(f"Config Directory Not Found: {source_root}")
        return report

    try:
        dest_root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        error(f"Failed to Create {dest_root}: {describe_error(exc)}")
        report.failures.append(ConversionFailure(dest_root, describe_error(exc)))
        return report

    def on_walk_error(exc: OSError) -> None:
        path = Path(exc.filename) if exc.filename else source_root
        error(f"Failed to Read Directory {path}: {describe_error(exc)}")
        report.failures.append(ConversionFailure(path, describe_error(exc)))

    for current, dirnames, filenames in os.walk(source_root, onerror=on_walk_error):
        dirnames.sort()
        src_dir = Path(current)
        dest_dir = dest_root / src_dir.relative_to(source_root)
        for name in sorted(filenames):
            src = src_dir / name
            if not is_yaml(name) or src.is_symlink():
                continue
            dst = dest_dir / json_name(name)
            try:
                convert_file(src, dst)
            except Exception as exc:
                error(f"Failed to Process {src}: {describe_error(exc)}")
                report.failures.append(ConversionFailure(src, describe_error(exc)))
                continue
            info(f"Converted {display_path(src, source_root)} --> {display_path(dst, dest_root)}")
            report.converted.append((src, dst))

    info(f"YAML to JSON Conversion Completed: {report.processed_count} File(s) Processed")
    return report


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert YAML config files to JSON, mirroring the directory tree."
    )
    parser.add_argument(
        "--src",
        type=Path,
        help="Source directory of YAML files (defaults to $PREBUILD_CONFIG_DIR or config/).",
    )
    parser.add_argument(
        "--dest",
        type=Path,
        help="Destination directory for JSON files (defaults to $PREBUILD_DATA_DIR or data/).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any file fails to convert.",
    )
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        type=Path,
        help="Optional <input.yaml> <output.json> pair for a single-file conversion.",
    )
    args = parser.parse_args(argv)
    if args.files and len(args.files) != 2:
        parser.error("single-file mode takes exactly <input.yaml> <output.json>")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.files:
        src, dst = args.files
        try:
            convert_file(src, dst)
        except Exception as exc:
            error(f"Failed to Process {src}: {describe_error(exc)}")
            return 1
        info(f"Converted {src} --> {dst}")
        return 0

    report = convert(args.src or config_dir(), args.dest or data_dir())
    if args.strict and not report.ok:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
