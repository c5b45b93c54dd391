#!/usr/bin/env python3
"""Pre-build step for the documentation site.

Bootstraps the data directory and converts the YAML configuration under
config/ into JSON under data/. Failures are logged and never abort the
surrounding build; pass --strict to turn conversion failures into a
non-zero exit status.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from doc_utils import config_dir, data_dir, describe_error, ensure_dir, error, info, warn
from yaml_to_json import ConversionReport, convert


class PreBuild:
    def __init__(self, config_root: Optional[Path] = None, data_root: Optional[Path] = None) -> None:
        self.config_root = Path(config_root) if config_root else config_dir()
        self.data_root = Path(data_root) if data_root else data_dir()
        self.setup_config()

    def setup_config(self) -> None:
        try:
            ensure_dir(self.data_root)
        except OSError as exc:
            error(f"Failed to Setup Configuration: {describe_error(exc)}")

    def process_yaml_to_json(self) -> ConversionReport:
        return convert(self.config_root, self.data_root)

    def process(self) -> Optional[ConversionReport]:
        try:
            info("Starting Build Process...")
            report = self.process_yaml_to_json()
            info("Build Process Completed Successfully")
            return report
        except Exception as exc:
            error(f"Build Process Failed: {describe_error(exc)}")
            warn("Continuing with Build Despite Pre-Build Errors")
            return None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--config-dir", type=Path, help="YAML source directory (default: config/).")
    parser.add_argument("--data-dir", type=Path, help="JSON output directory (default: data/).")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when the conversion reports any failure.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    report = PreBuild(args.config_dir, args.data_dir).process()
    if args.strict and (report is None or not report.ok):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
