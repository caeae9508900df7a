#!/usr/bin/env python
"""Summarise an ILCD zip package or print a single data set from it."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path

from tiangong_lca_ilcd import DataSetType, ILCDReaderError, ZipReader, classify_path
from tiangong_lca_ilcd.core.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect the data sets of an ILCD package.")
    parser.add_argument("package", type=Path, help="Path to the ILCD zip package.")
    parser.add_argument(
        "--type",
        choices=[item.folder for item in DataSetType],
        default=None,
        help="Data set type (package folder name) used together with --uuid.",
    )
    parser.add_argument("--uuid", default=None, help="UUID of a data set to show.")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the unparsed XML of the data set selected with --type/--uuid.",
    )
    parser.add_argument(
        "--log-file",
        default="",
        help="Write structured logs to this file instead of stdout (empty disables).",
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level.")
    return parser


def _print_summary(reader: ZipReader) -> None:
    counts: Counter[str] = Counter()
    for name in reader.entry_names():
        data_set_type = classify_path(name)
        counts[data_set_type.folder if data_set_type is not None else "other"] += 1
    for data_set_type in DataSetType:
        print(f"{data_set_type.folder}: {counts.get(data_set_type.folder, 0)}")
    print(f"other: {counts.get('other', 0)}")


def _print_data_set(reader: ZipReader, data_set_type: DataSetType, uuid: str, raw: bool) -> None:
    if raw:
        sys.stdout.write(reader.get_data(data_set_type, uuid).decode("utf-8", errors="replace"))
        return
    data_set = reader.get(data_set_type, uuid)
    print(f"type: {data_set_type.label}")
    print(f"uuid: {data_set.uuid}")
    print(f"version: {data_set.version}")
    for classification in data_set.classifications:
        print(f"classification: {' / '.join(classification.path())}")
    for ref in data_set.references():
        print(f"reference: {ref.type} {ref.uuid} {ref.name.get('en') or ref.name.first()}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.type is None) != (args.uuid is None):
        parser.error("--type and --uuid must be given together")
    if args.raw and args.uuid is None:
        parser.error("--raw requires --type and --uuid")

    configure_logging(args.log_level, log_path=Path(args.log_file) if args.log_file else None)
    try:
        with ZipReader(args.package) as reader:
            if args.uuid is None:
                _print_summary(reader)
            else:
                _print_data_set(reader, DataSetType(args.type), args.uuid, args.raw)
    except ILCDReaderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
