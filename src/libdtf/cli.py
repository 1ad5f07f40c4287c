"""Command line interface for comparing two JSON or YAML documents."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable, Optional

from dotenv import load_dotenv

from .api import compare
from .config import OUTPUT_FORMATS, build_config, build_settings
from .diff_types import WorkingContext, WorkingFile
from .errors import LibdtfError
from .exporters import export_all
from .loader import load_document
from .logging_config import configure_logging, get_logger
from .report import render_markdown, result_to_payload

EXIT_IDENTICAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dtf", description=__doc__)
    parser.add_argument("file_a", type=Path, help="First document (JSON or YAML)")
    parser.add_argument("file_b", type=Path, help="Second document (JSON or YAML)")
    parser.add_argument(
        "--config",
        help="Path to a libdtf.yaml settings file (defaults to ./libdtf.yaml if present)",
    )
    parser.add_argument(
        "--array-same-order",
        dest="array_same_order",
        action="store_true",
        default=None,
        help="Compare arrays position by position instead of as multisets",
    )
    parser.add_argument(
        "--no-array-same-order",
        dest="array_same_order",
        action="store_false",
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Format of the report printed to stdout",
    )
    parser.add_argument(
        "--parallel",
        dest="parallel",
        action="store_true",
        default=None,
        help="Run the four comparators on worker threads",
    )
    parser.add_argument("--out", type=Path, help="Optional path to write the printed report")
    parser.add_argument("--json", dest="json_out", type=Path, help="Optional path to write the raw diff JSON")
    parser.add_argument("--excel", dest="excel_out", type=Path, help="Optional path to write an Excel workbook")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    return parser


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments into a namespace."""

    parser = _create_parser()
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    load_dotenv(dotenv_path=Path.cwd() / ".env")
    args = parse_args(argv)
    configure_logging(args.log_level)
    logger = get_logger(__name__)

    try:
        settings = build_settings(args)
        working_context = WorkingContext(
            WorkingFile(str(args.file_a)),
            WorkingFile(str(args.file_b)),
            build_config(settings),
        )
        document_a = load_document(args.file_a)
        document_b = load_document(args.file_b)
        result = compare(document_a, document_b, working_context, parallel=settings["parallel"])
    except LibdtfError as exc:
        logger.error("Comparison failed: %s", exc, extra={"error_context": exc.context})
        return EXIT_ERROR

    logger.info(
        "Found %d difference(s) between %s and %s",
        result.total,
        args.file_a,
        args.file_b,
        extra={"counts": result.counts()},
    )

    if settings["output_format"] == "json":
        report = json.dumps(result_to_payload(result, working_context), indent=2, ensure_ascii=False)
    else:
        report = render_markdown(result, working_context)

    if args.out:
        args.out.write_text(report + "\n", encoding="utf-8")

    filenames = {}
    if args.json_out:
        filenames["json"] = args.json_out
    if args.excel_out:
        filenames["excel"] = args.excel_out
    if filenames:
        export_all(result, working_context, out_dir=None, formats=filenames.keys(), filenames=filenames)

    print(report)
    return EXIT_IDENTICAL if result.is_empty() else EXIT_DIFFERENT


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
