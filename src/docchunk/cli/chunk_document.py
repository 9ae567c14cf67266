"""CLI command that splits a PDF or EPUB into chunk files plus a manifest."""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging

from docchunk.config import DecompositionSettings
from docchunk.decomposition import DecompositionError, DocumentDecomposer

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _positive_int(raw_value: str) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Pages per chunk must be a positive number") from exc
    if value < 1:
        raise argparse.ArgumentTypeError("Pages per chunk must be a positive number")
    return value


def build_parser(default_units: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split a PDF into page-range chunks or an EPUB into section-group text chunks",
        epilog="Examples: book.pdf -p 10 | book.epub -p 8 | book.pdf -p 5 -o ./chunks",
    )
    parser.add_argument("input", help="Input .pdf or .epub file")
    parser.add_argument(
        "-p",
        "--pages",
        type=_positive_int,
        default=default_units,
        help=f"Pages/sections per chunk (default: {default_units})",
    )
    parser.add_argument("-o", "--output", default=None, help="Output directory (default: <input>_chunks/)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped resources and other details")
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        env_settings = DecompositionSettings.from_env()
    except ValueError as error:
        logging.basicConfig(format=_LOG_FORMAT, level=logging.INFO)
        logger.error("Configuration error: %s", error)
        return 1

    args = build_parser(env_settings.units_per_chunk).parse_args(argv)
    logging.basicConfig(format=_LOG_FORMAT, level=logging.DEBUG if args.verbose else logging.INFO)

    settings = replace(env_settings, units_per_chunk=args.pages)

    try:
        result = DocumentDecomposer(settings).decompose(args.input, output_dir=args.output)
    except DecompositionError as error:
        logger.error("Error: %s", error)
        return 1

    payload = {
        "output_dir": str(result.output_dir),
        "manifest_path": str(result.manifest_path),
        "manifest": result.manifest.to_dict(),
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
