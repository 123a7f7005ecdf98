"""Command-line entrypoint for the ingest job."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from food_normalizer.app_logging import configure_logging
from food_normalizer.config import Settings
from food_normalizer.containers import build_container

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="food-normalizer",
        description="Normalize an Open Food Facts JSONL export into chunked files.",
    )
    parser.add_argument("--input", type=Path, help="input .jsonl or .jsonl.gz file")
    parser.add_argument("--output-dir", type=Path, help="directory for output chunks")
    parser.add_argument("--chunk-size", type=int, help="records per output file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Load settings and apply command-line overrides."""
    overrides: dict[str, object] = {}
    if args.input is not None:
        overrides["input_file"] = args.input
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.chunk_size is not None:
        overrides["chunk_size"] = args.chunk_size
    return Settings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ingest job and return a process exit code."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    configure_logging("DEBUG" if args.verbose else settings.log_level)
    container = build_container(settings)
    try:
        container.pipeline.run()
    except OSError as exc:
        _logger.error("Ingest failed: %s", exc)
        return 1
    return 0
