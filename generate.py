#!/usr/bin/env python3
"""Lyrics flashcard generation.

Reads every lyrics file in a folder and writes one CSV of cards per song,
ready for flashcard import. Each card shows a few lines of the song and asks
for the next one.

Folder structure:
    lyrics/
        -config.json          (optional)
        Hey Jude.txt
        Yesterday.txt
        Hey Jude.csv          (written)
        Yesterday.csv         (written)

Usage:
    python generate.py lyrics/ --verbose
"""

import argparse
from pathlib import Path
from typing import List, Optional

from lyricnotes.common.config import CONFIG_FILENAME, load_folder_config
from lyricnotes.common.logging import log_error, setup_thread_prefixed_stdout
from lyricnotes.output.processing import SongProcessingError, process_folder


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate next-line flashcards (CSV) from a folder of plain-text lyrics"
    )
    parser.add_argument(
        "source_directory",
        type=Path,
        help="Directory containing plain-text lyrics (one file per song)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Where to write the CSV files (default: the source directory, or output_dir in -config.json)",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help="Number of songs to process in parallel (default: 1)",
    )
    parser.add_argument(
        "--max-window",
        type=_positive_int,
        default=None,
        help="Cap on the number of prompt lines per card (default: no cap)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    source_dir: Path = args.source_directory

    if not source_dir.is_dir():
        log_error(f"Source directory does not exist or is not a directory: {source_dir}")
        return 2

    try:
        config = load_folder_config(source_dir)
    except (ValueError, OSError) as e:
        # json.JSONDecodeError is a ValueError
        log_error(f"Invalid {CONFIG_FILENAME} in {source_dir}: {e}")
        return 2

    if args.output_dir is not None:
        config.output_dir = str(Path(args.output_dir).resolve())
    if args.workers is not None:
        config.workers = args.workers
    if args.max_window is not None:
        config.max_window = args.max_window

    if config.workers > 1:
        setup_thread_prefixed_stdout()

    try:
        songs, cards = process_folder(source_dir, config, verbose=args.verbose, debug=args.debug)
    except SongProcessingError as e:
        log_error(str(e))
        return 1
    except OSError as e:
        log_error(f"Failed to process {source_dir}: {e}")
        return 1

    if args.verbose:
        print(f"\n{'=' * 60}")
        print("✅ Complete!")
        print(f"   Songs written: {songs}")
        print(f"   Cards generated: {cards}")
        print(f"{'=' * 60}\n")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
