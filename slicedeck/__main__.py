import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from slicedeck.config import DEFAULT_LOGLEVEL, Settings
from slicedeck.errors import SlicedeckError
from slicedeck.pipeline import Slicedeck
from slicedeck.utils import setup_logging

logger = logging.getLogger("slicedeck")


def cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="slicedeck",
        description="Generate an HTML slideshow from a markdown document"
    )
    parser.add_argument("source", type=Path, nargs="?", help="Markdown document to convert")
    parser.add_argument("-o", "--out", type=Path, help="Generated slideshow path")
    parser.add_argument("--asset-dir", type=Path, default=None,
                        help="Directory whose templates/resources replace the bundled ones")
    parser.add_argument("--input-encoding", default="utf-8", help="Encoding of the source document")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="Write logs to file as well")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = cli(argv)
    try:
        settings = Settings.from_env()
    except SlicedeckError as e:
        setup_logging(args.log_level or DEFAULT_LOGLEVEL, args.log_file)
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    if args.asset_dir:
        settings = replace(settings, asset_dir=args.asset_dir)
    setup_logging(args.log_level or settings.loglevel, args.log_file)

    try:
        deck = Slicedeck(
            args.source,
            settings=settings,
            output_path=args.out,
            input_encoding=args.input_encoding,
        )
        deck.run()
    except SlicedeckError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    return 0


def cli_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
