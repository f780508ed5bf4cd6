"""
Command line entry point for the text splitter.

Examples:
    python -m text_splitter notes.txt -m 128
    python -m text_splitter notes.txt -m 64 -a whitespace -o notes-chunks.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import SplitterServiceConfig
from .exceptions import SplitterError
from .logging_config import setup_logging
from .models import SplitResult, SplitterConfig
from .service import SplitterService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text_splitter",
        description="Split a text document into token-bounded chunks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s notes.txt
  %(prog)s notes.txt -m 128 -o chunks.json
  %(prog)s notes.txt -a whitespace --keep-trailing-space
        """
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Path to the UTF-8 text file to split"
    )
    parser.add_argument(
        "-m", "--max-tokens",
        type=int,
        default=256,
        help="Maximum tokens per chunk (default: 256)"
    )
    parser.add_argument(
        "-a", "--annotator",
        choices=["tiktoken", "whitespace"],
        default="tiktoken",
        help="Token counting annotator (default: tiktoken)"
    )
    parser.add_argument(
        "-e", "--encoding",
        default="cl100k_base",
        help="tiktoken encoding name (default: cl100k_base)"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Write the split result as JSON to this file"
    )
    parser.add_argument(
        "--keep-trailing-space",
        action="store_true",
        help="Keep a trailing space after sentence- and word-packed chunks"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug output"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only show warnings and errors"
    )
    return parser


def print_summary(result: SplitResult, output: Path) -> None:
    stats = result.stats
    print(f"Document:   {result.document_id}")
    print(f"Paragraphs: {stats.total_paragraphs}")
    print(f"Chunks:     {stats.total_chunks}")
    print(f"Tokens:     {stats.total_tokens} (avg {stats.avg_chunk_tokens:.1f}, "
          f"min {stats.min_chunk_tokens}, max {stats.max_chunk_tokens})")
    print(f"Saved:      {output}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    setup_logging(level=log_level, log_file=args.log_file)

    if not args.input.is_file():
        logger.error(f"Input file not found: {args.input}")
        return 1

    try:
        settings = SplitterConfig(
            annotator=args.annotator,
            encoding_name=args.encoding,
            keep_trailing_space=args.keep_trailing_space,
        )
        service = SplitterService(SplitterServiceConfig(splitter=settings))
        result = service.split_file(str(args.input), max_tokens=args.max_tokens)
    except SplitterError as e:
        logger.error(str(e))
        return 1
    except UnicodeDecodeError as e:
        logger.error(f"Input file is not valid UTF-8: {args.input} ({e.reason} at byte {e.start})")
        return 1

    if args.output:
        result.save(str(args.output))
        if not args.quiet:
            print_summary(result, args.output)
    else:
        for chunk in result.chunks:
            print(chunk.text)
            print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
