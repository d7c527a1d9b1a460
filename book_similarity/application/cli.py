"""
Command-line interface: rank the most similar pairs of books in a directory.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from book_similarity.application.errors import CorpusNotFoundError, CorpusSizeMismatchError
from book_similarity.application.log_setup import setup_logging
from book_similarity.application.services.corpus_loader import CorpusLoader
from book_similarity.application.services.ranker import CorpusRanker
from book_similarity.application.services.report import write_report
from book_similarity.application.settings import Settings, get_settings


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="book-similarity",
        description="Report the most similar pairs of text files by shared word frequency.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=settings.books_dir,
        help=f"Directory containing '{settings.file_suffix}' files (default: {settings.books_dir}).",
    )
    count = parser.add_mutually_exclusive_group()
    count.add_argument(
        "--expected-count",
        type=int,
        default=settings.expected_file_count,
        help="Exact number of files the corpus must contain.",
    )
    count.add_argument(
        "--any-count",
        action="store_true",
        help="Skip the corpus size check.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=settings.top_pairs,
        help="Number of pairs to report.",
    )
    parser.add_argument(
        "--max-words",
        type=int,
        default=settings.max_frequent_words,
        help="Most frequent words kept per file.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.debug,
        help="Verbose logging to stderr.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    base = get_settings()
    args = _build_parser(base).parse_args(argv)

    setup_logging(base)
    try:
        # model_validate so option values go through the same validators as env/.env ones
        settings = Settings.model_validate({
            **base.model_dump(),
            "books_dir": args.directory,
            "expected_file_count": None if args.any_count else args.expected_count,
            "top_pairs": args.top,
            "max_frequent_words": args.max_words,
            "debug": args.debug,
        })
    except ValidationError as e:
        for err in e.errors():
            logger.error("Error: invalid {}: {}", ".".join(str(p) for p in err["loc"]), err["msg"])
        return 2
    setup_logging(settings)

    loader = CorpusLoader(suffix=settings.file_suffix)
    ranker = CorpusRanker.build(settings)

    try:
        files = loader.list_files(settings.books_dir)
        pairs = ranker.rank_pairs(files)
    except CorpusNotFoundError as e:
        logger.error(str(e))
        return 2
    except CorpusSizeMismatchError as e:
        logger.error(str(e))
        return 1

    write_report(pairs, sys.stdout, top=settings.top_pairs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
