"""
Error kinds raised while loading, profiling and ranking a corpus.

Only two are part of a normal run: an unreadable file (recovered by the
profiler, which treats the file as empty) and a corpus of the wrong size
(fatal for ranking). A missing corpus directory is reported by the CLI.
"""

from __future__ import annotations


class BookSimilarityError(Exception):
    """Base exception for book_similarity errors."""


class UnreadableFileError(BookSimilarityError):
    def __init__(self, path: str):
        self.path = str(path)
        super().__init__(f"Error: Could not open file {self.path}")


class CorpusSizeMismatchError(BookSimilarityError):
    def __init__(self, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(f"Error: Expected {expected} files, but found {found}")


class CorpusNotFoundError(BookSimilarityError):
    def __init__(self, directory: str):
        self.directory = str(directory)
        super().__init__(f"Error: Corpus directory not found: {self.directory}")
