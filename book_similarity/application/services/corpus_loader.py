from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union
from loguru import logger

from book_similarity.application.errors import CorpusNotFoundError


@dataclass
class CorpusLoader:
    suffix: str = ".txt"

    def list_files(self, directory: Union[str, Path]) -> List[Path]:
        """
        List the corpus files of a directory.

        Returns:
            immediate entries whose suffix matches, in filesystem enumeration
            order (not sorted); this order defines the file indices used for
            ranking and tie-breaks.

        Raises:
            CorpusNotFoundError if `directory` is missing or not a directory
        """
        root = Path(directory)
        if not root.is_dir():
            raise CorpusNotFoundError(str(root))

        files = [entry for entry in root.iterdir() if entry.suffix == self.suffix]
        logger.info("Found {} '{}' file(s) in {}", len(files), self.suffix, root)
        return files
