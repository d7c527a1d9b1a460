from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union
from loguru import logger

from book_similarity.application.errors import CorpusSizeMismatchError
from book_similarity.application.settings import EXPECTED_FILE_COUNT, TOP_PAIRS, Settings
from book_similarity.application.services.profiler import FrequencyProfile, FrequencyProfiler
from book_similarity.application.services.similarity import similarity_matrix


class RankedPair(NamedTuple):
    score: float
    index_a: int
    index_b: int
    file_a: str
    file_b: str


@dataclass
class CorpusRanker:
    profiler: FrequencyProfiler = field(default_factory=FrequencyProfiler)
    expected_file_count: Optional[int] = EXPECTED_FILE_COUNT
    top_pairs: int = TOP_PAIRS

    @classmethod
    def build(cls, settings: Settings) -> "CorpusRanker":
        return cls(
            profiler=FrequencyProfiler.from_settings(settings),
            expected_file_count=settings.expected_file_count,
            top_pairs=settings.top_pairs,
        )

    def validate(self, files: Sequence[Union[str, Path]]) -> None:
        if self.expected_file_count is not None and len(files) != self.expected_file_count:
            raise CorpusSizeMismatchError(self.expected_file_count, len(files))

    def build_profiles(self, files: Sequence[Union[str, Path]]) -> List[FrequencyProfile]:
        return [self.profiler.build_profile(f) for f in files]

    def score_pairs(self, profiles: Sequence[FrequencyProfile]) -> List[Tuple[float, int, int]]:
        """
        Score every unordered pair i < j.

        Returns (score, i, j) triples sorted descending as whole tuples, so
        equal scores put the greater (i, j) first.
        """
        matrix = similarity_matrix(profiles)
        n = len(profiles)
        triples = [
            (float(matrix[i, j]), i, j)
            for i in range(n)
            for j in range(i + 1, n)
        ]
        triples.sort(reverse=True)
        return triples

    def rank_pairs(self, files: Sequence[Union[str, Path]], top: Optional[int] = None) -> List[RankedPair]:
        """
        Profile, score and rank a corpus; returns the `top` best pairs.

        Raises:
            CorpusSizeMismatchError before any file is read when the corpus
            size differs from `expected_file_count`
        """
        self.validate(files)
        top = self.top_pairs if top is None else top

        logger.info("Ranking {} file(s)", len(files))
        profiles = self.build_profiles(files)
        triples = self.score_pairs(profiles)
        logger.debug("Scored {} pair(s)", len(triples))

        return [
            RankedPair(score, i, j, str(files[i]), str(files[j]))
            for score, i, j in triples[:top]
        ]
