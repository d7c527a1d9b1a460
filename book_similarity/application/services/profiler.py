from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple, Union
from loguru import logger

from book_similarity.application.errors import UnreadableFileError
from book_similarity.application.settings import MAX_FREQUENT_WORDS, Settings
from book_similarity.application.services.normalizer import WordNormalizer


@dataclass(frozen=True)
class FrequencyProfile:
    """
    Top-N relative word frequencies of one file.

    `frequencies` is read-only and ordered by descending frequency.
    `available` is False when the file could not be read; such a profile
    has no entries and scores 0.0 against everything.
    """

    source: str
    frequencies: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    total_words: int = 0
    available: bool = True

    @classmethod
    def unavailable(cls, source: Union[str, Path]) -> "FrequencyProfile":
        return cls(source=str(source), available=False)

    def __len__(self) -> int:
        return len(self.frequencies)

    def __contains__(self, word: object) -> bool:
        return word in self.frequencies

    def __getitem__(self, word: str) -> float:
        return self.frequencies[word]

    def get(self, word: str, default: float | None = None) -> float | None:
        return self.frequencies.get(word, default)

    def keys(self):
        return self.frequencies.keys()

    def items(self):
        return self.frequencies.items()


def count_words(text: str, normalizer: WordNormalizer) -> Tuple[Counter, int]:
    # counts = {"CATS": 2, "CHASE": 1}, total = 3
    counts = Counter(normalizer.words(text))
    return counts, sum(counts.values())


def relative_frequencies(counts: Mapping[str, int], total: int) -> Dict[str, float]:
    # frequencies of *all* counted words; they sum to 1.0 when total > 0
    if total <= 0:
        return {}
    return {word: c / total for word, c in counts.items()}


def top_words(frequencies: Mapping[str, float], limit: int = MAX_FREQUENT_WORDS) -> List[Tuple[str, float]]:
    # frequency descending; equal frequencies fall back to word order so profiles are reproducible
    ranked = sorted(frequencies.items(), key=lambda kv: (-kv[1], kv[0]))
    return ranked[:limit]


@dataclass
class FrequencyProfiler:
    normalizer: WordNormalizer = field(default_factory=WordNormalizer)
    max_words: int = MAX_FREQUENT_WORDS

    @classmethod
    def from_settings(cls, settings: Settings) -> "FrequencyProfiler":
        return cls(
            normalizer=WordNormalizer(frozenset(settings.excluded_words)),
            max_words=settings.max_frequent_words,
        )

    def profile_text(self, text: str, source: str = "<text>") -> FrequencyProfile:
        counts, total = count_words(text, self.normalizer)
        freqs = relative_frequencies(counts, total)
        top = top_words(freqs, self.max_words)
        logger.debug(
            "Profiled {}: {} counted word(s), {} distinct, kept {}",
            source, total, len(counts), len(top),
        )
        return FrequencyProfile(
            source=source,
            frequencies=MappingProxyType(dict(top)),
            total_words=total,
        )

    def read_text(self, path: Union[str, Path]) -> str:
        """
        Read a whole file.

        Raises:
            UnreadableFileError if the file cannot be opened or read
        """
        try:
            raw = Path(path).read_bytes()
        except OSError as e:
            raise UnreadableFileError(str(path)) from e
        # single-byte decode: every byte maps to one char, non-ASCII ones get dropped by the normalizer
        return raw.decode("latin-1")

    def build_profile(self, path: Union[str, Path]) -> FrequencyProfile:
        """Profile one file; an unreadable file is logged and yields an empty profile."""
        try:
            text = self.read_text(path)
        except UnreadableFileError as e:
            logger.error(str(e))
            return FrequencyProfile.unavailable(path)
        return self.profile_text(text, source=str(path))
