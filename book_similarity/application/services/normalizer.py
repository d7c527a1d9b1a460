# Tokenize -> normalize -> filter: uppercase alphanumeric words, minus a fixed stopword set
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, List
import re
import string

from book_similarity.application.settings import EXCLUDED_WORDS

# only ASCII letters and digits survive normalization
_KEEP = frozenset(string.ascii_letters + string.digits)
# C isspace() set; \xa0, \x85 and \x1c-\x1f are word characters
_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")


def tokenize(text: str) -> List[str]:
    # maximal whitespace-delimited substrings, e.g. "Hello,  world!" -> ["Hello,", "world!"]
    return [t for t in _WHITESPACE.split(text) if t]


def normalize_word(token: str) -> str:
    # "don't!" -> "DONT", "--" -> "" (empty means discard)
    return "".join(ch.upper() for ch in token if ch in _KEEP)


def is_excluded(word: str, excluded: Iterable[str] = EXCLUDED_WORDS) -> bool:
    return word.upper() in excluded


@dataclass
class WordNormalizer:
    excluded_words: FrozenSet[str] = field(default_factory=lambda: frozenset(EXCLUDED_WORDS))

    def __post_init__(self):
        self.excluded_words = frozenset(w.upper() for w in self.excluded_words)

    def is_excluded(self, word: str) -> bool:
        return is_excluded(word, self.excluded_words)

    def words(self, text: str) -> Iterator[str]:
        """Yield the countable words of `text`: non-empty and not excluded."""
        for token in tokenize(text):
            word = normalize_word(token)
            if word and not self.is_excluded(word):
                yield word
