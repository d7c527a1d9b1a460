from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Optional, Tuple

# Defaults for a fixed 64-book corpus; every one can be overridden via BOOKSIM_* env vars
EXPECTED_FILE_COUNT = 64
MAX_FREQUENT_WORDS = 100
TOP_PAIRS = 10
EXCLUDED_WORDS: Tuple[str, ...] = ("A", "AND", "AN", "OF", "IN", "THE")


class Settings(BaseSettings):
    # --- App ---
    app_name: str = "Book Similarity"
    app_env: str = "development"          # e.g., development / staging / production
    debug: bool = False

    # --- Corpus ---
    books_dir: str = "./BOOKS"
    file_suffix: str = ".txt"
    # None disables the corpus size check (handy for small test corpora)
    expected_file_count: Optional[int] = EXPECTED_FILE_COUNT

    # --- Profiling / ranking ---
    max_frequent_words: int = MAX_FREQUENT_WORDS
    top_pairs: int = TOP_PAIRS
    excluded_words: Tuple[str, ...] = EXCLUDED_WORDS

    # pydantic v2 / pydantic-settings configuration
    model_config = SettingsConfigDict(
        env_prefix="BOOKSIM_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("excluded_words")
    @classmethod
    def _uppercase_excluded(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        # normalized words are uppercase, so the exclusion set must be too
        return tuple(w.strip().upper() for w in value if w.strip())

    @field_validator("max_frequent_words", "top_pairs")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be >= 1")
        return value

    @field_validator("expected_file_count")
    @classmethod
    def _positive_or_none(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise ValueError("must be >= 1 (or unset to skip the check)")
        return value


@lru_cache
def get_settings() -> Settings:
    """Cache settings so we don't re-parse .env on every call."""
    return Settings()
