from fastapi import FastAPI, Depends, Query
from pydantic import BaseModel
from typing import List, Optional

from book_similarity.application.settings import get_settings, Settings
from book_similarity.application.log_setup import setup_logging
from book_similarity.application.errors import CorpusNotFoundError, CorpusSizeMismatchError
from book_similarity.application.services.corpus_loader import CorpusLoader
from book_similarity.application.services.profiler import FrequencyProfiler
from book_similarity.application.services.ranker import CorpusRanker
from book_similarity.application.services.similarity import similarity
from fastapi import HTTPException
from loguru import logger

# Configure logging once
setup_logging()

app = FastAPI(title="Book Similarity (word-frequency pair ranking)")

# --- Dependencies ---
def settings_dep() -> Settings:
    return get_settings()

def profiler_dep(settings: Settings = Depends(settings_dep)) -> FrequencyProfiler:
    return FrequencyProfiler.from_settings(settings)

def ranker_dep(settings: Settings = Depends(settings_dep)) -> CorpusRanker:
    return CorpusRanker.build(settings)

def loader_dep(settings: Settings = Depends(settings_dep)) -> CorpusLoader:
    return CorpusLoader(suffix=settings.file_suffix)


@app.get("/", tags=["meta"])
def root(settings: Settings = Depends(settings_dep)):
    return {
        "ok": True,
        "app_name": settings.app_name,
        "environment": settings.app_env,
        "books_dir": settings.books_dir,
        "expected_file_count": settings.expected_file_count,
        "max_frequent_words": settings.max_frequent_words,
        "top_pairs": settings.top_pairs,
    }


class ProfileRequest(BaseModel):
    text: str


class SimilarityRequest(BaseModel):
    text_a: str
    text_b: str


@app.post("/profile", tags=["similarity"])
def profile(body: ProfileRequest, profiler: FrequencyProfiler = Depends(profiler_dep)):
    prof = profiler.profile_text(body.text, source="<request>")
    return {
        "total_words": prof.total_words,
        "words": [{"word": w, "frequency": f} for w, f in prof.items()],
    }


@app.post("/similarity", tags=["similarity"])
def compare(body: SimilarityRequest, profiler: FrequencyProfiler = Depends(profiler_dep)):
    a = profiler.profile_text(body.text_a, source="<text_a>")
    b = profiler.profile_text(body.text_b, source="<text_b>")
    return {"score": similarity(a, b)}


@app.get("/rank", tags=["similarity"])
def rank(
    directory: Optional[str] = Query(default=None, description="Corpus directory (defaults to settings.books_dir)"),
    top: Optional[int] = Query(default=None, ge=1, le=100),
    settings: Settings = Depends(settings_dep),
    loader: CorpusLoader = Depends(loader_dep),
    ranker: CorpusRanker = Depends(ranker_dep),
):
    directory = directory or settings.books_dir
    try:
        files = loader.list_files(directory)
        pairs = ranker.rank_pairs(files, top=top)
    except CorpusNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CorpusSizeMismatchError as e:
        logger.error(str(e))
        raise HTTPException(status_code=422, detail=str(e))

    items: List[dict] = [
        {
            "score": round(p.score, 6),
            "file_a": p.file_a,
            "file_b": p.file_b,
            "index_a": p.index_a,
            "index_b": p.index_b,
        }
        for p in pairs
    ]
    return {"count": len(items), "pairs": items}
