from pathlib import Path
from typing import List, Sequence, TextIO

from book_similarity.application.services.ranker import RankedPair
from book_similarity.application.settings import TOP_PAIRS


def format_report(pairs: Sequence[RankedPair], top: int = TOP_PAIRS) -> List[str]:
    # ['Top 10 similar pairs of books:', '"a.txt" and "b.txt"', ...]
    lines = [f"Top {top} similar pairs of books:"]
    for pair in pairs[:top]:
        lines.append(f'"{Path(pair.file_a).name}" and "{Path(pair.file_b).name}"')
    return lines


def write_report(pairs: Sequence[RankedPair], stream: TextIO, top: int = TOP_PAIRS) -> None:
    for line in format_report(pairs, top):
        stream.write(line + "\n")
