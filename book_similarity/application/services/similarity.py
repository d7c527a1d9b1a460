from __future__ import annotations
from typing import Mapping, Sequence
import numpy as np


def similarity(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    # shared-word mass: sum(a[w] + b[w]) over words present in both profiles
    if not a or not b:
        return 0.0
    score = 0.0
    # sorted so the summation order (and so the float result) is the same for (a, b) and (b, a)
    for word in sorted(a.keys() & b.keys()):
        score += a[word] + b[word]
    return score


def similarity_matrix(profiles: Sequence[Mapping[str, float]]) -> np.ndarray:
    """n x n matrix of pairwise scores; symmetric with a zero diagonal."""
    n = len(profiles)
    matrix = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(i + 1, n):
            score = similarity(profiles[i], profiles[j])
            matrix[i, j] = score
            matrix[j, i] = score
    return matrix
