"""
Tests for pairwise similarity scores.
"""

from __future__ import annotations

import numpy as np
import pytest

from book_similarity.application.services.profiler import FrequencyProfiler
from book_similarity.application.services.similarity import similarity, similarity_matrix


def test_sums_both_frequencies_of_shared_words():
    a = {"CAT": 0.5, "DOG": 0.3, "OWL": 0.2}
    b = {"CAT": 0.1, "OWL": 0.4, "EMU": 0.5}
    assert similarity(a, b) == pytest.approx(0.5 + 0.1 + 0.2 + 0.4)


def test_no_overlap_scores_zero():
    assert similarity({"CAT": 1.0}, {"DOG": 1.0}) == 0.0
    assert similarity({}, {"DOG": 1.0}) == 0.0


def test_commutative_on_real_profiles():
    profiler = FrequencyProfiler()
    a = profiler.profile_text("call me ishmael some years ago never mind how long precisely " * 3 + "sea whale")
    b = profiler.profile_text("it is a truth universally acknowledged that a single man sea sea whale years")
    assert similarity(a, b) == similarity(b, a)
    assert similarity(a, b) > 0.0


def test_self_similarity_is_twice_the_frequency_mass():
    profiler = FrequencyProfiler()
    text = "whale ship sea whale captain sea whale"
    a = profiler.profile_text(text)
    copy = profiler.profile_text(text)
    assert similarity(a, copy) == pytest.approx(2 * sum(a.frequencies.values()))


def test_matrix_is_symmetric_with_zero_diagonal():
    profiles = [
        {"CAT": 0.5, "DOG": 0.5},
        {"CAT": 1.0},
        {"EMU": 1.0},
    ]
    matrix = similarity_matrix(profiles)
    assert matrix.shape == (3, 3)
    assert np.array_equal(matrix, matrix.T)
    assert np.all(np.diag(matrix) == 0.0)
    assert matrix[0, 1] == pytest.approx(1.5)
    assert matrix[0, 2] == 0.0
