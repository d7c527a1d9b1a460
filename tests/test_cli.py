"""
Tests for the book-similarity command line.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from book_similarity.application import cli


def test_full_corpus_prints_top_ten(write_corpus, filler_texts, capsys):
    texts = filler_texts(62)
    texts["alice.txt"] = "Down the rabbit hole went Alice, rabbit and all."
    texts["alice_copy.txt"] = "Down the rabbit hole went Alice, rabbit and all."
    root = write_corpus(texts)

    code = cli.main([str(root)])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0] == "Top 10 similar pairs of books:"
    assert len(out) == 11
    assert out[1] in ('"alice.txt" and "alice_copy.txt"', '"alice_copy.txt" and "alice.txt"')
    assert str(root) not in "\n".join(out)


def test_wrong_count_reports_and_prints_nothing(write_corpus, filler_texts, capsys):
    root = write_corpus(filler_texts(63))

    code = cli.main([str(root)])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "Error: Expected 64 files, but found 63" in captured.err


def test_expected_count_option(write_corpus, filler_texts, capsys):
    root = write_corpus(filler_texts(65))
    assert cli.main([str(root), "--expected-count", "65", "--top", "2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Top 2 similar pairs of books:"
    assert len(out) == 3


def test_any_count_on_tiny_corpus(write_corpus, capsys):
    root = write_corpus({"a.txt": "red fox", "b.txt": "red hen"})
    assert cli.main([str(root), "--any-count"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Top 10 similar pairs of books:", '"a.txt" and "b.txt"']


def test_missing_directory(tmp_path, capsys):
    assert cli.main([str(Path(tmp_path) / "nowhere")]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Corpus directory not found" in captured.err


def test_directory_from_environment(write_corpus, monkeypatch, capsys):
    root = write_corpus({"a.txt": "x y", "b.txt": "y z", "c.txt": "z"})
    monkeypatch.setenv("BOOKSIM_BOOKS_DIR", str(root))
    monkeypatch.setenv("BOOKSIM_EXPECTED_FILE_COUNT", "3")
    assert cli.main([]) == 0
    assert capsys.readouterr().out.startswith("Top 10 similar pairs of books:\n")


@pytest.mark.parametrize(
    "option,value,field",
    [
        ("--top", "-1", "top_pairs"),
        ("--top", "0", "top_pairs"),
        ("--max-words", "0", "max_frequent_words"),
        ("--expected-count", "-3", "expected_file_count"),
    ],
)
def test_invalid_option_values_are_rejected(write_corpus, filler_texts, capsys, option, value, field):
    root = write_corpus(filler_texts(64))

    code = cli.main([str(root), option, value])

    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == ""
    assert f"Error: invalid {field}" in captured.err
