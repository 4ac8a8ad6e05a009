"""Shared fixtures: a small EECS requirements corpus and file-backed stores."""

import pytest

from courseroad_assistant.corpus.store import (
    DETAILED_REQUIREMENTS,
    PROGRAM_SUMMARY,
    Corpus,
    CorpusStore,
)

SUMMARY_TEXT = (
    "MIT EECS Programs\n"
    "6-2 Electrical Engineering and Computer Science: 180-192 units\n"
    "6-3 Computer Science and Engineering: 180-192 units\n"
    "6-4 Artificial Intelligence and Decision Making: 180-192 units\n"
    "18 Mathematics is offered by the Department of Mathematics\n"
)

DETAILED_TEXT = (
    "MIT EECS Degree Requirements\n"
    "Updated for 6-3 and 6-4 in 2024\n"
    "\n"
    "6-2 Electrical Engineering and Computer Science\n"
    "Foundation: 6.1010, 6.1210, 6.1910\n"
    "Header: 6.2000, 6.3000\n"
    "\n"
    "6-3 Computer Science and Engineering\n"
    "Foundation: 6.1010, 6.1210, 6.1910\n"
    "Header: 6.1220, 6.1800, 6.4100\n"
    "See also 6-2 for the electrical track.\n"
    "\n"
    "6-4 Artificial Intelligence and Decision Making\n"
    "Foundation: 6.1010, 6.1210\n"
    "Students may also consider 6-3 Computer Science and Engineering.\n"
    "\n"
    "6-7 Computer Science and Molecular Biology\n"
    "Biology: 7.03, 7.05\n"
)


def section(start: str, end: str | None = None) -> str:
    """Exact slice of DETAILED_TEXT from the ``start`` header up to ``end``."""
    i = DETAILED_TEXT.index(start)
    j = DETAILED_TEXT.index(end) if end else len(DETAILED_TEXT)
    return DETAILED_TEXT[i:j]


@pytest.fixture
def summary_corpus():
    return Corpus(PROGRAM_SUMMARY, SUMMARY_TEXT)


@pytest.fixture
def detailed_corpus():
    return Corpus(DETAILED_REQUIREMENTS, DETAILED_TEXT)


@pytest.fixture
def corpus_files(tmp_path):
    """Write both corpora to disk and return (summary_path, detailed_path)."""
    summary_path = tmp_path / "summary.txt"
    detailed_path = tmp_path / "detailed.txt"
    summary_path.write_text(SUMMARY_TEXT, encoding="utf-8")
    detailed_path.write_text(DETAILED_TEXT, encoding="utf-8")
    return str(summary_path), str(detailed_path)


@pytest.fixture
def store(corpus_files):
    return CorpusStore(*corpus_files)


@pytest.fixture
def detailed_section():
    return section
