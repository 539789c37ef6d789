"""Vocabulary-section extraction.

Textbook PDFs interleave glossary lists with narrative text. A section
opens at a vocabulary heading and closes at the next major heading, after
more than MAX_EMPTY_LINES consecutive blank lines, or once more than
MAX_SECTION_LINES lines have been read. Inside a section, bulleted lines
contribute their first Korean word; unbulleted lines near the heading
contribute up to two short Korean words.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from korvocab.common.utils import find_korean_runs
from korvocab.input.tokenizer import clean_word


MAX_TITLE_LENGTH = 50
MAX_EMPTY_LINES = 3
MAX_SECTION_LINES = 25
NEAR_HEADER_LINES = 15

# (min, max) cleaned length accepted for each kind of line
BULLET_WORD_LENGTH = (2, 15)
NEAR_HEADER_WORD_LENGTH = (2, 10)
NEAR_HEADER_MAX_RUNS = 4
NEAR_HEADER_WORDS_PER_LINE = 2

VOCABULARY_HEADER_PATTERNS = [
    re.compile(r"^[\s●]*어휘\s*Vocabulary", re.IGNORECASE),
    re.compile(r"^[\s●]*Vocabulary\s*$", re.IGNORECASE),
    re.compile(r"^[\s●]*관람\s*Watching", re.IGNORECASE),
    re.compile(r"^[\s●]*감상\s*Appreciation", re.IGNORECASE),
    re.compile(r"Watching\s*related\s*vocabulary", re.IGNORECASE),
    re.compile(r"Appreciation\s*related\s*vocabulary", re.IGNORECASE),
]

# Next major section of a lesson
STOP_PATTERNS = [
    re.compile(r"^[\s●]*문법", re.IGNORECASE),
    re.compile(r"^[\s●]*Grammar", re.IGNORECASE),
    re.compile(r"^[\s●]*Part\s*\d+", re.IGNORECASE),
    re.compile(r"^[\s●]*듣기", re.IGNORECASE),
    re.compile(r"^[\s●]*Listening", re.IGNORECASE),
    re.compile(r"^[\s●]*읽기", re.IGNORECASE),
    re.compile(r"^[\s●]*Reading", re.IGNORECASE),
    re.compile(r"^[\s●]*쓰기", re.IGNORECASE),
    re.compile(r"^[\s●]*Writing", re.IGNORECASE),
    re.compile(r"^[\s●]*말하기", re.IGNORECASE),
    re.compile(r"^[\s●]*Speaking", re.IGNORECASE),
]

BULLET_RE = re.compile(r"^[●•·\-]")


@dataclass
class VocabularySection:
    title: str
    words: List[str] = field(default_factory=list)


def is_vocabulary_header(line: str) -> bool:
    return any(p.search(line) for p in VOCABULARY_HEADER_PATTERNS)


def is_stop_marker(line: str) -> bool:
    return any(p.search(line) for p in STOP_PATTERNS)


def _accept(word: str, bounds: tuple) -> bool:
    low, high = bounds
    return low <= len(word) <= high


def _harvest_line(line: str, lines_since_marker: int) -> List[str]:
    """Candidate words from one non-blank line inside a section."""
    runs = find_korean_runs(line)
    if not runs:
        return []

    if BULLET_RE.match(line):
        # Bulleted lines: the first Korean word is the vocabulary item
        cleaned = clean_word(runs[0])
        return [cleaned] if _accept(cleaned, BULLET_WORD_LENGTH) else []

    if lines_since_marker < NEAR_HEADER_LINES and len(runs) <= NEAR_HEADER_MAX_RUNS:
        words = []
        for run in runs[:NEAR_HEADER_WORDS_PER_LINE]:
            cleaned = clean_word(run)
            if _accept(cleaned, NEAR_HEADER_WORD_LENGTH):
                words.append(cleaned)
        return words

    return []


def extract_vocabulary_sections(text: str) -> List[VocabularySection]:
    """Scan text line by line and return the non-empty vocabulary sections found.

    Words keep their discovery order and duplicates; rank them afterwards.
    """
    sections: List[VocabularySection] = []
    current: Optional[VocabularySection] = None
    lines_since_marker = 0
    empty_lines = 0

    def flush() -> None:
        if current is not None and current.words:
            sections.append(current)

    for raw_line in text.split("\n"):
        line = raw_line.strip()

        if is_vocabulary_header(line):
            flush()
            current = VocabularySection(title=line[:MAX_TITLE_LENGTH])
            lines_since_marker = 0
            empty_lines = 0
            continue

        if current is None:
            continue

        if is_stop_marker(line):
            flush()
            current = None
            continue

        if not line:
            empty_lines += 1
            if empty_lines > MAX_EMPTY_LINES:
                flush()
                current = None
            continue

        empty_lines = 0
        current.words.extend(_harvest_line(line, lines_since_marker))

        lines_since_marker += 1
        if lines_since_marker > MAX_SECTION_LINES:
            flush()
            current = None

    flush()
    return sections
