"""Vocabulary CSV input parsing.

Expected rows look like ``"가방",bag`` or ``가방,bag``; only the first
column matters. A first row starting with Word/Korean (any case) is a
header and is skipped. Rows whose first column has no Hangul syllable are
dropped.
"""

import re
from typing import List

from korvocab.common.utils import line_has_hangul_syllable


HEADER_RE = re.compile(r"^(word|korean)", re.IGNORECASE)
FIRST_COLUMN_RE = re.compile(r'^"([^"]+)"|^([^,]+)')


def parse_vocab_csv(text: str) -> List[str]:
    """Return the Korean words of a vocabulary CSV, in file order."""
    words: List[str] = []
    lines = [ln for ln in text.split("\n") if ln.strip()]

    for i, raw in enumerate(lines):
        line = raw.strip()

        if i == 0 and HEADER_RE.match(line):
            continue

        match = FIRST_COLUMN_RE.match(line)
        if not match:
            continue
        word = (match.group(1) or match.group(2)).strip()
        if line_has_hangul_syllable(word):
            words.append(word)

    return words
