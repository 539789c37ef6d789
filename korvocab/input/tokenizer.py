"""Heuristic Korean tokenizer.

Pulls Hangul runs out of raw text and approximates word stems by dropping
a trailing grammatical particle (조사). This is not a morphological
analyzer: only the first particle in KOREAN_PARTICLES that the word ends
with is considered, so e.g. 으로 is never reached because 로 matches first.
"""

from typing import List

from korvocab.common.utils import find_korean_runs, keep_only_hangul


# Common particles that attach to nouns, in match order
KOREAN_PARTICLES = [
    "이", "가", "을", "를", "에", "에서", "와", "과", "의", "로", "으로",
    "도", "만", "부터", "까지", "에게", "께", "한테", "께서", "보다", "처럼",
]

MIN_TOKEN_LENGTH = 2


def clean_word(word: str) -> str:
    """Remove everything outside the Hangul blocks."""
    return keep_only_hangul(word)


def strip_particle(word: str) -> List[str]:
    """Return the stem of word with its particle dropped, as a 0- or 1-element list.

    The first listed particle the word ends with decides the outcome: if the
    stem left over is too short the word yields nothing.
    """
    for particle in KOREAN_PARTICLES:
        if word.endswith(particle) and len(word) > len(particle):
            stem = word[:-len(particle)]
            if len(stem) >= MIN_TOKEN_LENGTH:
                return [stem]
            return []

    if len(word) >= MIN_TOKEN_LENGTH:
        return [word]
    return []


def tokenize(text: str) -> List[str]:
    """Extract particle-stripped Korean tokens in order of appearance.

    Duplicates are kept; they are the frequency signal.
    """
    tokens: List[str] = []
    for run in find_korean_runs(text):
        cleaned = clean_word(run)
        if len(cleaned) < MIN_TOKEN_LENGTH:
            continue
        tokens.extend(strip_particle(cleaned))
    return tokens
