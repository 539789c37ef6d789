"""Word frequency ranking."""

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List


@dataclass
class WordFrequency:
    word: str
    count: int

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def rank(tokens: Iterable[str]) -> List[WordFrequency]:
    """Count exact-match occurrences and sort by count descending.

    Ties keep first-seen order: the position at which a word was first
    encountered is carried as the secondary sort key.
    """
    counts: Dict[str, int] = {}
    first_seen: Dict[str, int] = {}
    for position, token in enumerate(tokens):
        if token not in counts:
            counts[token] = 0
            first_seen[token] = position
        counts[token] += 1

    ordered = sorted(counts, key=lambda w: (-counts[w], first_seen[w]))
    return [WordFrequency(word=w, count=counts[w]) for w in ordered]


def format_top_words(words: List[WordFrequency], count: int = 20) -> str:
    """Render the top words as a numbered console table."""
    lines = [f"Top {count} Korean words:", "-" * 40]
    for index, item in enumerate(words[:count], 1):
        lines.append(f"{index:2d}. {item.word:<15} ({item.count} times)")
    return "\n".join(lines)
