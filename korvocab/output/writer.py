"""Vocabulary file writers."""

import csv
import io
import json
from pathlib import Path
from typing import Sequence

from korvocab.common.utils import ensure_dir
from korvocab.input.frequency import WordFrequency


ENRICHED_HEADER = ["Word", "English", "Description", "Frequency"]
PLAIN_HEADER = ["Word", "Frequency"]


def _has_translations(words: Sequence[WordFrequency]) -> bool:
    return bool(words) and hasattr(words[0], "english")


def format_vocabulary_csv(words: Sequence[WordFrequency]) -> str:
    """CSV text for ranked words; includes English/Description when present.

    String fields are always double-quoted (quotes doubled), counts are bare.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    if _has_translations(words):
        buf.write(",".join(ENRICHED_HEADER) + "\n")
        for w in words:
            writer.writerow([w.word, w.english or "", w.description or "", w.count])
    else:
        buf.write(",".join(PLAIN_HEADER) + "\n")
        for w in words:
            writer.writerow([w.word, w.count])
    return buf.getvalue()


def save_as_csv(words: Sequence[WordFrequency], out_dir: Path, filename: str, verbose: bool = False) -> Path:
    ensure_dir(out_dir)
    path = out_dir / filename
    path.write_text(format_vocabulary_csv(words), encoding="utf-8")
    if verbose:
        print(f"[file] Saved {len(words)} words to {path}")
    return path


def save_word_list(words: Sequence[WordFrequency], out_dir: Path, filename: str, verbose: bool = False) -> Path:
    """Tab-separated ``word<TAB>count`` lines."""
    ensure_dir(out_dir)
    path = out_dir / filename
    content = "\n".join(f"{w.word}\t{w.count}" for w in words)
    path.write_text(content + "\n" if content else "", encoding="utf-8")
    if verbose:
        print(f"[file] Saved {len(words)} unique words to {path}")
    return path


def save_as_json(words: Sequence[WordFrequency], out_dir: Path, filename: str, verbose: bool = False) -> Path:
    ensure_dir(out_dir)
    path = out_dir / filename
    data = [w.to_dict() for w in words]
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    if verbose:
        print(f"[file] Saved JSON format to {path}")
    return path
