"""Persistent translation cache.

All records live in a single human-readable JSON file,
``<cache_dir>/translations.json``::

    {
      "가방": {
        "english": "bag",
        "description": "ga-bang, 이 가방이 마음에 들어요. (I like this bag.)",
        "cachedAt": "2025-01-01T12:00:00+00:00"
      }
    }

The file is loaded once into memory; every ``put`` rewrites it so a crash
loses at most the record being written. Deleting the file only forces
re-enrichment.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple

from korvocab.common.logging import log_warning


TRANSLATIONS_FILENAME = "translations.json"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class TranslationRecord:
    """Enrichment previously computed for one word."""
    english: str
    description: str
    cached_at: str = field(default_factory=_now_iso)

    def to_dict(self) -> Dict[str, str]:
        return {
            "english": self.english,
            "description": self.description,
            "cachedAt": self.cached_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "TranslationRecord":
        return cls(
            english=str(data.get("english", "")),
            description=str(data.get("description", "")),
            cached_at=str(data.get("cachedAt", "")),
        )


class TranslationCache:
    """Word -> TranslationRecord store backed by a JSON file."""

    def __init__(self, cache_dir: Path = Path(".cache"), verbose: bool = False) -> None:
        self.cache_dir = Path(cache_dir)
        self.path = self.cache_dir / TRANSLATIONS_FILENAME
        self.verbose = verbose
        self._translations: Dict[str, TranslationRecord] = {}
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log_warning(f"Could not load translation cache {self.path}: {e}")
            return
        if not isinstance(data, dict):
            log_warning(f"Ignoring malformed translation cache {self.path}: expected an object")
            return
        for word, record in data.items():
            if isinstance(record, dict):
                self._translations[word] = TranslationRecord.from_dict(record)
        if self.verbose:
            print(f"[cache] Loaded {len(self._translations)} translations from {self.path}")

    def _save(self) -> None:
        data = {word: record.to_dict() for word, record in self._translations.items()}
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            log_warning(f"Could not save translation cache {self.path}: {e}")

    def get(self, word: str) -> Optional[TranslationRecord]:
        return self._translations.get(word)

    def put(self, word: str, record: TranslationRecord) -> None:
        """Store a record and persist the cache immediately."""
        self._translations[word] = record
        self._save()

    def remove(self, word: str) -> bool:
        """Drop a single record. Returns True if it was cached."""
        if word not in self._translations:
            return False
        del self._translations[word]
        self._save()
        return True

    def clear(self) -> None:
        """Purge in-memory and persisted records."""
        self._translations.clear()
        try:
            if self.path.exists():
                self.path.unlink()
        except OSError as e:
            log_warning(f"Could not clear translation cache {self.path}: {e}")
        if self.verbose:
            print(f"[cache] Cleared {self.path}")

    def items(self) -> Iterator[Tuple[str, TranslationRecord]]:
        return iter(list(self._translations.items()))

    def __contains__(self, word: object) -> bool:
        return word in self._translations

    def __len__(self) -> int:
        return len(self._translations)
