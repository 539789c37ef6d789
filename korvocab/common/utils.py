"""Common utility functions shared across the library."""

import os
import re
from pathlib import Path
from typing import Iterable, List, Set


# Hangul syllables, Hangul Jamo, Hangul Compatibility Jamo
KOREAN_RUN_RE = re.compile(r"[\uAC00-\uD7A3\u1100-\u11FF\u3130-\u318F]+")
NON_KOREAN_RE = re.compile(r"[^\uAC00-\uD7A3\u1100-\u11FF\u3130-\u318F]")
HANGUL_SYLLABLE_RE = re.compile(r"[\uAC00-\uD7A3]")


_DEF_ENV_LOADED = False


def _load_env_file() -> None:
    """Load environment variables from .env file if present."""
    global _DEF_ENV_LOADED
    if _DEF_ENV_LOADED:
        return
    _DEF_ENV_LOADED = True
    try:
        # Look for .env in korvocab/common/../.. (project root) or korvocab/common/..
        here = Path(__file__).parent
        candidates = [
            here.parent.parent / ".env",  # project root
            here.parent / ".env",
        ]
        for p in candidates:
            if not p.exists():
                continue
            for raw in p.read_text(encoding="utf-8", errors="ignore").splitlines():
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):].strip()
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                key = k.strip()
                val = v.strip().strip('"').strip("'")
                if key and os.environ.get(key) is None:
                    os.environ[key] = val
    except OSError:
        pass


# Call once on import
_load_env_file()


def keep_only_hangul(text: str) -> str:
    """Keep only Hangul characters from text."""
    return NON_KOREAN_RE.sub("", text)


def find_korean_runs(text: str) -> List[str]:
    """Return every maximal run of Hangul characters, in order of appearance."""
    return KOREAN_RUN_RE.findall(text)


def line_has_hangul_syllable(line: str) -> bool:
    """Check if a line contains at least one precomposed Hangul syllable."""
    return HANGUL_SYLLABLE_RE.search(line) is not None


def unique_preserve_order(items: Iterable[str]) -> List[str]:
    """Return unique items while preserving order."""
    seen: Set[str] = set()
    ordered: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def ensure_dir(path: Path) -> None:
    """Create directory if it doesn't exist."""
    path.mkdir(parents=True, exist_ok=True)
