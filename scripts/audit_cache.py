#!/usr/bin/env python3
"""Audit the translation cache for incomplete records.

Checks for:
- Missing English (translation never resolved)
- Missing description (no pronunciation or example)

Usage:
    python scripts/audit_cache.py [--cache-dir .cache] [--fix]

    --fix: Remove incomplete records so the next run translates them again
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from korvocab.common.cache import TranslationCache, TranslationRecord
from korvocab.output.translate import MISSING_DESCRIPTION, MISSING_ENGLISH


def record_issues(record: TranslationRecord) -> List[str]:
    issues = []
    if not record.english or record.english == MISSING_ENGLISH:
        issues.append("missing english")
    if not record.description or record.description == MISSING_DESCRIPTION:
        issues.append("missing description")
    return issues


def audit_cache(cache: TranslationCache) -> List[Tuple[str, List[str]]]:
    """Return (word, issues) for every incomplete record, in cache order."""
    found = []
    for word, record in cache.items():
        issues = record_issues(record)
        if issues:
            found.append((word, issues))
    return found


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Audit the translation cache for incomplete records")
    parser.add_argument("--cache-dir", default=".cache", help="Directory holding translations.json")
    parser.add_argument("--fix", action="store_true", help="Remove incomplete records")
    args = parser.parse_args(argv)

    cache = TranslationCache(Path(args.cache_dir))
    incomplete = audit_cache(cache)

    print("=" * 70)
    print("CACHE AUDIT SUMMARY")
    print("=" * 70)
    print(f"Total records audited: {len(cache)}")
    print(f"Incomplete records: {len(incomplete)}")

    if not incomplete:
        print("✅ All cached translations are complete!")
        return 0

    print()
    for word, issues in incomplete[:20]:
        print(f"   • {word}: {', '.join(issues)}")
    if len(incomplete) > 20:
        print(f"   ... and {len(incomplete) - 20} more")

    if args.fix:
        for word, _ in incomplete:
            cache.remove(word)
        print(f"\n   ✓ Removed {len(incomplete)} records from {cache.path}")
        print("\nRun generate.py again to translate them.")
    else:
        print("\nTo fix these issues, run:")
        print("  python scripts/audit_cache.py --fix")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
