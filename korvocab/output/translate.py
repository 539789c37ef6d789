"""Batched enrichment of ranked words with English, romanization and examples.

Words already in the translation cache are served from it. The rest are
sent to the enrichment client in sequential batches. The service may answer
with a corrected spelling or split a concatenated word into parts; such
entries carry an ``original`` back-reference, and the merged result is also
cached under that original key so the same malformed input is a cache hit
on the next run.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from korvocab.common.cache import TranslationCache, TranslationRecord
from korvocab.common.logging import log_error, log_warning
from korvocab.common.utils import unique_preserve_order
from korvocab.input.frequency import WordFrequency


MISSING_ENGLISH = "missing english"
MISSING_DESCRIPTION = "missing description"
DEFAULT_BATCH_SIZE = 100

SPLIT_ENGLISH_SEPARATOR = " / "
SPLIT_DESCRIPTION_SEPARATOR = "; "


@dataclass
class EnrichedWord(WordFrequency):
    english: str = MISSING_ENGLISH
    description: str = MISSING_DESCRIPTION


SYSTEM_PROMPT = (
    "You are a helpful Korean language teacher. Provide clear, concise translations and "
    "example sentences. Always return valid JSON with a \"translations\" array."
)


def build_translation_prompt(words: Sequence[str]) -> str:
    """User prompt asking for one translation entry per submitted word."""
    return f"""Translate the following Korean words to English. For each word, provide:
1. English translation (just the word/phrase)
2. Pronunciation in romanization (e.g., ga-bang)
3. A simple example sentence in Korean with English translation in parentheses

Some words were extracted automatically and may be misspelled, or may be two words
run together. If a word is misspelled, return the corrected word. If a word is two
words run together, return one entry per word. In both cases add an "original" field
holding the word exactly as it was given to you.

Korean words: {", ".join(words)}

Return a JSON object with a "translations" array. Each object in the array should have:
- korean: the Korean word
- english: English translation
- pronunciation: romanized pronunciation
- example: example sentence in format "Korean sentence (English translation)"
- original: (only for corrected or split words) the word as given

Example format:
{{
  "translations": [
    {{
      "korean": "가방",
      "english": "bag",
      "pronunciation": "ga-bang",
      "example": "이 가방이 마음에 들어요. (I like this bag.)"
    }},
    {{
      "korean": "분위기",
      "english": "atmosphere",
      "pronunciation": "bun-wi-gi",
      "example": "분위기가 좋아요. (The atmosphere is nice.)",
      "original": "분위기기분이"
    }},
    {{
      "korean": "기분",
      "english": "mood",
      "pronunciation": "gi-bun",
      "example": "기분이 좋아요. (I feel good.)",
      "original": "분위기기분이"
    }}
  ]
}}

Return ONLY valid JSON, no other text."""


def parse_translation_entries(data: Any) -> List[Dict[str, Any]]:
    """Pull the list of translation entries out of a service response.

    Accepts a bare list, {"translations": [...]} or {"words": [...]}; a JSON
    string is decoded first. Any other shape yields no entries.
    """
    if isinstance(data, (str, bytes)):
        data = json.loads(data)

    if isinstance(data, list):
        entries = data
    elif isinstance(data, dict) and isinstance(data.get("translations"), list):
        entries = data["translations"]
    elif isinstance(data, dict) and isinstance(data.get("words"), list):
        entries = data["words"]
    else:
        shape = sorted(data.keys()) if isinstance(data, dict) else type(data).__name__
        log_warning(f"Unexpected translation response structure: {shape}")
        return []

    return [entry for entry in entries if isinstance(entry, dict)]


def _text(entry: Dict[str, Any], key: str) -> str:
    value = entry.get(key)
    return str(value).strip() if value else ""


def record_from_entry(entry: Dict[str, Any]) -> TranslationRecord:
    """Build a cache record: description is pronunciation and example, comma-joined."""
    description = ", ".join(p for p in (_text(entry, "pronunciation"), _text(entry, "example")) if p)
    return TranslationRecord(
        english=_text(entry, "english") or MISSING_ENGLISH,
        description=description or MISSING_DESCRIPTION,
    )


def combine_records(records: Sequence[TranslationRecord]) -> TranslationRecord:
    """Record for a word the service split into several parts."""
    return TranslationRecord(
        english=SPLIT_ENGLISH_SEPARATOR.join(r.english for r in records),
        description=SPLIT_DESCRIPTION_SEPARATOR.join(r.description for r in records),
    )


def merge_translation_entries(
    entries: Sequence[Dict[str, Any]],
    cache: TranslationCache,
) -> Tuple[Dict[str, TranslationRecord], List[str]]:
    """Cache every entry and reconcile corrections/splits with their original words.

    Returns (records by key, korean keys produced by splits). Keys include
    both the returned korean forms and every ``original`` back-reference.
    """
    resolved: Dict[str, TranslationRecord] = {}
    groups: Dict[str, List[Tuple[str, TranslationRecord]]] = {}

    for entry in entries:
        korean = _text(entry, "korean")
        if not korean:
            continue
        record = record_from_entry(entry)
        cache.put(korean, record)
        resolved[korean] = record

        original = _text(entry, "original")
        if original:
            groups.setdefault(original, []).append((korean, record))

    split_words: List[str] = []
    for original, parts in groups.items():
        if len(parts) > 1:
            record = combine_records([r for _, r in parts])
            split_words.extend(korean for korean, _ in parts)
        else:
            # Pure correction
            record = parts[0][1]
        cache.put(original, record)
        resolved[original] = record

    return resolved, unique_preserve_order(split_words)


def request_batch(client: Any, words: Sequence[str]) -> List[Dict[str, Any]]:
    """Ask the service about one batch. Any failure yields no entries."""
    try:
        data = client.complete_json(SYSTEM_PROMPT, build_translation_prompt(words))
        return parse_translation_entries(data)
    except json.JSONDecodeError as e:
        log_error(f"Failed to parse translation response: {e}")
    except Exception as e:
        log_error(f"Translation request failed for {len(words)} words: {e}")
    return []


def _enrich(word: WordFrequency, record: Optional[TranslationRecord]) -> EnrichedWord:
    if record is None:
        return EnrichedWord(word=word.word, count=word.count)
    return EnrichedWord(
        word=word.word,
        count=word.count,
        english=record.english or MISSING_ENGLISH,
        description=record.description or MISSING_DESCRIPTION,
    )


def translate_words(
    words: Sequence[WordFrequency],
    client: Any,
    cache: TranslationCache,
    batch_size: int = DEFAULT_BATCH_SIZE,
    verbose: bool = False,
) -> List[EnrichedWord]:
    """Enrich ranked words, consulting and updating the cache.

    Every input word yields exactly one result, in input order. Parts of a
    split word that were not themselves submitted are appended at the end,
    each with the count of the first word of the batch it came from.
    Without a client every word gets the missing sentinels and the cache
    is not touched.
    """
    if client is None:
        print("[translate] No enrichment client configured. Skipping translations.")
        return [_enrich(w, None) for w in words]

    if not words:
        return []

    records: Dict[str, TranslationRecord] = {}
    to_process: List[WordFrequency] = []
    for w in words:
        cached = cache.get(w.word)
        if cached is not None:
            records[w.word] = cached
            if verbose:
                print(f"[cache-hit] {w.word}")
        else:
            to_process.append(w)

    if verbose:
        print(f"[cache] {len(records)} cached, {len(to_process)} to translate")

    submitted = {w.word for w in words}
    extras: List[EnrichedWord] = []
    batches = [to_process[i:i + batch_size] for i in range(0, len(to_process), batch_size)]

    for number, batch in enumerate(batches, 1):
        if verbose:
            print(f"[api] Translating batch {number}/{len(batches)} ({len(batch)} words)")
        entries = request_batch(client, [w.word for w in batch])
        resolved, split_words = merge_translation_entries(entries, cache)

        for w in batch:
            if w.word in resolved:
                records[w.word] = resolved[w.word]
            elif verbose:
                print(f"[cache-miss] {w.word}: no translation returned")

        for korean in split_words:
            if korean in submitted:
                continue
            submitted.add(korean)
            # Count of the batch's first word, not a real occurrence count
            extras.append(_enrich(WordFrequency(word=korean, count=batch[0].count), resolved[korean]))

    results = [_enrich(w, records.get(w.word)) for w in words] + extras
    translated = sum(1 for r in results if r.english != MISSING_ENGLISH)
    print(f"[translate] Translation complete. Translated {translated}/{len(results)} words.")
    return results
