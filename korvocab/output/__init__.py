"""Output generation library: enrichment, vocabulary files and practice page."""

from korvocab.output.translate import (
    MISSING_ENGLISH,
    MISSING_DESCRIPTION,
    DEFAULT_BATCH_SIZE,
    EnrichedWord,
    build_translation_prompt,
    parse_translation_entries,
    record_from_entry,
    combine_records,
    merge_translation_entries,
    request_batch,
    translate_words,
)
from korvocab.output.writer import (
    format_vocabulary_csv,
    save_as_csv,
    save_word_list,
    save_as_json,
)
from korvocab.output.html import (
    VOCABULARY_PLACEHOLDER,
    render_practice_html,
    save_practice_html,
)

__all__ = [
    # translate
    "MISSING_ENGLISH",
    "MISSING_DESCRIPTION",
    "DEFAULT_BATCH_SIZE",
    "EnrichedWord",
    "build_translation_prompt",
    "parse_translation_entries",
    "record_from_entry",
    "combine_records",
    "merge_translation_entries",
    "request_batch",
    "translate_words",
    # writer
    "format_vocabulary_csv",
    "save_as_csv",
    "save_word_list",
    "save_as_json",
    # html
    "VOCABULARY_PLACEHOLDER",
    "render_practice_html",
    "save_practice_html",
]
