"""Input processing library for turning source text into ranked Korean words."""

from korvocab.input.tokenizer import (
    KOREAN_PARTICLES,
    clean_word,
    strip_particle,
    tokenize,
)
from korvocab.input.sections import (
    VocabularySection,
    extract_vocabulary_sections,
)
from korvocab.input.frequency import (
    WordFrequency,
    rank,
    format_top_words,
)
from korvocab.input.csv_input import parse_vocab_csv
from korvocab.input.processing import (
    read_source_text,
    analyze_text,
    analyze_csv,
    analyze_file,
)

__all__ = [
    # tokenizer
    "KOREAN_PARTICLES",
    "clean_word",
    "strip_particle",
    "tokenize",
    # sections
    "VocabularySection",
    "extract_vocabulary_sections",
    # frequency
    "WordFrequency",
    "rank",
    "format_top_words",
    # csv
    "parse_vocab_csv",
    # processing
    "read_source_text",
    "analyze_text",
    "analyze_csv",
    "analyze_file",
]
