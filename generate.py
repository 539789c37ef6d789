#!/usr/bin/env python3
"""Full Korean vocabulary pipeline.

Runs every stage for one source file:
1. Input: PDF/text/CSV -> ranked Korean words
2. Enrichment: English, romanization and an example per word (cached)
3. Output: CSV files and a practice page

Output structure:
    output/
        korean_vocabulary.csv   (Word,English,Description,Frequency)
        korean_words.csv        (Word,Frequency)
        korean-practice.html
        korean_words.txt        (--word-list)
        korean_vocabulary.json  (--json)
    .cache/
        translations.json

Usage:
    python generate.py lesson.pdf --verbose
    python generate.py words.csv --config -config.json
    python generate.py lesson.pdf --mode sections --clear-cache
    python generate.py lesson.pdf --json --save-config -config.json
"""

import argparse
import dataclasses
from pathlib import Path
from typing import Any, Dict, List, Optional

from korvocab.common.cache import TranslationCache
from korvocab.common.config import PipelineConfig, load_config, write_config, clear_output_dir, MODES
from korvocab.common.logging import log_error, set_log_context, setup_stage_prefixed_stdout
from korvocab.common.openai import make_client
from korvocab.input import analyze_file, format_top_words
from korvocab.output import translate_words, save_as_csv, save_as_json, save_word_list, save_practice_html
from korvocab.output.html import PRACTICE_FILENAME


VOCABULARY_CSV = "korean_vocabulary.csv"
WORDS_CSV = "korean_words.csv"
WORD_LIST_TXT = "korean_words.txt"
VOCABULARY_JSON = "korean_vocabulary.json"
OUTPUT_FILENAMES = (VOCABULARY_CSV, WORDS_CSV, PRACTICE_FILENAME, WORD_LIST_TXT, VOCABULARY_JSON)


def run_pipeline(
    source_path: Path,
    config: PipelineConfig,
    client: Any,
    cache: TranslationCache,
    template_path: Optional[Path] = None,
    word_list: bool = False,
    as_json: bool = False,
    verbose: bool = False,
) -> Dict[str, Path]:
    """Analyze, enrich and write one source file.

    Returns the paths of the written artifacts keyed by kind.
    Raises FileNotFoundError if the source does not exist.
    """
    output_dir = Path(config.output_dir)

    set_log_context("input")
    frequencies = analyze_file(source_path, mode=config.mode, verbose=verbose)
    print(format_top_words(frequencies, config.top_n))

    set_log_context("translate")
    enriched = translate_words(frequencies, client, cache, batch_size=config.batch_size, verbose=verbose)

    set_log_context("output")
    if config.clear_output:
        cleared = clear_output_dir(config, OUTPUT_FILENAMES, protected=[source_path.parent])
        if verbose and cleared > 0:
            print(f"[file] Cleared {cleared} files from {output_dir}")
    paths = {
        "vocabulary": save_as_csv(enriched, output_dir, VOCABULARY_CSV, verbose=verbose),
        "words": save_as_csv(frequencies, output_dir, WORDS_CSV, verbose=verbose),
        "practice": save_practice_html(enriched, output_dir, template_path=template_path, verbose=verbose),
    }
    if word_list:
        paths["word_list"] = save_word_list(frequencies, output_dir, WORD_LIST_TXT, verbose=verbose)
    if as_json:
        paths["json"] = save_as_json(enriched, output_dir, VOCABULARY_JSON, verbose=verbose)
    set_log_context(None)
    return paths


def _resolve_config(args: argparse.Namespace) -> PipelineConfig:
    config = PipelineConfig()
    if args.config:
        config_path = Path(args.config)
        loaded = load_config(config_path)
        if loaded is None:
            raise FileNotFoundError(f"Config file does not exist or is not an object: {config_path}")
        config = loaded

    overrides = {
        "output_dir": args.output_dir,
        "cache_dir": args.cache_dir,
        "mode": args.mode,
        "batch_size": args.batch_size,
        "top_n": args.top,
        "model": args.model,
        "clear_output": args.clear_output,
    }
    return dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the full pipeline."""
    parser = argparse.ArgumentParser(
        description="Extract, rank and translate Korean vocabulary from a PDF, text or CSV file"
    )
    parser.add_argument("source", help="PDF, text or CSV file to analyze")
    parser.add_argument("--config", type=str, help="Path to a -config.json file")
    parser.add_argument("--output-dir", help="Directory for generated files (default: output)")
    parser.add_argument("--cache-dir", help="Directory for translations.json (default: .cache)")
    parser.add_argument("--mode", choices=MODES, help="all: every Korean word; sections: vocabulary sections only")
    parser.add_argument("--batch-size", type=int, help="Words per translation request (default: 100)")
    parser.add_argument("--top", type=int, help="Number of top words to print (default: 20)")
    parser.add_argument("--model", help="OpenAI model name (overrides OPENAI_MODEL)")
    parser.add_argument("--template", help="Practice page template containing {{VOCABULARY_JSON}}")
    parser.add_argument("--word-list", action="store_true", help="Also write korean_words.txt (word<TAB>count)")
    parser.add_argument("--json", action="store_true", help="Also write korean_vocabulary.json")
    parser.add_argument("--save-config", type=str, help="Write the resolved settings to this -config.json path")
    parser.add_argument(
        "--clear-output", action="store_true", default=None,
        help="Remove files written by a previous run from the output directory",
    )
    parser.add_argument("--clear-cache", action="store_true", help="Clear the translation cache before running")
    parser.add_argument("--no-translate", action="store_true", help="Skip translation even if OPENAI_API_KEY is set")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    try:
        config = _resolve_config(args)
    except (OSError, ValueError) as e:
        log_error(str(e))
        return 2

    if args.save_config:
        print(f"[file] Wrote config {write_config(Path(args.save_config), config)}")

    source_path = Path(args.source)
    if not source_path.is_file():
        log_error(f"File not found: {source_path}")
        return 2

    template_path = Path(args.template) if args.template else None
    if template_path is not None and not template_path.is_file():
        log_error(f"Template not found: {template_path}")
        return 2

    if args.verbose:
        setup_stage_prefixed_stdout()
        print(f"\n{'=' * 60}")
        print(f"🚀 Korean vocabulary: {source_path.name}")
        print(f"{'=' * 60}")

    cache = TranslationCache(Path(config.cache_dir), verbose=args.verbose)
    if args.clear_cache:
        cache.clear()

    client = None if args.no_translate else make_client(model=config.model, timeout=config.timeout)

    try:
        paths = run_pipeline(
            source_path,
            config,
            client,
            cache,
            template_path=template_path,
            word_list=args.word_list,
            as_json=args.json,
            verbose=args.verbose,
        )
    except (FileNotFoundError, IsADirectoryError) as e:
        log_error(str(e))
        return 2

    print("\nAnalysis complete.")
    print(f"Words with translations: {paths['vocabulary']}")
    print(f"All words: {paths['words']}")
    print(f"Practice HTML: {paths['practice']}")
    if "word_list" in paths:
        print(f"Word list: {paths['word_list']}")
    if "json" in paths:
        print(f"JSON: {paths['json']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
