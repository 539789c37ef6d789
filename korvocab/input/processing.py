"""Main input processing logic: source file -> ranked Korean words."""

from pathlib import Path
from typing import List

import pdfplumber

from korvocab.common.logging import log_debug
from korvocab.input.csv_input import parse_vocab_csv
from korvocab.input.frequency import WordFrequency, rank
from korvocab.input.sections import extract_vocabulary_sections
from korvocab.input.tokenizer import tokenize


def read_pdf_text(pdf_path: Path, verbose: bool = False) -> str:
    """Extract plain text from a PDF, page by page."""
    pages: List[str] = []
    with pdfplumber.open(pdf_path) as pdf:
        if verbose:
            print(f"[input] Reading {pdf_path.name}: {len(pdf.pages)} pages")
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                pages.append(page_text)
    return "\n".join(pages)


def read_source_text(source_path: Path, verbose: bool = False) -> str:
    """Read a PDF or plain-text source as text.

    Raises FileNotFoundError if the source does not exist.
    """
    if not source_path.is_file():
        raise FileNotFoundError(f"File not found: {source_path}")
    if source_path.suffix.lower() == ".pdf":
        return read_pdf_text(source_path, verbose=verbose)
    return source_path.read_text(encoding="utf-8", errors="ignore")


def analyze_text(text: str, mode: str = "all", verbose: bool = False) -> List[WordFrequency]:
    """Rank the Korean words of a text.

    mode "all" tokenizes the whole text; mode "sections" only keeps words
    found inside vocabulary sections.
    """
    if mode == "sections":
        sections = extract_vocabulary_sections(text)
        tokens = [word for section in sections for word in section.words]
        if verbose:
            print(f"[input] Found {len(sections)} vocabulary sections ({len(tokens)} words)")
        for section in sections:
            log_debug(verbose, f"section '{section.title}': {', '.join(section.words)}")
    elif mode == "all":
        tokens = tokenize(text)
        if verbose:
            print(f"[input] Found {len(tokens)} Korean word tokens")
    else:
        raise ValueError(f"mode must be 'all' or 'sections', got '{mode}'")

    frequencies = rank(tokens)
    if verbose:
        print(f"[input] Found {len(frequencies)} unique Korean words")
    return frequencies


def analyze_csv(csv_path: Path, verbose: bool = False) -> List[WordFrequency]:
    """Rank the Korean words listed in a vocabulary CSV."""
    if not csv_path.is_file():
        raise FileNotFoundError(f"File not found: {csv_path}")
    text = csv_path.read_text(encoding="utf-8", errors="ignore")
    frequencies = rank(parse_vocab_csv(text))
    if verbose:
        print(f"[input] Found {len(frequencies)} unique Korean words in {csv_path.name}")
    return frequencies


def analyze_file(source_path: Path, mode: str = "all", verbose: bool = False) -> List[WordFrequency]:
    """Analyze a CSV, PDF or text file and return ranked word frequencies."""
    if source_path.suffix.lower() == ".csv":
        return analyze_csv(source_path, verbose=verbose)
    text = read_source_text(source_path, verbose=verbose)
    return analyze_text(text, mode=mode, verbose=verbose)
