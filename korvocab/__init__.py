"""Korean vocabulary extraction library.

Subpackages:
- korvocab.common: Shared utilities (utils, logging, openai client, cache, config)
- korvocab.input: Input processing (tokenizing, vocabulary sections, ranking)
- korvocab.output: Output generation (enrichment, CSV/JSON files, practice page)
"""

__version__ = "1.0.0"
