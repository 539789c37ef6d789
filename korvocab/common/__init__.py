"""Common utilities shared across input and output processing."""

from korvocab.common.utils import (
    KOREAN_RUN_RE,
    keep_only_hangul,
    find_korean_runs,
    line_has_hangul_syllable,
    unique_preserve_order,
    _load_env_file,
    ensure_dir,
)
from korvocab.common.logging import (
    log_debug,
    log_warning,
    log_error,
    set_log_context,
    get_log_context,
    setup_stage_prefixed_stdout,
)
from korvocab.common.cache import TranslationCache, TranslationRecord
from korvocab.common.config import PipelineConfig, load_config
from korvocab.common.openai import OpenAIClient, make_client

__all__ = [
    # utils
    "KOREAN_RUN_RE",
    "keep_only_hangul",
    "find_korean_runs",
    "line_has_hangul_syllable",
    "unique_preserve_order",
    "_load_env_file",
    "ensure_dir",
    # logging
    "log_debug",
    "log_warning",
    "log_error",
    "set_log_context",
    "get_log_context",
    "setup_stage_prefixed_stdout",
    # cache
    "TranslationCache",
    "TranslationRecord",
    # config
    "PipelineConfig",
    "load_config",
    # openai
    "OpenAIClient",
    "make_client",
]
