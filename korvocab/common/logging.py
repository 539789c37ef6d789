"""Logging utilities for the vocabulary pipeline."""

import sys
from typing import Optional, TextIO


# Module-level stage context (e.g., "input", "translate", "output")
_LOG_STAGE: Optional[str] = None

# Emoji decorations for status tags
_TAG_EMOJI = {
    "cache-hit": "🎯",
    "cache-miss": "💥",
    "api": "🤖",
    "file": "💾",
}


def set_log_context(stage: Optional[str]) -> None:
    """Set the pipeline stage shown in front of every prefixed line."""
    global _LOG_STAGE
    _LOG_STAGE = stage


def get_log_context() -> Optional[str]:
    """Get the current pipeline stage."""
    return _LOG_STAGE


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")


def log_warning(message: str) -> None:
    """Print a warning to stderr."""
    print(f"[warn] {message}", file=sys.stderr)


def log_error(message: str) -> None:
    """Print an error to stderr."""
    print(f"[error] {message}", file=sys.stderr)


def _emoji_for(line: str) -> str:
    if not line.startswith("["):
        return ""
    end = line.find("]")
    if end == -1:
        return ""
    return _TAG_EMOJI.get(line[1:end], "")


class _StagePrefixedWriter:
    """Wrapper for stdout that adds the current stage and tag emoji to output."""

    def __init__(self, wrapped: TextIO):
        self._wrapped = wrapped

    def write(self, s: str) -> int:
        if not isinstance(s, str):
            return 0
        # If this is just a newline from print's second write, don't prefix
        if s == "\n":
            self._wrapped.write("\n")
            self.flush()
            return 1

        prefix = f"[{get_log_context() or 'main'}] "
        parts = s.split("\n")

        for i, part in enumerate(parts):
            if part == "" and i == len(parts) - 1:
                continue

            emoji = _emoji_for(part)
            if emoji:
                end = part.find("]")
                tag = part[:end + 1]
                rest = part[end + 1:].lstrip()
                self._wrapped.write(prefix + tag + " " + emoji + " " + rest)
            else:
                self._wrapped.write(prefix + part)

            if i < len(parts) - 1:
                self._wrapped.write("\n")

        self.flush()
        return len(s)

    def flush(self) -> None:
        try:
            self._wrapped.flush()
        except (OSError, ValueError):
            pass

    def isatty(self) -> bool:
        try:
            return bool(self._wrapped.isatty())
        except (OSError, ValueError):
            return False


def setup_stage_prefixed_stdout() -> None:
    """Set up stage-prefixed stdout writer."""
    if isinstance(sys.stdout, _StagePrefixedWriter):
        return
    try:
        sys.stdout.reconfigure(line_buffering=True)  # type: ignore
    except AttributeError:
        pass
    sys.stdout = _StagePrefixedWriter(sys.stdout)  # type: ignore
