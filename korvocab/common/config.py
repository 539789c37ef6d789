"""Pipeline configuration.

A run can be configured with a -config.json file that specifies:
- output_dir: where CSV/HTML artifacts are written (default: output)
- cache_dir: where translations.json lives (default: .cache)
- mode: "all" (tokenize the whole text) or "sections" (vocabulary sections only)
- batch_size: words per enrichment request (default: 100)
- top_n: number of top words echoed to the console (default: 20)
- model: OpenAI model name (default: OPENAI_MODEL or gpt-4o-mini)
- timeout: seconds per enrichment request (default: 60)
- clear_output: remove artifacts of a previous run from output_dir (default: false)
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Iterable, Optional

from korvocab.common.logging import log_warning


CONFIG_FILENAME = "-config.json"
MODES = ("all", "sections")


@dataclass
class PipelineConfig:
    """Configuration for one pipeline run."""
    output_dir: str = "output"
    cache_dir: str = ".cache"
    mode: str = "all"
    batch_size: int = 100
    top_n: int = 20
    model: Optional[str] = None
    timeout: float = 60.0
    clear_output: bool = False

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"mode must be 'all' or 'sections', got '{self.mode}'")
        if not isinstance(self.batch_size, int) or self.batch_size < 1:
            raise ValueError(f"batch_size must be a positive integer, got {self.batch_size!r}")


def load_config(config_path: Path) -> Optional[PipelineConfig]:
    """Load configuration from a -config.json file.

    Returns None if the file doesn't exist. Unknown keys are ignored.
    """
    if not config_path.exists():
        return None

    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        return None

    known = {f.name for f in fields(PipelineConfig)}
    return PipelineConfig(**{k: v for k, v in data.items() if k in known})


def write_config(config_path: Path, config: PipelineConfig) -> Path:
    """Write a configuration file."""
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(asdict(config), f, indent=2, ensure_ascii=False)
    return config_path


def _is_within(path: Path, root: Path) -> bool:
    return path == root or root in path.parents


def clear_output_dir(config: PipelineConfig, filenames: Iterable[str], protected: Iterable[Path] = ()) -> int:
    """Remove artifacts of a previous run from output_dir.

    Only the named files are removed. Nothing is removed when output_dir is
    the working directory (or one of its parents) or holds the cache
    directory or any protected path. Returns the number of files removed.
    """
    output_dir = Path(config.output_dir).resolve()
    if not output_dir.is_dir():
        return 0

    guarded = [Path.cwd(), Path(config.cache_dir), *protected]
    for path in guarded:
        if _is_within(path.resolve(), output_dir):
            log_warning(f"Not clearing {output_dir}: it contains {path}")
            return 0

    cleared = 0
    for name in filenames:
        item = output_dir / name
        if item.is_file():
            item.unlink()
            cleared += 1

    return cleared
