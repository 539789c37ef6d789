"""Static practice page rendering."""

import json
from pathlib import Path
from typing import Optional, Sequence

from korvocab.common.utils import ensure_dir
from korvocab.input.frequency import WordFrequency


VOCABULARY_PLACEHOLDER = "{{VOCABULARY_JSON}}"
PRACTICE_FILENAME = "korean-practice.html"

DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html lang="ko">
<head>
<meta charset="utf-8">
<title>Korean Vocabulary Practice</title>
<style>
  body { font-family: sans-serif; max-width: 40em; margin: 2em auto; }
  #card { border: 1px solid #ccc; border-radius: 8px; padding: 2em; text-align: center; }
  #word { font-size: 3em; }
  #back { display: none; margin-top: 1em; }
</style>
</head>
<body>
<div id="card">
  <div id="word"></div>
  <div id="back"><p id="english"></p><p id="description"></p><p id="count"></p></div>
</div>
<p><button id="flip">Show</button> <button id="next">Next</button></p>
<script>
const vocabulary = {{VOCABULARY_JSON}};
let index = 0;
function show() {
  if (!vocabulary.length) { document.getElementById("word").textContent = "(no words)"; return; }
  const w = vocabulary[index];
  document.getElementById("word").textContent = w.word;
  document.getElementById("english").textContent = w.english || "";
  document.getElementById("description").textContent = w.description || "";
  document.getElementById("count").textContent = w.count + " times";
  document.getElementById("back").style.display = "none";
}
document.getElementById("flip").onclick = () => { document.getElementById("back").style.display = "block"; };
document.getElementById("next").onclick = () => { index = (index + 1) % Math.max(vocabulary.length, 1); show(); };
show();
</script>
</body>
</html>
"""


def vocabulary_json(words: Sequence[WordFrequency]) -> str:
    """JSON array embeddable in a <script> block."""
    # Escape "</" so a word can never close the script element
    return json.dumps([w.to_dict() for w in words], ensure_ascii=False).replace("</", "<\\/")


def render_practice_html(words: Sequence[WordFrequency], template: Optional[str] = None) -> str:
    """Substitute the vocabulary JSON into a practice page template."""
    template = DEFAULT_TEMPLATE if template is None else template
    return template.replace(VOCABULARY_PLACEHOLDER, vocabulary_json(words))


def save_practice_html(
    words: Sequence[WordFrequency],
    out_dir: Path,
    template_path: Optional[Path] = None,
    verbose: bool = False,
) -> Path:
    """Write korean-practice.html into out_dir and return its path."""
    template = template_path.read_text(encoding="utf-8") if template_path else None
    ensure_dir(out_dir)
    path = out_dir / PRACTICE_FILENAME
    path.write_text(render_practice_html(words, template), encoding="utf-8")
    if verbose:
        print(f"[file] Saved practice page to {path}")
    return path
