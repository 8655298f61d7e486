"""Writing and checking generated JSONL text."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

JSONL_SUFFIX = ".jsonl"


def default_output_path(input_path: Path | str) -> Path:
    """``report.pdf`` -> ``report.jsonl`` next to the input."""
    input_path = Path(input_path)
    return input_path.parent / f"{input_path.stem}{JSONL_SUFFIX}"


def ensure_jsonl_suffix(path: Path | str) -> Path:
    """Append ``.jsonl`` unless the file name already ends with it."""
    path = Path(path)
    if path.name.endswith(JSONL_SUFFIX):
        return path
    return path.with_name(path.name + JSONL_SUFFIX)


def write_output(text: str, path: Path | str) -> Path:
    """Write generated text verbatim and return the absolute path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path.absolute()


def invalid_jsonl_lines(text: str) -> list[int]:
    """Return 1-based numbers of non-blank lines that are not a JSON object."""
    bad = []
    for lineno, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        try:
            value = json.loads(line)
        except ValueError:
            bad.append(lineno)
            continue
        if not isinstance(value, dict):
            bad.append(lineno)
    return bad
