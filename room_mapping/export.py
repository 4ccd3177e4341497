"""
JSON artifact writing.

All payloads for a run are serialized, and every file is staged as a
temporary sibling, before the first rename. A failure while serializing or
staging leaves every existing artifact untouched; only the final renames
touch the destination files.
"""

import os
import json
import tempfile
from typing import Any, List, Optional, Tuple
from pathlib import Path


def dump_json(payload: Any, indent: Optional[int] = None) -> str:
    if indent is None:
        return json.dumps(payload, separators=(",", ":")) + "\n"
    return json.dumps(payload, indent=indent) + "\n"


def stage_text(path: Path, text: str) -> str:
    """Write text to a temporary sibling of `path` and return its name."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
    except BaseException:
        os.unlink(tmp_name)
        raise
    return tmp_name


def write_artifacts(
    artifacts: List[Tuple[str, Any, Optional[int]]],
    verbose: bool = True
) -> List[Path]:
    """
    Serialize and stage every artifact, then rename them all into place.

    Args:
        artifacts: (path, payload, indent) triples; indent None is compact
        verbose: Print each written path

    Returns:
        Paths written, in input order
    """
    rendered = [(Path(path), dump_json(payload, indent)) for path, payload, indent in artifacts]

    staged: List[Tuple[str, Path]] = []
    try:
        for path, text in rendered:
            staged.append((stage_text(path, text), path))
    except BaseException:
        for tmp_name, _ in staged:
            os.unlink(tmp_name)
        raise

    written = []
    for tmp_name, path in staged:
        os.replace(tmp_name, path)
        written.append(path)
        if verbose:
            print(f"Written to {path}")

    return written
