#!/usr/bin/env python3
"""
JSON File Helpers

Every JSON document the application stores is written and read here, with
two-space indentation and UTF-8 text.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def write_json(filepath: str | Path, data: Any, sort_keys: bool = False) -> None:
    """
    Replace a JSON file atomically.

    The document goes to a temporary file in the same directory which is
    then renamed over the target, so a crash never leaves a truncated file.
    Missing parent directories are created.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(format_json(data, sort_keys=sort_keys))
        os.replace(tmp_name, filepath)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def read_json(filepath: str | Path) -> Any:
    """Load a JSON document written by write_json()."""
    with Path(filepath).open(encoding="utf-8") as f:
        return json.load(f)


def format_json(data: Any, sort_keys: bool = False) -> str:
    """Render data the way it is stored on disk."""
    return json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys)
