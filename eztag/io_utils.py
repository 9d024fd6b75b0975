"""Output helpers for rendered tags and CLI diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path


def write_tags(path: Path, rendered: str) -> Path:
    """Write rendered tags as one UTF-8 file ending in a newline."""

    path.parent.mkdir(parents=True, exist_ok=True)
    if not rendered.endswith("\n"):
        rendered += "\n"
    path.write_text(rendered, encoding="utf-8")
    return path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["warn", "write_tags"]
