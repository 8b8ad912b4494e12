"""Utility helpers for slug matching and path handling."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

SLUG_HREF_PATTERN = re.compile(r"/([a-z0-9_-]+)", re.IGNORECASE)


def slug_from_href(href: str) -> Optional[str]:
    """Return the slug of a bare ``/slug`` link, or ``None`` for anything else."""
    match = SLUG_HREF_PATTERN.fullmatch(href or "")
    if not match:
        return None
    return match.group(1)


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
