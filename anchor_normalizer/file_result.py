"""Data models for per-file normalization results."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileResult:
    """Represents the outcome of normalizing a single file."""

    path: Path
    skipped: bool = False  # not a Markdown file, never opened
    headers: int = 0
    rewritten: int = 0  # references whose label matched a header
    changed: bool = False
