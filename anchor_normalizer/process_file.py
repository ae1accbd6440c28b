"""Logic for normalizing the anchors of a single Markdown file."""

import logging
from collections.abc import Iterable
from pathlib import Path

from anchor_normalizer.atomic_write import atomic_write_text
from anchor_normalizer.file_result import FileResult
from anchor_normalizer.normalize_lines import normalize_lines

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md",)


def is_markdown(path: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> bool:
    """Check if the file name ends with one of the Markdown extensions."""
    return path.name.endswith(tuple(extensions))


def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Read a file's lines with any line terminator style removed."""
    with path.open(encoding=encoding, newline=None) as f:
        return [line.rstrip("\n") for line in f]


def process_file(
    path: Path,
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    encoding: str = "utf-8",
    line_terminator: str = "\n",
    dry_run: bool = False,
) -> FileResult:
    """Normalize header anchors of one file in place.

    Non-Markdown files are skipped without being opened. Read, write and
    replace failures propagate to the caller.
    """
    if not is_markdown(path, extensions):
        logger.debug("Skipping %s", path)
        return FileResult(path=path, skipped=True)

    lines = read_lines(path, encoding)
    text, headers, rewritten = normalize_lines(lines, line_terminator)
    original = "".join(line + line_terminator for line in lines)
    changed = text != original

    if not dry_run:
        atomic_write_text(path, text, encoding)

    logger.debug(
        "%s: %d headers, %d anchors rewritten%s",
        path,
        headers,
        rewritten,
        " (changed)" if changed else "",
    )
    return FileResult(
        path=path, skipped=False, headers=headers, rewritten=rewritten, changed=changed
    )
