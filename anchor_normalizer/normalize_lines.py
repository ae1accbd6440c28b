"""Pure text transformation applied to the lines of one Markdown page."""

from collections.abc import Sequence

from anchor_normalizer.collect_headers import collect_headers
from anchor_normalizer.rewrite_anchors import rewrite_line_counted


def normalize_lines(
    lines: Sequence[str], line_terminator: str = "\n"
) -> tuple[str, int, int]:
    """Normalize the anchors of a page.

    Headers are collected from the original lines before any rewriting.
    Returns (new_text, header_count, rewritten_count); every output line is
    followed by the terminator.
    """
    headers = collect_headers(lines)
    parts: list[str] = []
    rewritten = 0
    for line in lines:
        new_line, n = rewrite_line_counted(line, headers)
        rewritten += n
        parts.append(new_line)
        parts.append(line_terminator)
    return "".join(parts), len(headers), rewritten
