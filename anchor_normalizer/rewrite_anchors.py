"""Logic for rewriting Hugo ref anchors to normalized header slugs."""

import re
from collections.abc import Set

from anchor_normalizer.header_slug import header_slug

# [Label]({{< ref "#target" >}})
REF_RE = re.compile(r'\[([^\]]+)\]\(\{\{< ref "#[^"]+" >\}\}\)')


def format_ref(label: str) -> str:
    """Build the anchor reference for a header label."""
    return f'[{label}]({{{{< ref "#{header_slug(label)}" >}}}})'


def rewrite_line_counted(line: str, headers: Set[str]) -> tuple[str, int]:
    """Rewrite anchors whose label is a known header.

    Returns the new line and the number of references that matched a header.
    Matches are taken from the original line; each one is substituted with a
    literal replace-all, so identical references on a line change together.
    """
    out = line
    matched = 0
    for m in REF_RE.finditer(line):
        label = m.group(1)
        if label not in headers:
            continue
        out = out.replace(m.group(0), format_ref(label))
        matched += 1
    return out, matched


def rewrite_line(line: str, headers: Set[str]) -> str:
    """Rewrite the anchor references of a single line."""
    return rewrite_line_counted(line, headers)[0]
