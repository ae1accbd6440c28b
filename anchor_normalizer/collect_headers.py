"""Logic for collecting the section headers of a Markdown page."""

import re
from collections.abc import Iterable

HEADER_RE = re.compile(r"\s*#+\s+(.+)", re.ASCII)  # ASCII whitespace only


def collect_headers(lines: Iterable[str]) -> set[str]:
    """Return the distinct header texts found in the given lines."""
    headers: set[str] = set()
    for line in lines:
        m = HEADER_RE.fullmatch(line)
        if m:
            headers.add(m.group(1))
    return headers
