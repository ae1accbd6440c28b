"""Utility for generating slugs for Markdown headers."""

import re

SPECIAL_CHARS_RE = re.compile(r"[^a-z0-9 _\-]")


def header_slug(s: str) -> str:
    """Generate a GitHub-style anchor slug: lower, drop specials, spaces to dashes.

    Consecutive spaces yield consecutive dashes; nothing is collapsed or
    stripped, and non-latin letters are removed rather than transliterated.
    """
    s = SPECIAL_CHARS_RE.sub("", s.lower())
    return s.replace(" ", "-")
