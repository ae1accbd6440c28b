"""Utility for walking a directory tree in a stable order."""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path


def _raise(err: OSError) -> None:
    raise err


def iter_files(root: Path, exclude_dirs: Iterable[str] = ()) -> Iterator[Path]:
    """Yield every regular file under root, sorted per directory.

    A root that is itself a file is yielded alone. Directories named in
    exclude_dirs are not descended into; directory symlinks are not followed.
    A directory that cannot be listed raises instead of being skipped.
    """
    if not root.is_dir():
        if root.is_file():
            yield root
        return

    excluded = set(exclude_dirs)
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        base = Path(dirpath)
        for name in sorted(filenames):
            p = base / name
            if p.is_file():
                yield p
