"""Tests for whole-tree normalization."""

from pathlib import Path
from unittest.mock import patch

import pytest

from anchor_normalizer.load_config import load_config
from anchor_normalizer.normalize_tree import normalize_tree

STALE = "# Quick Start\n[Quick Start]({{< ref \"#Quick Start\" >}})\n"
FIXED = "# Quick Start\n[Quick Start]({{< ref \"#quick-start\" >}})\n"


def _make_docs(root: Path) -> None:
    (root / "guide").mkdir()
    (root / "index.md").write_text(STALE, encoding="utf-8")
    (root / "guide" / "setup.md").write_text(STALE, encoding="utf-8")
    (root / "guide" / "notes.txt").write_text(STALE, encoding="utf-8")


def test_normalize_tree_rewrites_markdown_only(tmp_path: Path) -> None:
    """Verify that Markdown files are rewritten and others left alone."""
    _make_docs(tmp_path)
    report = normalize_tree(tmp_path)
    assert (tmp_path / "index.md").read_text(encoding="utf-8") == FIXED
    assert (tmp_path / "guide" / "setup.md").read_text(encoding="utf-8") == FIXED
    assert (tmp_path / "guide" / "notes.txt").read_text(encoding="utf-8") == STALE
    stats = report.compute_stats()
    assert stats["files_processed"] == 2
    assert stats["files_skipped"] == 1
    assert stats["anchors_rewritten"] == 2


def test_normalize_tree_idempotent(tmp_path: Path) -> None:
    """Verify that running twice gives the same content as running once."""
    _make_docs(tmp_path)
    normalize_tree(tmp_path)
    first = (tmp_path / "index.md").read_text(encoding="utf-8")
    report = normalize_tree(tmp_path)
    assert (tmp_path / "index.md").read_text(encoding="utf-8") == first
    assert report.compute_stats()["files_changed"] == 0


def test_normalize_tree_dry_run(tmp_path: Path) -> None:
    """Verify that a dry run leaves every file untouched."""
    _make_docs(tmp_path)
    report = normalize_tree(tmp_path, dry_run=True)
    assert (tmp_path / "index.md").read_text(encoding="utf-8") == STALE
    assert report.compute_stats()["files_changed"] == 2


def test_normalize_tree_config_excludes(tmp_path: Path) -> None:
    """Verify that configured directories are skipped."""
    _make_docs(tmp_path)
    config_file = tmp_path / "cfg.yml"
    config_file.write_text("files:\n  exclude_dirs: [guide]\n", encoding="utf-8")
    normalize_tree(tmp_path, load_config(str(config_file)))
    assert (tmp_path / "index.md").read_text(encoding="utf-8") == FIXED
    assert (tmp_path / "guide" / "setup.md").read_text(encoding="utf-8") == STALE


def test_normalize_tree_missing_root(tmp_path: Path) -> None:
    """Verify that a missing root aborts with a message."""
    with pytest.raises(SystemExit, match="No such file or directory"):
        normalize_tree(tmp_path / "missing")


def test_normalize_tree_aborts_on_first_error(tmp_path: Path) -> None:
    """Verify that an I/O failure stops the run."""
    _make_docs(tmp_path)
    with (
        patch(
            "anchor_normalizer.process_file.atomic_write_text",
            side_effect=OSError("denied"),
        ) as write,
        pytest.raises(OSError, match="denied"),
    ):
        normalize_tree(tmp_path)
    write.assert_called_once()
    assert (tmp_path / "index.md").read_text(encoding="utf-8") == STALE
