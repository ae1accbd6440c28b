"""Orchestration logic for normalizing every Markdown file under a root."""

import logging
from pathlib import Path
from typing import Any

from anchor_normalizer.iter_files import iter_files
from anchor_normalizer.load_config import DEFAULT_CONFIG
from anchor_normalizer.process_file import process_file
from anchor_normalizer.run_report import RunReport

logger = logging.getLogger(__name__)


def normalize_tree(
    root: Path, config: dict[str, Any] | None = None, *, dry_run: bool = False
) -> RunReport:
    """Process every file under root sequentially.

    The first read, write or replace failure propagates and aborts the run.
    """
    if not root.exists():
        msg = f"No such file or directory: {root}"
        raise SystemExit(msg)

    config = config or DEFAULT_CONFIG
    files_cfg = config["files"]
    line_terminator = config["output"]["line_terminator"]

    report = RunReport(root, dry_run=dry_run)
    for path in iter_files(root, files_cfg.get("exclude_dirs", [])):
        result = process_file(
            path,
            extensions=files_cfg["extensions"],
            encoding=files_cfg["encoding"],
            line_terminator=line_terminator,
            dry_run=dry_run,
        )
        report.add_result(result)

    stats = report.compute_stats()
    logger.info(
        "Processed %d Markdown files under %s (%d changed, %d anchors rewritten)",
        stats["files_processed"],
        root,
        stats["files_changed"],
        stats["anchors_rewritten"],
    )
    return report
