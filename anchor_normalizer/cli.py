"""Normalize Hugo ref anchors in Markdown files to GitHub-style header slugs.

Walks a directory tree and rewrites links of the form
``[Header]({{< ref "#anything" >}})`` so that the fragment matches the slug of
the ``Header`` section on the same page. Files are modified in place.
"""

import argparse
import logging
from pathlib import Path

from anchor_normalizer.load_config import load_config
from anchor_normalizer.normalize_tree import normalize_tree

logger = logging.getLogger(__name__)


def run_normalizer(args: argparse.Namespace) -> int:
    """Execute the normalization and report the outcome."""
    config = load_config(args.config)
    try:
        report = normalize_tree(args.root, config, dry_run=args.dry_run)
    except (OSError, UnicodeDecodeError):
        logger.exception("Aborting: failed to normalize anchors under %s", args.root)
        return 1

    if args.report:
        report.generate_report(args.report)
        print(f"Report generated at {args.report}")

    stats = report.compute_stats()
    verb = "Would rewrite" if args.dry_run else "Rewrote"
    print(
        f"{verb} {stats['anchors_rewritten']} anchors in "
        f"{stats['files_changed']}/{stats['files_processed']} Markdown files "
        f"under: {args.root}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the anchor normalizer."""
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument(
        "root",
        type=Path,
        help="Directory (or single file) to traverse recursively",
    )
    ap.add_argument(
        "--config",
        help="Path to YAML configuration file",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Analyze and report without writing files",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON report of the run to this path",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every processed file",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_normalizer(args)


if __name__ == "__main__":
    raise SystemExit(main())
