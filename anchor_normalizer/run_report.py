"""Summary report for a normalization run."""

import json
import time
from pathlib import Path
from typing import Any

from anchor_normalizer.file_result import FileResult


class RunReport:
    """Collects per-file results and renders them as JSON."""

    def __init__(self, root: Path, *, dry_run: bool = False) -> None:
        """Initialize an empty report for the given root."""
        self.root = root
        self.dry_run = dry_run
        self.results: list[FileResult] = []
        self.start_time = time.time()

    def add_result(self, result: FileResult) -> None:
        """Record the outcome of one file."""
        self.results.append(result)

    @property
    def processed(self) -> list[FileResult]:
        """Results of the files that were actually normalized."""
        return [r for r in self.results if not r.skipped]

    def compute_stats(self) -> dict[str, Any]:
        """Aggregate totals over all results."""
        processed = self.processed
        return {
            "files_processed": len(processed),
            "files_skipped": len(self.results) - len(processed),
            "files_changed": sum(1 for r in processed if r.changed),
            "anchors_rewritten": sum(r.rewritten for r in processed),
        }

    def generate_report(self, path: str) -> None:
        """Write the report as JSON to path."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "root": str(self.root),
                "dry_run": self.dry_run,
                "total_files": len(self.results),
            },
            "results": [
                {
                    "path": str(r.path),
                    "headers": r.headers,
                    "rewritten": r.rewritten,
                    "changed": r.changed,
                }
                for r in self.processed
            ],
            "stats": self.compute_stats(),
        }
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")
