"""Entry point for normalizing Markdown header anchors under a directory."""

from anchor_normalizer.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
