#!/usr/bin/env python3
"""
Build the static HTML entry point.

Produces:
    output_dir/
    └── index.html    # Shell with the initial page (Home active)

Usage:
    python scripts/build_static.py [--output ./dist]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from backend.config import settings
from backend.navigation import initial_state
from backend.pages import PageRenderer


def build(output_dir: Path) -> Path:
    """Render the shell for a fresh session into `output_dir`."""
    renderer = PageRenderer(
        templates_path=settings.templates_path,
        site_owner=settings.site_owner,
        site_title=settings.site_title,
    )

    output_dir.mkdir(parents=True, exist_ok=True)
    index_path = output_dir / "index.html"
    index_path.write_text(renderer.render_shell(initial_state()), encoding="utf-8")
    return index_path


def main():
    parser = argparse.ArgumentParser(description="Build dist/index.html")
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.dist_path,
        help="Output directory (default: %(default)s)",
    )
    args = parser.parse_args()

    index_path = build(args.output)
    print(f"Wrote {index_path}")
    print("Start the server with: python -m backend.main")
    return 0


if __name__ == "__main__":
    sys.exit(main())
