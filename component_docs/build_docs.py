"""Build Markdown API reference pages for UI component types.

Reads descriptor tables (YAML files with a top-level ``types`` list)
produced by a metadata extraction step and writes one page per type.
"""

import argparse
import logging
from pathlib import Path

from component_docs.run_build import run_build


def main(argv: list[str] | None = None) -> int:
    """Run the documentation build."""
    ap = argparse.ArgumentParser(
        description="Render component API reference pages from descriptor tables.",
    )
    ap.add_argument(
        "descriptor_dir",
        type=Path,
        help="Directory containing descriptor *.yml files",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated Markdown pages",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--api-root",
        help="Wiki path root for generated pages (default from config: /api)",
    )
    ap.add_argument(
        "--type",
        help="Only render the page for this type name",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress details",
    )
    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    return run_build(args)


if __name__ == "__main__":
    raise SystemExit(main())
