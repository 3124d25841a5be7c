"""Orchestration logic for building component reference pages."""

import argparse
import logging

from component_docs.build_link_targets import build_link_targets
from component_docs.descriptor_index import DescriptorIndex
from component_docs.load_config import load_config
from component_docs.load_descriptors import load_descriptors
from component_docs.write_type_pages import write_single_page, write_type_pages

logger = logging.getLogger(__name__)


def run_build(args: argparse.Namespace) -> int:
    """Execute the full documentation build."""
    yml_files = sorted(args.descriptor_dir.rglob("*.yml"))
    if not yml_files:
        msg = f"No .yml files found under: {args.descriptor_dir}"
        raise SystemExit(msg)

    config = load_config(args.config)
    if args.api_root:
        config["api_root"] = args.api_root

    index = DescriptorIndex(load_descriptors(yml_files))
    logger.info("Loaded %d descriptors from %d files", len(index), len(yml_files))
    targets = build_link_targets(index, config["api_root"])

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)

    if args.type:
        if not write_single_page(index, targets, config, out_root, args.type):
            print(f"Type not found: {args.type}")
            return 1
        print(f"Generated page for {args.type} into: {out_root}")
        return 0

    written = write_type_pages(index, targets, config, out_root)
    print(f"Generated {written} Markdown pages into: {out_root}")
    return 0
