"""Logic for writing type pages to disk."""

import logging
from pathlib import Path
from typing import Any

from component_docs.descriptor_index import DescriptorIndex
from component_docs.link_target import LinkTarget
from component_docs.page_path_for_type import page_path_for_type
from component_docs.render_not_found_page import render_not_found_page
from component_docs.render_type_page import render_type_page

logger = logging.getLogger(__name__)


def write_type_pages(
    index: DescriptorIndex,
    targets: dict[str, LinkTarget],
    config: dict[str, Any],
    out_root: Path,
) -> int:
    """Write a page for every documented type and return the page count."""
    written = 0
    total = len(index)
    print(f"Writing {total} type pages...")
    for d in index:
        page_path = page_path_for_type(config["api_root"], d.type_name)
        md = render_type_page(d, targets, config, canonical_path=page_path)
        _page_file(out_root, page_path).write_text(md, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} types")
    return written


def write_single_page(
    index: DescriptorIndex,
    targets: dict[str, LinkTarget],
    config: dict[str, Any],
    out_root: Path,
    type_name: str,
) -> bool:
    """Write the page for one type name.

    Returns False when the name does not resolve; a not-found page is
    written in its place.
    """
    api_root = config["api_root"]
    page_path = page_path_for_type(api_root, type_name)
    descriptor = index.resolve(type_name)
    if descriptor is None:
        md = render_not_found_page(type_name, api_root)
    else:
        md = render_type_page(descriptor, targets, config, canonical_path=page_path)
    _page_file(out_root, page_path).write_text(md, encoding="utf-8")
    logger.info("Wrote %s", page_path)
    return descriptor is not None


def _page_file(out_root: Path, page_path: str) -> Path:
    # /api/Button -> out_root/api/Button.md
    target = out_root.joinpath(*page_path.strip("/").split("/")).with_suffix(".md")
    target.parent.mkdir(parents=True, exist_ok=True)
    return target
