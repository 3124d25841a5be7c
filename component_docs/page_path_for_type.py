"""Utility for determining the page path of a documented type."""

import re

PAGE_NAME_RE = re.compile(r"[^A-Za-z0-9_]+")


def page_path_for_type(api_root: str, type_name: str) -> str:
    """Generate the wiki page path for a type name.

    ``Button`` maps to ``/api/Button``; generic names such as ``List<T>``
    or ``List`1`` map to ``/api/List-T`` and ``/api/List1``.
    """
    name = PAGE_NAME_RE.sub("-", type_name.replace("`", "")).strip("-")
    return f"{api_root.rstrip('/')}/{name or 'Unknown'}"
