"""Data models for cross-reference link targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkTarget:
    """Where a type name links to."""

    title: str
    page_path: str  # Wiki path, e.g. /api/Button


@dataclass(frozen=True)
class ResolvedLink:
    """A see-also reference after lookup; ``target`` is None when unresolved."""

    type_name: str
    target: LinkTarget | None
