"""Logic for building the table of contents of a type page."""

from collections.abc import Iterable

from component_docs.section import Section
from component_docs.section_kind import section_anchor, section_title


def table_of_contents(
    sections: Iterable[Section],
    titles: dict[str, str] | None = None,
) -> list[tuple[str, str]]:
    """Return ``(title, anchor)`` navigation entries for the given sections."""
    return [
        (section_title(s.kind, titles), section_anchor(s.kind, titles))
        for s in sections
    ]
