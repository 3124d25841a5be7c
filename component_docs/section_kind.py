"""Enumeration of documentation page sections in presentation order."""

import re
from enum import Enum

ANCHOR_RE = re.compile(r"[^a-z0-9]+")
SECTION_ANCHOR_PREFIX = "section-"


class SectionKind(Enum):
    """Section kinds. Declaration order is the order sections appear on a page."""

    PROPERTIES = "properties"
    METHODS = "methods"
    FIELDS = "fields"
    EVENTS = "events"
    DERIVED_TYPES = "derived_types"
    SEE_ALSO = "see_also"
    GLOBAL_SETTINGS = "global_settings"
    INHERITANCE = "inheritance"


DEFAULT_SECTION_TITLES: dict[SectionKind, str] = {
    SectionKind.PROPERTIES: "Properties",
    SectionKind.METHODS: "Methods",
    SectionKind.FIELDS: "Fields",
    SectionKind.EVENTS: "Events",
    SectionKind.DERIVED_TYPES: "Derived Types",
    SectionKind.SEE_ALSO: "See Also",
    SectionKind.GLOBAL_SETTINGS: "Global Settings",
    SectionKind.INHERITANCE: "Inheritance",
}


def section_title(kind: SectionKind, overrides: dict[str, str] | None = None) -> str:
    """Return the display title for a section kind.

    ``overrides`` maps kind values (e.g. ``"see_also"``) to custom titles.
    """
    if overrides and overrides.get(kind.value):
        return str(overrides[kind.value])
    return DEFAULT_SECTION_TITLES[kind]


def section_anchor(kind: SectionKind, overrides: dict[str, str] | None = None) -> str:
    """Explicit anchor id of a section heading, e.g. ``section-see-also``.

    The prefix keeps section anchors apart from the slugs of category
    headings, which may reuse a section title.
    """
    slug = ANCHOR_RE.sub("-", section_title(kind, overrides).lower()).strip("-")
    return f"{SECTION_ANCHOR_PREFIX}{slug or kind.value}"
