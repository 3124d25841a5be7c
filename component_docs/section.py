"""Data model for one block of a documentation page."""

from dataclasses import dataclass

from component_docs.section_kind import SectionKind, section_anchor, section_title


@dataclass(frozen=True)
class Section:
    """A non-empty section of a type page and the data it displays.

    ``content`` holds members, child descriptors, links or the inheritance
    chain depending on ``kind``.
    """

    kind: SectionKind
    content: tuple[object, ...]

    @property
    def title(self) -> str:
        return section_title(self.kind)

    @property
    def anchor(self) -> str:
        return section_anchor(self.kind)
