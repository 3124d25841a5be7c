"""Logic for selecting the sections shown on a type page."""

from component_docs.inheritance_chain import (
    inheritance_chain,
    participates_in_inheritance,
)
from component_docs.section import Section
from component_docs.section_kind import SectionKind
from component_docs.type_descriptor import TypeDescriptor


def assemble_sections(descriptor: TypeDescriptor) -> list[Section]:
    """Return the non-empty sections of a type page in presentation order.

    Member sequences are passed through in source order. Children are not
    recursed into and see-also links keep their duplicates.
    """
    candidates: list[tuple[SectionKind, tuple[object, ...], bool]] = [
        (SectionKind.PROPERTIES, descriptor.properties, bool(descriptor.properties)),
        (SectionKind.METHODS, descriptor.methods, bool(descriptor.methods)),
        (SectionKind.FIELDS, descriptor.fields, bool(descriptor.fields)),
        (SectionKind.EVENTS, descriptor.events, bool(descriptor.events)),
        (SectionKind.DERIVED_TYPES, descriptor.children, bool(descriptor.children)),
        (SectionKind.SEE_ALSO, descriptor.links, bool(descriptor.links)),
        (
            SectionKind.GLOBAL_SETTINGS,
            descriptor.global_settings,
            bool(descriptor.global_settings),
        ),
        (
            SectionKind.INHERITANCE,
            tuple(inheritance_chain(descriptor)),
            participates_in_inheritance(descriptor),
        ),
    ]
    return [
        Section(kind=kind, content=tuple(content))
        for kind, content, include in candidates
        if include
    ]
