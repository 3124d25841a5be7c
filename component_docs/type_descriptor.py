"""Data model for the metadata of one documented component type."""

from __future__ import annotations

from dataclasses import dataclass

from component_docs.member import Member
from component_docs.see_also_link import SeeAlsoLink


@dataclass(frozen=True)
class TypeDescriptor:
    """Metadata record for one documented component type.

    ``base_chain`` lists ancestor names root-first, the immediate base last.
    ``children`` reference the shared descriptor nodes of direct subtypes.
    """

    type_name: str
    properties: tuple[Member, ...] = ()
    methods: tuple[Member, ...] = ()
    fields: tuple[Member, ...] = ()
    events: tuple[Member, ...] = ()
    global_settings: tuple[Member, ...] = ()
    children: tuple[TypeDescriptor, ...] = ()
    links: tuple[SeeAlsoLink, ...] = ()
    base_chain: tuple[str, ...] = ()
    summary: str = ""
