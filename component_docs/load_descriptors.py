"""Logic for loading type descriptor tables from YAML files."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from component_docs.member import Member
from component_docs.see_also_link import SeeAlsoLink
from component_docs.type_descriptor import TypeDescriptor

logger = logging.getLogger(__name__)

YAML_MIME_PREFIX = "### YamlMime:"

# YAML key -> (descriptor field, member kind)
MEMBER_SECTIONS: dict[str, tuple[str, str]] = {
    "properties": ("properties", "property"),
    "methods": ("methods", "method"),
    "fields": ("fields", "field"),
    "events": ("events", "event"),
    "globalSettings": ("global_settings", "globalSetting"),
}


def load_descriptor_table(path: Path) -> list[dict[str, Any]]:
    """Load the raw ``types`` entries of one descriptor table."""
    doc = yaml.safe_load(_strip_mime_header(path.read_text(encoding="utf-8")))
    if not isinstance(doc, dict):
        return []
    entries = []
    for it in doc.get("types") or []:
        if isinstance(it, dict) and it.get("name"):
            entries.append(it)
        else:
            logger.warning("Skipping malformed type entry in %s: %r", path, it)
    return entries


def load_descriptors(paths: Iterable[Path]) -> list[TypeDescriptor]:
    """Load descriptor tables and link children to their shared descriptors.

    Children referenced by name but not described in any table become
    name-only descriptors.
    """
    raw_entries: list[dict[str, Any]] = []
    for p in paths:
        raw_entries.extend(load_descriptor_table(p))

    shallow: dict[str, TypeDescriptor] = {}
    child_names: dict[str, list[str]] = {}
    for it in raw_entries:
        d = _descriptor_from_entry(it)
        if d.type_name in shallow:
            logger.warning("Duplicate type %s; keeping the first", d.type_name)
            continue
        shallow[d.type_name] = d
        child_names[d.type_name] = [
            _name_of(c) for c in (it.get("children") or []) if _name_of(c)
        ]

    return _link_children(shallow, child_names)


def _descriptor_from_entry(it: dict[str, Any]) -> TypeDescriptor:
    type_name = _text(it.get("name"))
    members: dict[str, tuple[Member, ...]] = {}
    for key, (field_name, kind) in MEMBER_SECTIONS.items():
        members[field_name] = tuple(
            _member_from_entry(m, kind, type_name)
            for m in (it.get(key) or [])
            if isinstance(m, dict | str)
        )
    links = tuple(
        SeeAlsoLink(target_type_name=_name_of(x))
        for x in (it.get("links") or it.get("seeAlso") or [])
        if _name_of(x)
    )
    base_chain = tuple(
        _name_of(x) for x in (it.get("baseChain") or []) if _name_of(x)
    )
    return TypeDescriptor(
        type_name=type_name,
        links=links,
        base_chain=base_chain,
        summary=_text(it.get("summary")),
        **members,
    )


def _member_from_entry(m: dict[str, Any] | str, kind: str, owner: str) -> Member:
    if isinstance(m, str):
        return Member(name=m, kind=kind, declaring_type=owner)
    category = m.get("category")
    return Member(
        name=_text(m.get("name")),
        kind=kind,
        category=str(category) if category is not None else None,
        declaring_type=_text(m.get("declaringType")) or owner,
        summary=_text(m.get("summary")),
    )


def _name_of(x: object) -> str:
    if isinstance(x, dict):
        return _text(x.get("name") or x.get("target"))
    return _text(x)


def _link_children(
    shallow: dict[str, TypeDescriptor],
    child_names: dict[str, list[str]],
) -> list[TypeDescriptor]:
    """Rebuild descriptors bottom-up so children reference the final nodes."""
    done: dict[str, TypeDescriptor] = {}
    in_progress: set[str] = set()

    def build(name: str) -> TypeDescriptor:
        if name in done:
            return done[name]
        if name not in shallow:
            # Undocumented subtype: keep the name only.
            done[name] = TypeDescriptor(type_name=name)
            return done[name]
        if name in in_progress:
            logger.warning("Cyclic children detected at %s", name)
            return shallow[name]
        in_progress.add(name)
        children = tuple(build(c) for c in child_names.get(name, []))
        in_progress.discard(name)
        done[name] = dataclasses.replace(shallow[name], children=children)
        return done[name]

    return [build(name) for name in shallow]


def _strip_mime_header(text: str) -> str:
    first, _, rest = text.partition("\n")
    if first.startswith(YAML_MIME_PREFIX):
        return rest.lstrip("\n")
    return text


def _text(v: object) -> str:
    """Plain text of a YAML value; lists are joined line by line."""
    if v is None:
        return ""
    if isinstance(v, list):
        return "\n".join(t for t in map(_text, v) if t)
    return str(v).strip()
