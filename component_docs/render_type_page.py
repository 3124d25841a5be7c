"""Logic for rendering type documentation pages."""

from typing import Any

from component_docs.assemble_sections import assemble_sections
from component_docs.build_link_targets import resolve_links
from component_docs.group_members_by_category import group_members_by_category
from component_docs.link_target import LinkTarget
from component_docs.md_table import md_table
from component_docs.member import Member
from component_docs.section import Section
from component_docs.section_kind import SectionKind, section_anchor, section_title
from component_docs.table_of_contents import table_of_contents
from component_docs.type_descriptor import TypeDescriptor

MEMBER_SECTIONS = {
    SectionKind.PROPERTIES,
    SectionKind.METHODS,
    SectionKind.FIELDS,
    SectionKind.EVENTS,
}


def render_type_page(
    descriptor: TypeDescriptor,
    targets: dict[str, LinkTarget],
    config: dict[str, Any],
    *,
    canonical_path: str | None = None,
) -> str:
    """Render a type page in Markdown from its assembled sections."""
    parts: list[str] = []
    if canonical_path:
        parts += ["---", f"type: {descriptor.type_name}"]
        parts += [f"canonical_path: {canonical_path}", "---", ""]

    parts += [f"# {descriptor.type_name}", ""]
    if descriptor.summary:
        parts += [descriptor.summary, ""]

    titles = config.get("section_titles") or {}
    sections = assemble_sections(descriptor)
    if len(sections) > 1:
        for title, anchor in table_of_contents(sections, titles):
            parts.append(f"- [{title}](#{anchor})")
        parts.append("")

    for section in sections:
        parts.append(f'<a id="{section_anchor(section.kind, titles)}"></a>')
        parts += [f"## {section_title(section.kind, titles)}", ""]
        parts.extend(_render_section(section, descriptor, targets, config))

    return "\n".join(parts).rstrip() + "\n"


def _render_section(
    section: Section,
    descriptor: TypeDescriptor,
    targets: dict[str, LinkTarget],
    config: dict[str, Any],
) -> list[str]:
    if section.kind in MEMBER_SECTIONS:
        return _render_member_groups(
            section.content,  # type: ignore[arg-type]
            descriptor.type_name,
        )
    if section.kind is SectionKind.GLOBAL_SETTINGS:
        return _render_member_table(
            section.content,  # type: ignore[arg-type]
            descriptor.type_name,
        )
    if section.kind is SectionKind.DERIVED_TYPES:
        return _render_derived(section.content, targets)  # type: ignore[arg-type]
    if section.kind is SectionKind.SEE_ALSO:
        return _render_see_also(descriptor, targets)
    return _render_inheritance(
        section.content,  # type: ignore[arg-type]
        targets,
        config,
    )


def _render_member_groups(members: tuple[Member, ...], owner: str) -> list[str]:
    """Render one table per category group; the unlabeled group goes last."""
    parts = []
    for group in group_members_by_category(members):
        if group.category is not None:
            parts += [f"### {group.category}", ""]
        parts.extend(_render_member_table(group.members, owner))
    return parts


def _render_member_table(members: tuple[Member, ...], owner: str) -> list[str]:
    """Render members as a table; members declared by an ancestor name it."""
    rows = []
    for m in members:
        declared_in = m.declaring_type if m.declaring_type != owner else ""
        rows.append([f"`{m.name}`", m.summary, declared_in or ""])
    return [md_table(["Name", "Description", "Declared In"], rows), ""]


def _render_derived(
    children: tuple[TypeDescriptor, ...],
    targets: dict[str, LinkTarget],
) -> list[str]:
    rows = [[_link(c.type_name, targets), c.summary] for c in children]
    return [md_table(["Type", "Summary"], rows), ""]


def _render_see_also(
    descriptor: TypeDescriptor,
    targets: dict[str, LinkTarget],
) -> list[str]:
    parts = []
    for link in resolve_links(descriptor, targets):
        if link.target:
            parts.append(f"- [{link.target.title}]({link.target.page_path})")
        else:
            parts.append(f"- `{link.type_name}`")
    parts.append("")
    return parts


def _render_inheritance(
    chain: tuple[str, ...],
    targets: dict[str, LinkTarget],
    config: dict[str, Any],
) -> list[str]:
    arrow = str(config.get("arrow") or " → ")
    # The last entry is the type itself and is not linked.
    rendered = [_link(name, targets) for name in chain[:-1]]
    rendered.extend(chain[-1:])
    return [arrow.join(rendered), ""]


def _link(type_name: str, targets: dict[str, LinkTarget]) -> str:
    t = targets.get(type_name)
    return f"[{t.title}]({t.page_path})" if t else f"`{type_name}`"

