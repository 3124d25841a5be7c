"""Logic for mapping type names to page links."""

from collections.abc import Iterable

from component_docs.link_target import LinkTarget, ResolvedLink
from component_docs.page_path_for_type import page_path_for_type
from component_docs.type_descriptor import TypeDescriptor


def build_link_targets(
    descriptors: Iterable[TypeDescriptor],
    api_root: str,
) -> dict[str, LinkTarget]:
    """Build a map of documented type names to link targets."""
    targets: dict[str, LinkTarget] = {}
    for d in descriptors:
        targets[d.type_name] = LinkTarget(
            title=d.type_name,
            page_path=page_path_for_type(api_root, d.type_name),
        )
    return targets


def resolve_links(
    descriptor: TypeDescriptor,
    targets: dict[str, LinkTarget],
) -> list[ResolvedLink]:
    """Resolve a type's see-also links in order, keeping duplicates.

    Names with no documented page resolve to a link without a target.
    """
    return [
        ResolvedLink(
            type_name=link.target_type_name,
            target=targets.get(link.target_type_name),
        )
        for link in descriptor.links
    ]
