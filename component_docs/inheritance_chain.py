"""Logic for deriving the inheritance chain of a type."""

from component_docs.type_descriptor import TypeDescriptor


def participates_in_inheritance(descriptor: TypeDescriptor) -> bool:
    """A type participates when it has an ancestor or a known subtype."""
    return bool(descriptor.base_chain) or bool(descriptor.children)


def inheritance_chain(descriptor: TypeDescriptor) -> list[str]:
    """Return ancestor names root-first followed by the type itself.

    Types that do not participate in inheritance get an empty chain.
    """
    if not participates_in_inheritance(descriptor):
        return []
    return [*descriptor.base_chain, descriptor.type_name]
