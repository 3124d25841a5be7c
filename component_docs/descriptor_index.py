"""Lookup of type descriptors by name."""

import logging
from collections.abc import Iterable

from component_docs.type_descriptor import TypeDescriptor

logger = logging.getLogger(__name__)


class DescriptorIndex:
    def __init__(self, descriptors: Iterable[TypeDescriptor]):
        self.name_to_descriptor: dict[str, TypeDescriptor] = {}
        for d in descriptors:
            if d.type_name in self.name_to_descriptor:
                logger.warning(
                    "Duplicate descriptor for %s; keeping the first", d.type_name
                )
                continue
            self.name_to_descriptor[d.type_name] = d

    def __len__(self) -> int:
        return len(self.name_to_descriptor)

    def __iter__(self):
        return iter(self.name_to_descriptor.values())

    def resolve(self, type_name: str) -> TypeDescriptor | None:
        """Returns the descriptor for a type name, or None when it is not documented."""
        descriptor = self.name_to_descriptor.get(type_name)
        if descriptor is None:
            logger.info("No descriptor found for %s", type_name)
        return descriptor

    def get_base_type(self, type_name: str) -> str | None:
        """Returns the name of the immediate base type."""
        descriptor = self.name_to_descriptor.get(type_name)
        if not descriptor or not descriptor.base_chain:
            return None
        # base_chain runs from the root to the immediate base.
        return descriptor.base_chain[-1]

    def derived_types(self, type_name: str) -> list[str]:
        """Returns the names of the direct known subtypes."""
        descriptor = self.name_to_descriptor.get(type_name)
        if not descriptor:
            return []
        return [c.type_name for c in descriptor.children]
