"""Data model for a cross-reference to another type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeeAlsoLink:
    """A name-based reference to a related type."""

    target_type_name: str
