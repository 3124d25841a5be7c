"""Data model for a conditional CSS class fragment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassFragment:
    """One (condition, class string) pair considered during class composition."""

    value: str | None
    condition: bool = True
