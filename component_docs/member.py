"""Data model for a documented member of a component type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """A property, method, field, event or global setting of a type."""

    name: str
    kind: str  # property/method/field/event/globalSetting
    category: str | None = None
    declaring_type: str | None = None
    summary: str = ""

    @property
    def category_label(self) -> str | None:
        """The category with surrounding whitespace removed, or None if blank."""
        if self.category is None:
            return None
        label = self.category.strip()
        return label or None
