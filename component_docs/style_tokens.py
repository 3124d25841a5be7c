"""Enumerations for the visual state a component exposes to class composition."""

from enum import Enum


class StyleToken(str, Enum):
    """Base for tokens whose value is the CSS description string."""

    def to_description_string(self) -> str:
        """Return the token as it appears inside class names."""
        return self.value


class Variant(StyleToken):
    TEXT = "text"
    FILLED = "filled"
    OUTLINED = "outlined"


class Color(StyleToken):
    DEFAULT = "default"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    DARK = "dark"
    TRANSPARENT = "transparent"
    INHERIT = "inherit"
    SURFACE = "surface"


class Size(StyleToken):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
