"""The read-only style state a button supplies to class composition."""

from dataclasses import dataclass

from component_docs.button_defaults import ButtonDefaults
from component_docs.style_tokens import Color, Size, Variant

GLOBAL_DEFAULTS = ButtonDefaults()


@dataclass(frozen=True)
class ButtonStyle:
    """Visual state of a single button."""

    variant: Variant = GLOBAL_DEFAULTS.variant
    color: Color = GLOBAL_DEFAULTS.color
    size: Size = GLOBAL_DEFAULTS.size
    icon_size: Size | None = None  # falls back to size
    icon_color: Color = Color.INHERIT
    full_width: bool = False
    ripple: bool = True
    drop_shadow: bool = True
    class_name: str | None = None
    icon_class: str | None = None

    @classmethod
    def with_defaults(
        cls,
        defaults: ButtonDefaults,
        *,
        variant: Variant | None = None,
        color: Color | None = None,
        size: Size | None = None,
        **kwargs: object,
    ) -> "ButtonStyle":
        """Create a style, filling unset variant/color/size from ``defaults``."""
        return cls(
            variant=variant or defaults.variant,
            color=color or defaults.color,
            size=size or defaults.size,
            **kwargs,  # type: ignore[arg-type]
        )

    @property
    def effective_icon_size(self) -> Size:
        return self.icon_size or self.size
