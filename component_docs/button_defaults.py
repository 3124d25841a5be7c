"""Global default values applied to buttons that do not set their own."""

from dataclasses import dataclass
from typing import Any

from component_docs.style_tokens import Color, Size, Variant


@dataclass(frozen=True)
class ButtonDefaults:
    """Default variant, color and size for buttons."""

    variant: Variant = Variant.TEXT
    color: Color = Color.DEFAULT
    size: Size = Size.MEDIUM

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ButtonDefaults":
        """Build defaults from the ``button_defaults`` configuration block.

        Unknown token names raise ``ValueError`` from the enum lookup.
        """
        block = config.get("button_defaults") or {}
        return cls(
            variant=Variant(str(block.get("variant", cls.variant.value)).lower()),
            color=Color(str(block.get("color", cls.color.value)).lower()),
            size=Size(str(block.get("size", cls.size.value)).lower()),
        )
