"""A button whose class attributes are composed from its style state."""

from __future__ import annotations

from types import TracebackType

from component_docs.button_group import ButtonGroup
from component_docs.button_style import ButtonStyle
from component_docs.css_builder import CssBuilder


class Button:
    """Button for actions, links and commands.

    When created with a ``group`` the button registers itself there and
    stays registered until ``dispose`` is called.
    """

    def __init__(self, style: ButtonStyle, group: ButtonGroup | None = None) -> None:
        self.style = style
        self.group = group
        if group is not None:
            group.add_button(self)

    def dispose(self) -> None:
        """Detach from the owning group; the button is no longer a member."""
        if self.group is not None:
            self.group.remove_button(self)
            self.group = None

    def __enter__(self) -> Button:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()

    def real_full_width(self) -> bool:
        """Whether the button stretches to the container width.

        A button in a full width group stretches when no sibling is
        stretched on its own. Sibling membership can change between calls,
        so this is never cached.
        """
        if self.style.full_width:
            return True
        group = self.group
        return (
            group is not None
            and group.full_width
            and group.none_button_is_stretched()
        )

    @property
    def classname(self) -> str:
        s = self.style
        variant = s.variant.to_description_string()
        return (
            CssBuilder("mud-button-root mud-button")
            .add_class(f"mud-button-{variant}")
            .add_class(f"mud-button-{variant}-{s.color.to_description_string()}")
            .add_class(f"mud-button-{variant}-size-{s.size.to_description_string()}")
            .add_class("mud-width-full", self.real_full_width)
            .add_class("mud-ripple", s.ripple)
            .add_class("mud-button-disable-elevation", not s.drop_shadow)
            .add_class(s.class_name)
            .build()
        )

    @property
    def start_icon_class(self) -> str:
        return self._icon_class("mud-button-icon-start")

    @property
    def end_icon_class(self) -> str:
        return self._icon_class("mud-button-icon-end")

    def _icon_class(self, base: str) -> str:
        size = self.style.effective_icon_size.to_description_string()
        return (
            CssBuilder(base)
            .add_class(f"mud-button-icon-size-{size}")
            .add_class(self.style.icon_class)
            .build()
        )
