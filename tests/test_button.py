"""Tests for button class names and button group full width handling."""

import pytest

from component_docs.button import Button
from component_docs.button_defaults import ButtonDefaults
from component_docs.button_group import ButtonGroup
from component_docs.button_style import ButtonStyle
from component_docs.style_tokens import Color, Size, Variant


def test_default_classname() -> None:
    """Verify the class string of a button with default state."""
    button = Button(ButtonStyle())
    assert button.classname == (
        "mud-button-root mud-button mud-button-text mud-button-text-default "
        "mud-button-text-size-medium mud-ripple"
    )


def test_classname_with_state_and_override() -> None:
    """Verify state-dependent fragments and the caller's class come last."""
    style = ButtonStyle(
        variant=Variant.FILLED,
        color=Color.PRIMARY,
        size=Size.LARGE,
        ripple=False,
        drop_shadow=False,
        full_width=True,
        class_name="my-btn mud-button",
    )
    assert Button(style).classname == (
        "mud-button-root mud-button mud-button-filled mud-button-filled-primary "
        "mud-button-filled-size-large mud-width-full "
        "mud-button-disable-elevation my-btn"
    )


def test_icon_classes_fall_back_to_size() -> None:
    """Verify icon size defaults to the button size."""
    button = Button(ButtonStyle(size=Size.SMALL, icon_class="icon-x"))
    assert button.start_icon_class == (
        "mud-button-icon-start mud-button-icon-size-small icon-x"
    )
    assert button.end_icon_class == (
        "mud-button-icon-end mud-button-icon-size-small icon-x"
    )


def test_icon_size_overrides_size() -> None:
    """Verify an explicit icon size wins over the button size."""
    button = Button(ButtonStyle(size=Size.SMALL, icon_size=Size.LARGE))
    assert button.start_icon_class == "mud-button-icon-start mud-button-icon-size-large"


def test_full_width_outside_group() -> None:
    """Verify a button without a group only uses its own flag."""
    assert not Button(ButtonStyle()).real_full_width()
    assert Button(ButtonStyle(full_width=True)).real_full_width()


def test_full_width_inherited_from_group() -> None:
    """Verify buttons stretch when the group does and no sibling stretches."""
    group = ButtonGroup(full_width=True)
    a = Button(ButtonStyle(), group)
    b = Button(ButtonStyle(), group)
    assert a.real_full_width()
    assert b.real_full_width()
    assert "mud-width-full" in a.classname.split()


def test_stretched_sibling_disables_group_full_width() -> None:
    """Verify only the explicitly stretched button stretches."""
    group = ButtonGroup(full_width=True)
    plain = Button(ButtonStyle(), group)
    stretched = Button(ButtonStyle(full_width=True), group)
    assert not plain.real_full_width()
    assert stretched.real_full_width()

    stretched.dispose()
    assert plain.real_full_width()


def test_group_not_full_width() -> None:
    """Verify a non-stretched group does not stretch its buttons."""
    group = ButtonGroup(full_width=False)
    assert not Button(ButtonStyle(), group).real_full_width()


def test_group_registration_lifecycle() -> None:
    """Verify buttons register on creation and deregister on dispose."""
    group = ButtonGroup()
    with Button(ButtonStyle(), group) as a:
        b = Button(ButtonStyle(), group)
        assert group.buttons == (a, b)
    assert group.buttons == (b,)
    b.dispose()
    b.dispose()
    assert group.buttons == ()


def test_group_add_is_idempotent() -> None:
    """Verify registering the same button twice keeps one entry."""
    group = ButtonGroup()
    a = Button(ButtonStyle(), group)
    group.add_button(a)
    assert group.buttons == (a,)


def test_button_defaults_from_config() -> None:
    """Verify defaults are read from configuration and fill unset state."""
    defaults = ButtonDefaults.from_config(
        {"button_defaults": {"variant": "Outlined", "color": "primary"}}
    )
    assert defaults == ButtonDefaults(Variant.OUTLINED, Color.PRIMARY, Size.MEDIUM)

    style = ButtonStyle.with_defaults(defaults, size=Size.SMALL, ripple=False)
    assert style.variant is Variant.OUTLINED
    assert style.color is Color.PRIMARY
    assert style.size is Size.SMALL
    assert style.ripple is False


def test_button_defaults_reject_unknown_token() -> None:
    """Verify an unknown token name in configuration is rejected."""
    with pytest.raises(ValueError):
        ButtonDefaults.from_config({"button_defaults": {"size": "huge"}})


def test_disposed_button_leaves_group_full_width() -> None:
    """Verify a disposed button no longer stretches with its former group."""
    group = ButtonGroup(full_width=True)
    button = Button(ButtonStyle(), group)
    assert button.real_full_width()

    button.dispose()
    assert button not in group.buttons
    assert button.group is None
    assert not button.real_full_width()
    assert "mud-width-full" not in button.classname.split()


def test_style_defaults_come_from_button_defaults() -> None:
    """Verify unset style state matches the global button defaults."""
    style = ButtonStyle()
    defaults = ButtonDefaults()
    assert (style.variant, style.color, style.size) == (
        defaults.variant,
        defaults.color,
        defaults.size,
    )
