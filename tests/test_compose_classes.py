"""Tests for conditional class composition."""

from component_docs.class_fragment import ClassFragment
from component_docs.compose_classes import compose_classes
from component_docs.css_builder import CssBuilder


def test_compose_empty() -> None:
    """Verify that no fragments produce an empty string."""
    assert compose_classes([]) == ""


def test_compose_drops_false_conditions() -> None:
    """Verify that a fragment with a false condition never contributes."""
    fragments = [
        ClassFragment("a"),
        ClassFragment("b c", condition=False),
        ClassFragment("d"),
    ]
    assert compose_classes(fragments) == "a d"


def test_compose_drops_blank_and_none_values() -> None:
    """Verify that empty, whitespace-only and None values are ignored."""
    fragments = [
        ClassFragment(""),
        ClassFragment("   "),
        ClassFragment(None),
        ClassFragment(" x "),
    ]
    assert compose_classes(fragments) == "x"


def test_compose_first_occurrence_wins() -> None:
    """Verify deduplication keeps the position of the first occurrence."""
    fragments = [
        ClassFragment("a b"),
        ClassFragment("c a"),
        ClassFragment("b\td\n"),
    ]
    assert compose_classes(fragments) == "a b c d"


def test_compose_excluded_fragment_does_not_reserve_position() -> None:
    """Verify a token in an excluded fragment can appear later."""
    fragments = [ClassFragment("late", condition=False), ClassFragment("a late")]
    assert compose_classes(fragments) == "a late"


def test_css_builder_fluent_chain() -> None:
    """Verify the builder composes fragments in declaration order."""
    built = (
        CssBuilder("root base")
        .add_class("on", when=True)
        .add_class("off", when=False)
        .add_class(None)
        .add_classes(["base", "extra"])
        .build()
    )
    assert built == "root base on extra"


def test_css_builder_evaluates_callables_at_build_time() -> None:
    """Verify callable conditions are read when build runs."""
    state = {"flag": False}
    builder = CssBuilder().add_class("flagged", lambda: state["flag"])
    assert builder.build() == ""
    state["flag"] = True
    assert builder.build() == "flagged"


def test_css_builder_fragments() -> None:
    """Verify the builder exposes its evaluated fragments."""
    frags = CssBuilder("a").add_class("b", when=False).fragments()
    assert frags == [ClassFragment("a", True), ClassFragment("b", False)]
