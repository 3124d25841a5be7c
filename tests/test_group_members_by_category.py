"""Tests for category grouping of member tables."""

from component_docs.group_members_by_category import group_members_by_category
from component_docs.member import Member


def prop(name: str, category: str | None) -> Member:
    """Create a property member for testing."""
    return Member(name=name, kind="property", category=category)


def test_first_appearance_order() -> None:
    """Verify groups follow the first appearance of each category."""
    members = [
        prop("Color", "Appearance"),
        prop("Href", "Behavior"),
        prop("Size", "Appearance"),
    ]
    groups = group_members_by_category(members)
    assert [g.category for g in groups] == ["Appearance", "Behavior"]
    assert [m.name for m in groups[0].members] == ["Color", "Size"]
    assert [m.name for m in groups[1].members] == ["Href"]


def test_not_alphabetical() -> None:
    """Verify categories are not sorted."""
    groups = group_members_by_category(
        [prop("A", "Behavior"), prop("B", "Appearance")]
    )
    assert [g.category for g in groups] == ["Behavior", "Appearance"]


def test_uncategorized_members_trail() -> None:
    """Verify members without a category form the last, unlabeled group."""
    members = [
        prop("Loose", None),
        prop("Color", "Appearance"),
        prop("Blank", "  "),
        prop("Href", "Behavior"),
    ]
    groups = group_members_by_category(members)
    assert [g.category for g in groups] == ["Appearance", "Behavior", None]
    assert [m.name for m in groups[-1].members] == ["Loose", "Blank"]


def test_no_members() -> None:
    """Verify an empty member list yields no groups."""
    assert group_members_by_category([]) == []
