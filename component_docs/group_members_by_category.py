"""Logic for partitioning a member table into category groups."""

from collections.abc import Iterable
from dataclasses import dataclass

from component_docs.member import Member


@dataclass(frozen=True)
class CategoryGroup:
    """Members sharing a category label; None marks the unlabeled group."""

    category: str | None
    members: tuple[Member, ...]


def group_members_by_category(members: Iterable[Member]) -> list[CategoryGroup]:
    """Group members by category in first-appearance order.

    Members without a category form a trailing unlabeled group.
    """
    grouped: dict[str, list[Member]] = {}
    unlabeled: list[Member] = []
    for m in members:
        label = m.category_label
        if label is None:
            unlabeled.append(m)
        else:
            grouped.setdefault(label, []).append(m)

    groups = [CategoryGroup(category=k, members=tuple(v)) for k, v in grouped.items()]
    if unlabeled:
        groups.append(CategoryGroup(category=None, members=tuple(unlabeled)))
    return groups
