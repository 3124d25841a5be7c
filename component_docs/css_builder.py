"""Fluent builder for conditional CSS class strings."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from component_docs.class_fragment import ClassFragment
from component_docs.compose_classes import compose_classes

Condition = bool | Callable[[], bool]


class CssBuilder:
    """Collect class fragments in declaration order and build the final string.

    Conditions may be plain booleans or zero-argument callables; callables
    are evaluated when ``build`` runs, so derived state is always read fresh.
    """

    def __init__(self, base: str | None = None) -> None:
        self._entries: list[tuple[str | None, Condition]] = []
        if base:
            self._entries.append((base, True))

    def add_class(self, value: str | None, when: Condition = True) -> CssBuilder:
        """Append a fragment that is included only when ``when`` holds."""
        self._entries.append((value, when))
        return self

    def add_classes(self, values: Iterable[str | None]) -> CssBuilder:
        """Append several unconditional fragments."""
        for value in values:
            self.add_class(value)
        return self

    def fragments(self) -> list[ClassFragment]:
        """Evaluate the pending conditions into concrete fragments."""
        return [
            ClassFragment(value=value, condition=_evaluate(when))
            for value, when in self._entries
        ]

    def build(self) -> str:
        """Compose the collected fragments into a single class string."""
        return compose_classes(self.fragments())


def _evaluate(when: Condition) -> bool:
    if callable(when):
        return bool(when())
    return bool(when)
