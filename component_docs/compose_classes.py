"""Logic for composing a class attribute from conditional fragments."""

from collections.abc import Iterable

from component_docs.class_fragment import ClassFragment


def compose_classes(fragments: Iterable[ClassFragment]) -> str:
    """Join the included fragments into a deduplicated class string.

    A fragment contributes its whitespace-separated tokens only when its
    condition holds. The first occurrence of a token fixes its position;
    later repeats are dropped.
    """
    seen: set[str] = set()
    tokens: list[str] = []
    for fragment in fragments:
        if not fragment.condition or not fragment.value:
            continue
        for token in str(fragment.value).split():
            if token not in seen:
                seen.add(token)
                tokens.append(token)
    return " ".join(tokens)
