"""Read-only query helpers over a parsed bookmark markup tree."""

from __future__ import annotations

from bs4 import Tag


def has_tag(node: object, name: str) -> bool:
    """Return True when the node is an element with the given tag (any case)."""
    return isinstance(node, Tag) and node.name.lower() == name.lower()


def attribute(node: object, name: str) -> str | None:
    """Look up an attribute by name, ignoring case.

    Presence-only attributes such as ``FOLDED`` yield an empty string, so
    callers test presence with ``is not None`` rather than truthiness.
    """
    if not isinstance(node, Tag):
        return None
    wanted = name.lower()
    for key, value in node.attrs.items():
        if key.lower() != wanted:
            continue
        if isinstance(value, list):
            return " ".join(value)
        return value
    return None


def text_content(node: object) -> str:
    """Concatenate every descendant text node in document order."""
    if isinstance(node, Tag):
        return "".join(node.strings)
    return str(node)


def children(node: object) -> list[Tag]:
    """Direct element children of the node."""
    if not isinstance(node, Tag):
        return []
    return [child for child in node.children if isinstance(child, Tag)]


def following_siblings(node: object) -> list[Tag]:
    """Element siblings after the node, excluding the node itself."""
    if not isinstance(node, Tag):
        return []
    return [sibling for sibling in node.next_siblings if isinstance(sibling, Tag)]


def find_first(node: object, name: str) -> Tag | None:
    """First descendant element carrying the tag, or None."""
    if not isinstance(node, Tag):
        return None
    wanted = name.lower()
    for descendant in node.descendants:
        if isinstance(descendant, Tag) and descendant.name.lower() == wanted:
            return descendant
    return None
