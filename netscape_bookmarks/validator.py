"""Semantic comparison of a bookmark tree against a rendered bookmark file."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import Folder, iter_bookmarks
from .parser import parse_bookmark_html

if TYPE_CHECKING:  # pragma: no cover
    from pathlib import Path

    from .models import Item, NetscapeDocument

LOGGER = logging.getLogger(__name__)


def validate_equivalence(original: NetscapeDocument, candidate_path: Path) -> None:
    """Check that the markup at candidate_path parses back to the original tree.

    Cosmetic folder hints are ignored, matching the tree equality rules.
    Raises ValueError naming the folder path of the first difference found.
    """
    candidate = parse_bookmark_html(candidate_path)
    _assert_header(original, candidate)
    difference = first_difference(original.children, candidate.children)
    if difference is not None:
        path, detail = difference
        location = "/".join(path) if path else "top level"
        msg = f"Rendered bookmarks differ from the original at {location!r}: {detail}"
        raise ValueError(msg)
    LOGGER.info(
        "Validation successful: all %d bookmarks accounted for",
        len(iter_bookmarks(original.children)),
    )


def first_difference(
    expected: tuple[Item, ...], found: tuple[Item, ...],
) -> tuple[tuple[str, ...], str] | None:
    """Walk both trees in document order and describe the first mismatch.

    Returns the titles of the enclosing folders and a description, or None
    when the trees are equal.
    """
    stack: list[tuple[tuple[str, ...], tuple[Item, ...], tuple[Item, ...], int]] = [
        ((), expected, found, 0),
    ]
    while stack:
        path, wanted_items, found_items, index = stack.pop()
        if index == len(wanted_items) == len(found_items):
            continue
        if index in (len(wanted_items), len(found_items)):
            return path, f"expected {len(wanted_items)} items, found {len(found_items)}"

        wanted, got = wanted_items[index], found_items[index]
        stack.append((path, wanted_items, found_items, index + 1))
        detail = _describe_mismatch(wanted, got, index)
        if detail is not None:
            return path, detail
        if isinstance(wanted, Folder) and isinstance(got, Folder):
            stack.append(((*path, wanted.title), wanted.children, got.children, 0))
    return None


def _describe_mismatch(wanted: Item, got: Item, index: int) -> str | None:
    position = index + 1
    if isinstance(wanted, Folder) != isinstance(got, Folder):
        kind = "folder" if isinstance(wanted, Folder) else "bookmark"
        return f"item {position} should be a {kind}"
    if isinstance(wanted, Folder):
        if wanted.title != got.title:
            return f"folder {position} expected {wanted.title!r}, found {got.title!r}"
        if wanted.add_date != got.add_date:
            return f"folder {wanted.title!r} expected ADD_DATE {wanted.add_date!r}, found {got.add_date!r}"
        return None
    if wanted.href != got.href:
        return f"bookmark {position} expected {wanted.href!r}, found {got.href!r}"
    if wanted != got:
        return f"bookmark {wanted.href!r} has different title or timestamps"
    return None


def _assert_header(original: NetscapeDocument, candidate: NetscapeDocument) -> None:
    if (original.title, original.h1) != (candidate.title, candidate.h1):
        msg = (
            "Document header mismatch: "
            f"{original.title!r}/{original.h1!r} vs {candidate.title!r}/{candidate.h1!r}"
        )
        raise ValueError(msg)
