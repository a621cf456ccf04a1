"""Parse a Netscape bookmark export into a typed folder/bookmark tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup

from . import dom
from .config import DEFAULT_ENCODING, PARSER_FEATURES
from .models import Bookmark, Folder, Item, NetscapeDocument, iter_bookmarks

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator

    from bs4 import Tag

LOGGER = logging.getLogger(__name__)


class BookmarkFileError(OSError):
    """Raised when a bookmark file cannot be read or decoded."""


def parse_bookmark_html(html_path: Path | str) -> NetscapeDocument:
    """Parse a bookmark export file into a document tree."""
    html_path = Path(html_path)
    LOGGER.debug("Parsing bookmark export from %s", html_path)
    html_text = read_text(html_path)
    document = parse_bookmark_string(html_text)
    LOGGER.info(
        "Extracted %d bookmark entries from %s",
        len(iter_bookmarks(document.children)),
        html_path,
    )
    return document


def parse_bookmark_string(raw: str) -> NetscapeDocument:
    """Parse bookmark markup held in memory. Malformed input never raises."""
    soup = BeautifulSoup(raw, PARSER_FEATURES)
    return document_from_node(soup)


def read_text(path: Path) -> str:
    """Read a whole file as strict UTF-8, folding failures into BookmarkFileError."""
    try:
        raw = path.read_bytes()
        return raw.decode(DEFAULT_ENCODING)
    except UnicodeDecodeError as exc:
        msg = f"Bookmark file is not valid {DEFAULT_ENCODING}: {path}"
        raise BookmarkFileError(msg) from exc
    except OSError as exc:
        msg = f"Unable to read bookmark file {path}: {exc.strerror or exc}"
        raise BookmarkFileError(msg) from exc


def document_from_node(root: object) -> NetscapeDocument:
    """Build the document from the whole parsed tree.

    The title and heading come from the first ``TITLE`` and ``H1`` elements.
    Items are collected from the direct children of the outermost ``DL``.
    """
    title_node = dom.find_first(root, "TITLE")
    h1_node = dom.find_first(root, "H1")
    top_list = dom.find_first(root, "DL")

    children = _collect_items(top_list) if top_list is not None else []
    return NetscapeDocument(
        title=dom.text_content(title_node) if title_node is not None else "",
        h1=dom.text_content(h1_node) if h1_node is not None else "",
        children=children,
    )


def item_from_node(node: object) -> Item | None:
    """Resolve a node to a folder, a bookmark, or None when unrecognised.

    Exporters wrap both folder headers and anchors in ``<DT>``; a wrapper is a
    folder exactly when it holds an ``<H3>``. Bare ``<H3>``/``<A>`` nodes are
    accepted as well.
    """
    target = _item_target(node)
    if target is None:
        return None
    if dom.has_tag(target, "H3"):
        return folder_from_node(target)
    return bookmark_from_node(target)


def folder_from_node(node: object) -> Folder | None:
    """Build a folder from an ``<H3>`` header; None for any other node.

    Members live in the first ``<DL>`` that follows the header as a sibling.
    A header without one is an empty folder. Nested folders are walked with
    an explicit stack, so nesting depth is bounded only by the input.
    """
    if not dom.has_tag(node, "H3"):
        return None

    # Each entry: (header, members still to resolve, members built so far).
    stack: list[tuple[object, Iterator[Tag], list[Item]]] = [_open_folder(node)]
    while True:
        header, pending, built = stack[-1]
        child = next(pending, None)
        if child is None:
            stack.pop()
            folder = _folder_from_header(header, built)
            if not stack:
                return folder
            stack[-1][2].append(folder)
            continue
        target = _item_target(child)
        if target is None:
            continue
        if dom.has_tag(target, "H3"):
            stack.append(_open_folder(target))
        else:
            built.append(bookmark_from_node(target))


def bookmark_from_node(node: object) -> Bookmark:
    """Build a bookmark from an anchor; missing attributes become empty strings."""
    return Bookmark(
        href=dom.attribute(node, "HREF") or "",
        title=dom.text_content(node),
        add_date=dom.attribute(node, "ADD_DATE") or "",
        last_visit=dom.attribute(node, "LAST_VISIT") or "",
        last_modified=dom.attribute(node, "LAST_MODIFIED") or "",
    )


def _item_target(node: object) -> Tag | None:
    """The ``<H3>`` or ``<A>`` a list member stands for, if any."""
    if dom.has_tag(node, "DT"):
        wrapped = dom.children(node)
        header = next((child for child in wrapped if dom.has_tag(child, "H3")), None)
        if header is not None:
            return header
        return next((child for child in wrapped if dom.has_tag(child, "A")), None)
    if dom.has_tag(node, "H3") or dom.has_tag(node, "A"):
        return node  # type: ignore[return-value]
    return None


def _open_folder(header: object) -> tuple[object, Iterator[Tag], list[Item]]:
    member_list = next(
        (sibling for sibling in dom.following_siblings(header) if dom.has_tag(sibling, "DL")),
        None,
    )
    return header, iter(dom.children(member_list)), []


def _folder_from_header(header: object, children: list[Item]) -> Folder:
    return Folder(
        title=dom.text_content(header),
        folded=dom.attribute(header, "FOLDED") is not None,
        add_date=dom.attribute(header, "ADD_DATE") or "",
        last_modified=dom.attribute(header, "LAST_MODIFIED") or "",
        personal_toolbar_folder=dom.attribute(header, "PERSONAL_TOOLBAR_FOLDER") is not None,
        unfiled_bookmarks_folder=dom.attribute(header, "UNFILED_BOOKMARKS_FOLDER") is not None,
        children=children,
    )


def _collect_items(container: object) -> list[Item]:
    items: list[Item] = []
    for child in dom.children(container):
        item = item_from_node(child)
        if item is not None:
            items.append(item)
    return items
