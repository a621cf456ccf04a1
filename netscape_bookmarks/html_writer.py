"""Functions for rendering a bookmark tree back into Netscape markup."""

from __future__ import annotations

import html
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator
    from pathlib import Path

from .config import DEFAULT_ENCODING, INDENT
from .models import Bookmark, Folder, Item, NetscapeDocument

LOGGER = logging.getLogger(__name__)

DOCUMENT_HEADER = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<!-- This is an automatically generated file.
     It will be read and overwritten.
     DO NOT EDIT! -->
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<TITLE>{title}</TITLE>
<H1>{h1}</H1>"""

FOLDER_TEMPLATE = "{indent}<DT><H3{attributes}>{title}</H3>"
BOOKMARK_TEMPLATE = "{indent}<DT><A{attributes}>{title}</A>"
LIST_OPEN = "{indent}<DL><p>"
LIST_CLOSE = "{indent}</DL><p>"


def render_html(document: NetscapeDocument) -> str:
    """Render a whole document, header included."""
    lines: list[str] = [
        DOCUMENT_HEADER.format(
            title=html.escape(document.title),
            h1=html.escape(document.h1),
        ),
    ]
    _render_list(document.children, lines, 0)
    return "\n".join(lines)


def render_folder(folder: Folder, depth: int = 0) -> str:
    """Render a folder header and its member list."""
    lines: list[str] = []
    _render_folder(folder, lines, depth)
    return "\n".join(lines)


def render_bookmark(bookmark: Bookmark, depth: int = 0) -> str:
    """Render a single bookmark line."""
    pairs: list[tuple[str, str | None]] = [("HREF", bookmark.href)]
    pairs.extend(
        (name, value)
        for name, value in (
            ("ADD_DATE", bookmark.add_date),
            ("LAST_VISIT", bookmark.last_visit),
            ("LAST_MODIFIED", bookmark.last_modified),
        )
        if value
    )
    return BOOKMARK_TEMPLATE.format(
        indent=INDENT * depth,
        attributes=_format_attributes(pairs),
        title=html.escape(bookmark.title),
    )


def write_bookmark_html(document: NetscapeDocument, output_path: Path) -> None:
    """Write the rendered document to a file."""
    html_text = render_html(document)
    output_path.write_text(html_text + "\n", encoding=DEFAULT_ENCODING)
    LOGGER.info(
        "Wrote bookmark markup with %d top-level items to %s",
        len(document.children),
        output_path,
    )


def _render_folder(folder: Folder, output: list[str], depth: int) -> None:
    output.append(_folder_header(folder, depth))
    _render_list(folder.children, output, depth)


def _folder_header(folder: Folder, depth: int) -> str:
    pairs: list[tuple[str, str | None]] = []
    if folder.folded:
        pairs.append(("FOLDED", None))
    if folder.add_date:
        pairs.append(("ADD_DATE", folder.add_date))
    if folder.last_modified:
        pairs.append(("LAST_MODIFIED", folder.last_modified))
    if folder.personal_toolbar_folder:
        pairs.append(("PERSONAL_TOOLBAR_FOLDER", None))
    if folder.unfiled_bookmarks_folder:
        pairs.append(("UNFILED_BOOKMARKS_FOLDER", None))

    return FOLDER_TEMPLATE.format(
        indent=INDENT * depth,
        attributes=_format_attributes(pairs),
        title=html.escape(folder.title),
    )


def _render_list(items: tuple[Item, ...], output: list[str], depth: int) -> None:
    # Open lists as (remaining items, depth of the list markers).
    output.append(LIST_OPEN.format(indent=INDENT * depth))
    stack: list[tuple[Iterator[Item], int]] = [(iter(items), depth)]
    while stack:
        pending, level = stack[-1]
        item = next(pending, None)
        if item is None:
            stack.pop()
            output.append(LIST_CLOSE.format(indent=INDENT * level))
        elif isinstance(item, Folder):
            output.append(_folder_header(item, level + 1))
            output.append(LIST_OPEN.format(indent=INDENT * (level + 1)))
            stack.append((iter(item.children), level + 1))
        else:
            output.append(render_bookmark(item, level + 1))


def _format_attributes(pairs: list[tuple[str, str | None]]) -> str:
    # None marks a presence-only flag.
    return "".join(
        f" {name}" if value is None else f' {name}="{html.escape(value, quote=True)}"'
        for name, value in pairs
    )
