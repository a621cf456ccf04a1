"""Shared pytest fixtures for netscape bookmarks tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_EXPORT = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<!-- This is an automatically generated file.
     It will be read and overwritten.
     DO NOT EDIT! -->
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<TITLE>Bookmarks</TITLE>
<H1>Bookmarks</H1>
<DL><p>
    <DT><A HREF="https://framasoft.org/" ADD_DATE="1466009059">Framasoft ~ Page portail du réseau</A>
    <DT><A HREF="https://www.kernel.org/" ADD_DATE="1466009167">The Linux Kernel Archives</A>
</DL><p>
"""

NESTED_EXPORT = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<TITLE>Bookmarks</TITLE>
<H1>Bookmarks Menu</H1>
<DL><p>
    <DT><H3 ADD_DATE="1600000000" LAST_MODIFIED="1600000100" PERSONAL_TOOLBAR_FOLDER="true">Bookmarks Toolbar</H3>
    <DL><p>
        <DT><A HREF="https://www.python.org/" ADD_DATE="1600000001" LAST_VISIT="1600000002">Python</A>
        <DT><H3 FOLDED>Docs</H3>
        <DL><p>
            <DT><A HREF="https://docs.python.org/3/">Python 3 docs</A>
            <DT><A HREF="https://www.crummy.com/software/BeautifulSoup/bs4/doc/">Beautiful Soup</A>
        </DL><p>
        <DT><H3>Empty</H3>
        <DL><p>
        </DL><p>
    </DL><p>
    <HR>
    <DT><A HREF="https://example.com/?a=1&amp;b=2" LAST_MODIFIED="1600000003">Example &amp; Co</A>
    <DT><H3 UNFILED_BOOKMARKS_FOLDER>Other Bookmarks</H3>
    <DL><p>
    </DL><p>
</DL><p>
"""


@pytest.fixture
def sample_export_html(tmp_path: Path) -> Path:
    """Write the two-bookmark export to a temporary file."""
    p = tmp_path / "netscape.html"
    p.write_text(SAMPLE_EXPORT, encoding="utf-8")
    return p


@pytest.fixture
def nested_export_html(tmp_path: Path) -> Path:
    """Write an export with toolbar, nested and empty folders."""
    p = tmp_path / "nested.html"
    p.write_text(NESTED_EXPORT, encoding="utf-8")
    return p
