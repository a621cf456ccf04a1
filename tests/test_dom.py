"""Tests for the markup tree query helpers."""

from __future__ import annotations

from bs4 import BeautifulSoup

from netscape_bookmarks import dom
from netscape_bookmarks.config import PARSER_FEATURES

_MARKUP = (
    '<DL><p><DT><H3 FOLDED ADD_DATE="42">Folder <b>bold</b> name</H3>'
    "<DL><p></DL><p><DT><A HREF=\"https://a.example\">A</A></DL><p>"
)


def _soup() -> BeautifulSoup:
    return BeautifulSoup(_MARKUP, PARSER_FEATURES)


def test_has_tag_ignores_case() -> None:
    h3 = dom.find_first(_soup(), "h3")
    if not (dom.has_tag(h3, "H3") and dom.has_tag(h3, "h3")):
        raise AssertionError("Tag match should be case-insensitive")
    if dom.has_tag(h3, "DT"):
        raise AssertionError("H3 must not match DT")
    if dom.has_tag("plain text", "H3"):
        raise AssertionError("Text nodes never match a tag")


def test_attribute_presence_versus_absence() -> None:
    h3 = dom.find_first(_soup(), "H3")
    if dom.attribute(h3, "folded") != "":
        raise AssertionError("Presence-only attribute should read as empty string")
    if dom.attribute(h3, "add_date") != "42":
        raise AssertionError("Attribute lookup should ignore case")
    if dom.attribute(h3, "LAST_MODIFIED") is not None:
        raise AssertionError("Absent attribute should be None")


def test_text_content_concatenates_descendants() -> None:
    h3 = dom.find_first(_soup(), "H3")
    text = dom.text_content(h3)
    if text != "Folder bold name":
        msg = f"Unexpected text content {text!r}"
        raise AssertionError(msg)


def test_following_siblings_and_children() -> None:
    soup = _soup()
    h3 = dom.find_first(soup, "H3")
    siblings = dom.following_siblings(h3)
    if not siblings or not dom.has_tag(siblings[0], "DL"):
        raise AssertionError("Folder list should follow the header as a sibling")
    top = dom.find_first(soup, "DL")
    tags = [child.name for child in dom.children(top)]
    if tags != ["p", "dt", "dt"]:
        msg = f"Unexpected children of the top-level list: {tags}"
        raise AssertionError(msg)


def test_missing_nodes_are_empty() -> None:
    if dom.children(None) or dom.following_siblings(None):
        raise AssertionError("Non-element nodes have no children or siblings")
    if dom.find_first(_soup(), "TITLE") is not None:
        raise AssertionError("Missing element should be None")
