"""Data models for the Netscape bookmark tree."""

from __future__ import annotations

from typing import Union

from attrs import define, field
from pydantic import BaseModel, ConfigDict


def _item_tuple(items: object) -> tuple[Item, ...]:
    return tuple(items)  # type: ignore[arg-type]


@define(frozen=True)
class Bookmark:
    """Single shortcut entry (an ``<A>`` element)."""

    href: str = ""
    title: str = ""
    add_date: str = ""
    last_visit: str = ""
    last_modified: str = ""

    def to_model(self) -> BookmarkModel:
        """Convert the bookmark into a serialisable pydantic model."""
        return BookmarkModel(
            href=self.href,
            title=self.title,
            add_date=self.add_date,
            last_visit=self.last_visit,
            last_modified=self.last_modified,
        )

    @classmethod
    def from_model(cls, model: BookmarkModel) -> Bookmark:
        """Create a bookmark from a validated pydantic model."""
        return cls(
            href=model.href,
            title=model.title,
            add_date=model.add_date,
            last_visit=model.last_visit,
            last_modified=model.last_modified,
        )


@define(frozen=True)
class Folder:
    """Folder header (``<H3>``) together with the members of its list.

    Only ``title``, ``add_date`` and ``children`` take part in equality; the
    remaining fields are display hints that exporters emit inconsistently.
    """

    title: str = ""
    folded: bool = field(default=False, eq=False)
    add_date: str = ""
    last_modified: str = field(default="", eq=False)
    personal_toolbar_folder: bool = field(default=False, eq=False)
    unfiled_bookmarks_folder: bool = field(default=False, eq=False)
    children: tuple[Item, ...] = field(factory=tuple, converter=_item_tuple)

    def to_model(self) -> FolderModel:
        """Convert the folder (recursively) into a pydantic model."""
        return FolderModel(
            title=self.title,
            folded=self.folded,
            add_date=self.add_date,
            last_modified=self.last_modified,
            personal_toolbar_folder=self.personal_toolbar_folder,
            unfiled_bookmarks_folder=self.unfiled_bookmarks_folder,
            children=[child.to_model() for child in self.children],
        )

    @classmethod
    def from_model(cls, model: FolderModel) -> Folder:
        """Create a folder (recursively) from a validated pydantic model."""
        return cls(
            title=model.title,
            folded=model.folded,
            add_date=model.add_date,
            last_modified=model.last_modified,
            personal_toolbar_folder=model.personal_toolbar_folder,
            unfiled_bookmarks_folder=model.unfiled_bookmarks_folder,
            children=[_item_from_model(child) for child in model.children],
        )


@define(frozen=True)
class NetscapeDocument:
    """Root of a parsed bookmark file."""

    title: str = ""
    h1: str = ""
    children: tuple[Item, ...] = field(factory=tuple, converter=_item_tuple)

    def to_model(self) -> DocumentModel:
        """Convert the document into a pydantic model."""
        return DocumentModel(
            title=self.title,
            h1=self.h1,
            children=[child.to_model() for child in self.children],
        )

    @classmethod
    def from_model(cls, model: DocumentModel) -> NetscapeDocument:
        """Create a document from a validated pydantic model."""
        return cls(
            title=model.title,
            h1=model.h1,
            children=[_item_from_model(child) for child in model.children],
        )


Item = Union[Folder, Bookmark]


def _item_from_model(model: FolderModel | BookmarkModel) -> Item:
    if isinstance(model, FolderModel):
        return Folder.from_model(model)
    return Bookmark.from_model(model)


class BookmarkModel(BaseModel):
    """Pydantic model for a bookmark entry. Every field must be present."""

    model_config = ConfigDict(extra="forbid")

    href: str
    title: str
    add_date: str
    last_visit: str
    last_modified: str


class FolderModel(BaseModel):
    """Pydantic model for a folder and its members. Every field must be present."""

    model_config = ConfigDict(extra="forbid")

    title: str
    folded: bool
    add_date: str
    last_modified: str
    personal_toolbar_folder: bool
    unfiled_bookmarks_folder: bool
    children: list[Union[FolderModel, BookmarkModel]]


class DocumentModel(BaseModel):
    """Pydantic model for a whole bookmark file."""

    model_config = ConfigDict(extra="forbid")

    title: str
    h1: str
    children: list[Union[FolderModel, BookmarkModel]]


def iter_bookmarks(items: tuple[Item, ...]) -> list[Bookmark]:
    """Flatten a children sequence into its bookmarks, in document order."""
    found: list[Bookmark] = []
    stack = [iter(items)]
    while stack:
        item = next(stack[-1], None)
        if item is None:
            stack.pop()
        elif isinstance(item, Folder):
            stack.append(iter(item.children))
        else:
            found.append(item)
    return found
