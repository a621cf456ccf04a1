"""JSON encoding and decoding of bookmark documents."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .config import DEFAULT_ENCODING
from .models import DocumentModel, NetscapeDocument
from .parser import read_text

if TYPE_CHECKING:  # pragma: no cover
    from pathlib import Path

LOGGER = logging.getLogger(__name__)


def to_json(document: NetscapeDocument) -> str:
    """Serialise a document to compact JSON with a fixed field order."""
    return document.to_model().model_dump_json()


def write_json(document: NetscapeDocument, path: Path) -> None:
    """Write a document to a JSON file."""
    payload = document.to_model().model_dump(mode="json")
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding=DEFAULT_ENCODING)
    LOGGER.info("Wrote %d top-level items to %s", len(document.children), path)


def from_json(raw: str) -> NetscapeDocument:
    """Rebuild a document from its JSON form.

    Raises ValueError when the payload does not match the document schema.
    """
    try:
        model = DocumentModel.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Invalid JSON bookmark document: {exc}"
        raise ValueError(msg) from exc
    return NetscapeDocument.from_model(model)


def load_json(path: Path) -> NetscapeDocument:
    """Load a document previously written by write_json."""
    return from_json(read_text(path))
