"""CLI entry point for the netscape bookmarks converter.

Provides JSON export, markup re-rendering, and semantic comparison modes.
Each mode is a short sequence of focused helper functions.
"""

from __future__ import annotations

# Standard library imports (alphabetical within groups)
import argparse
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

# Third-party imports
from dotenv import load_dotenv

# Internal imports
from netscape_bookmarks.config import INPUT_ENV_VAR
from netscape_bookmarks.html_writer import write_bookmark_html
from netscape_bookmarks.parser import BookmarkFileError, parse_bookmark_html
from netscape_bookmarks.serializer import load_json, write_json
from netscape_bookmarks.validator import validate_equivalence

if TYPE_CHECKING:  # pragma: no cover
    from netscape_bookmarks.models import NetscapeDocument

STAGES: dict[int, str] = {
    1: "Load bookmarks",
    2: "Write JSON",
    3: "Render markup",
    4: "Compare",
}


def configure_logging(*, verbose: bool) -> None:
    """Configure root logging (debug when verbose).

    verbose: when True, sets DEBUG level; otherwise INFO.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def log_stage(stage_number: int, message: str, *args: object) -> None:
    """Log a message prefixed with a stage label."""
    stage_label = STAGES.get(stage_number, f"Stage {stage_number}")
    logger = logging.getLogger("netscape_bookmarks")
    logger.info("[%s] %s", stage_label, message % args if args else message)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert Netscape bookmark exports to JSON and back to markup",
    )
    parser.add_argument(
        "--input",
        help=(
            "Bookmark export (HTML) or a JSON file written by this tool. If omitted, the"
            f" environment variable {INPUT_ENV_VAR} is used."
        ),
    )
    parser.add_argument(
        "--json-output",
        default="bookmarks.json",
        help="Path to emit the JSON document",
    )
    parser.add_argument(
        "--html-output",
        default="bookmarks_rendered.html",
        help="Path to emit (or, in compare mode, read) the rendered markup",
    )
    parser.add_argument(
        "--mode",
        choices=("json", "html", "compare", "all"),
        default="json",
        help=(
            "Workflow: 'json'→write JSON; 'html'→render markup; 'compare'→check the"
            " rendered markup against the input; 'all'→json, html and compare in turn."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _resolve_input(path_arg: str | None) -> Path:
    resolved = path_arg or os.getenv(INPUT_ENV_VAR)
    if not resolved:
        msg = f"No input file provided. Supply --input or set {INPUT_ENV_VAR} in env."
        raise SystemExit(msg)
    return Path(resolved)


def _load_document(input_path: Path) -> NetscapeDocument:
    log_stage(1, "Reading %s", input_path)
    if input_path.suffix.lower() == ".json":
        return load_json(input_path)
    return parse_bookmark_html(input_path)


def _handle_json(document: NetscapeDocument, json_path: Path) -> None:
    log_stage(2, "Writing JSON to %s", json_path)
    write_json(document, json_path)


def _handle_html(document: NetscapeDocument, html_path: Path) -> None:
    log_stage(3, "Rendering markup to %s", html_path)
    write_bookmark_html(document, html_path)


def _handle_compare(document: NetscapeDocument, html_path: Path) -> None:
    log_stage(4, "Comparing %s against the input", html_path)
    if not html_path.exists():
        msg = f"Rendered bookmark file not found: {html_path}"
        raise FileNotFoundError(msg)
    validate_equivalence(document, html_path)
    log_stage(4, "Comparison completed successfully")


def main(argv: list[str] | None = None) -> None:
    """Entry point for the netscape bookmarks CLI."""
    load_dotenv()
    args = _parse_args(argv)
    input_path = _resolve_input(args.input)
    configure_logging(verbose=args.verbose)

    try:
        document = _load_document(input_path)
    except BookmarkFileError as exc:
        raise SystemExit(str(exc)) from exc

    if args.mode in {"json", "all"}:
        _handle_json(document, Path(args.json_output))
    if args.mode in {"html", "all"}:
        _handle_html(document, Path(args.html_output))
    if args.mode in {"compare", "all"}:
        _handle_compare(document, Path(args.html_output))


if __name__ == "__main__":
    main()
