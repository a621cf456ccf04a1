"""Global configuration constants for netscape bookmarks."""

from __future__ import annotations

# Tree builder handed to BeautifulSoup. html5lib applies the HTML5 tree
# construction rules, which place a folder's <DL> after its <H3> inside the <DT>.
PARSER_FEATURES: str = "html5lib"

# Encoding used for every bookmark file read or written.
DEFAULT_ENCODING: str = "utf-8"

# Indentation added per nesting level in rendered markup.
INDENT: str = "    "

# Environment variable consulted by the CLI when --input is omitted.
INPUT_ENV_VAR: str = "BOOKMARKS_EXPORT_FILE"
