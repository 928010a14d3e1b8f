"""Markdown table rendering for parsed rows.

The escaping rules are fixed: downstream renderers rely on the exact text,
including the bare ``lt;`` / ``gt;`` substitutions for angle brackets.
Header names are written as-is; only cell values are escaped.
"""

import logging
from collections.abc import Mapping, Sequence

from tabular_text.patterns import MARKDOWN_SPECIAL_RE, NEWLINE_RE, TRAILING_WHITESPACE_RE
from tabular_text.schema import MarkdownOptions

logger = logging.getLogger(__name__)


def escape_markdown_cell(value: object) -> str:
    """Render a single cell value as markdown-safe text."""
    text = "" if value is None else str(value)
    text = TRAILING_WHITESPACE_RE.sub("", text)
    text = MARKDOWN_SPECIAL_RE.sub(lambda m: "\\" + m.group(0), text)
    text = text.replace("<", "lt;").replace(">", "gt;")
    return NEWLINE_RE.sub("<br>", text)


def _render_row(cells: Sequence[str]) -> str:
    """Join cells into one pipe-delimited markdown row."""
    return "|" + "|".join(cells) + "|"


def csv_to_markdown(rows: Sequence[Mapping[str, object]], *, headers: Sequence[str] | None = None) -> str:
    """Render *rows* as a markdown table.

    Columns default to the keys of the first row.  Keys missing from a row
    render as empty cells.  An empty sequence renders as an empty string.
    """
    if not rows:
        return ""

    options = MarkdownOptions(headers=headers)
    columns = options.headers if options.headers is not None else tuple(rows[0].keys())
    logger.debug("Rendering %d rows x %d columns", len(rows), len(columns))

    lines: list[str] = [
        _render_row(columns),
        _render_row(["-"] * len(columns)),
    ]
    for row in rows:
        lines.append(_render_row([escape_markdown_cell(row.get(column)) for column in columns]))
    return "\n".join(lines)
