"""Parse delimited text into an immutable table of row mappings.

The record grammar (quoting, escaped quotes, multi-line quoted fields) is
delegated to the standard-library csv reader running in strict mode.  This
module only decides which lines reach the reader, where the column names
come from, and how each cell is coerced:

  - blank lines and lines starting with '#' are dropped between records;
    inside a quoted multi-line field every line is kept as-is
  - the first remaining line supplies the column names unless explicit
    headers are passed, in which case it is data
  - a repeated column name keeps the value of its last column
  - numeric cells become int or float, everything else stays a string
  - records the reader rejects, or whose width differs from the column
    count, are skipped rather than failing the whole parse
"""

import csv
import io
import logging
from collections.abc import Sequence
from types import MappingProxyType

from pydantic import ValidationError

from tabular_text.config import COMMENT_PREFIX, FIELD_SIZE_LIMIT, TRACE_MESSAGE
from tabular_text.errors import ParseError
from tabular_text.patterns import FLOAT_RE, INTEGER_RE
from tabular_text.schema import Cell, ParseOptions, Table
from tabular_text.trace import Trace

logger = logging.getLogger(__name__)

# The limit is process-wide; only ever raise it
csv.field_size_limit(max(csv.field_size_limit(), FIELD_SIZE_LIMIT))


# ─── Input Preparation ────────────────────────────────────────────────────────


def _build_options(delimiter: str | None, headers: Sequence[str] | None) -> ParseOptions:
    """Validate caller options, falling back to the library defaults for anything omitted."""
    fields: dict[str, object] = {}
    if delimiter is not None:
        fields["delimiter"] = delimiter
    if headers is not None:
        fields["headers"] = headers
    try:
        return ParseOptions(**fields)
    except ValidationError as exc:
        raise ParseError(f"invalid parse options: {exc}") from exc


def _decode(text: str | bytes) -> str:
    """Return *text* as str, decoding UTF-8 bytes (a leading BOM is dropped)."""
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ParseError("input is not valid UTF-8 text") from exc
    raise ParseError(f"expected str or bytes, got {type(text).__name__}")


class _LineSource:
    """Iterator of physical lines feeding the csv reader.

    The parse loop sets ``at_record_start`` before asking the reader for the
    next record.  Only while it is set are blank and comment lines dropped;
    once a record has started, continuation lines of a quoted field pass
    through untouched.
    """

    def __init__(self, text: str):
        # newline="" keeps the line endings so quoted multi-line fields survive
        self._lines = io.StringIO(text, newline="")
        self.line_num = 0
        self.at_record_start = True

    def __iter__(self):
        return self

    def __next__(self) -> str:
        while True:
            line = next(self._lines)
            self.line_num += 1
            if self.at_record_start:
                if not line.strip():
                    continue
                if line.startswith(COMMENT_PREFIX):
                    logger.debug("Skipping comment line %d: %r", self.line_num, line.rstrip("\r\n"))
                    continue
            self.at_record_start = False
            return line


# ─── Cell Coercion ────────────────────────────────────────────────────────────


def coerce_cell(value: str) -> Cell:
    """Convert a numeric cell to int or float; any other value is returned unchanged.

    Integral floats such as "2.0" or "1e3" come back as int.
    """
    stripped = value.strip()
    try:
        if INTEGER_RE.match(stripped):
            return int(stripped)
        if FLOAT_RE.match(stripped):
            number = float(stripped)
            return int(number) if number.is_integer() else number
    except ValueError:
        # int() refuses digit strings beyond the interpreter's conversion limit
        return value
    return value


# ─── Entry Points ─────────────────────────────────────────────────────────────


def csv_parse(
    text: str | bytes,
    *,
    delimiter: str | None = None,
    headers: Sequence[str] | None = None,
) -> Table:
    """Parse delimited text into a tuple of read-only row mappings.

    Raises ParseError when the input cannot be interpreted at all (bad
    options or undecodable bytes).  Individual bad records are skipped and
    counted in the log.
    """
    options = _build_options(delimiter, headers)
    content = _decode(text)

    source = _LineSource(content)
    reader = csv.reader(source, delimiter=options.delimiter, strict=True)
    columns = options.headers
    rows: list[MappingProxyType] = []
    skipped = 0

    while True:
        source.at_record_start = True
        try:
            record = next(reader)
        except StopIteration:
            break
        except csv.Error as exc:
            # The reader resets its state on the next call, so parsing can continue
            skipped += 1
            logger.debug("Skipping malformed record ending at line %d: %s", source.line_num, exc)
            continue

        if columns is None:
            columns = tuple(record)
            continue

        if len(record) != len(columns):
            skipped += 1
            logger.debug(
                "Skipping record ending at line %d: %d fields, expected %d",
                source.line_num,
                len(record),
                len(columns),
            )
            continue

        rows.append(MappingProxyType({name: coerce_cell(value) for name, value in zip(columns, record)}))

    logger.info("Parsed %d records (%d skipped)", len(rows), skipped)
    return tuple(rows)


def csv_try_parse(
    text: str | bytes,
    *,
    delimiter: str | None = None,
    headers: Sequence[str] | None = None,
    trace: Trace | None = None,
) -> Table | None:
    """Like csv_parse, but report a failure to *trace* and return None instead of raising.

    Without a trace the failure is logged as a warning on this module's logger.
    """
    try:
        return csv_parse(text, delimiter=delimiter, headers=headers)
    except ParseError as exc:
        if trace is not None:
            trace.error(TRACE_MESSAGE, exc)
        else:
            logger.warning("%s failed: %s", TRACE_MESSAGE, exc)
        return None
