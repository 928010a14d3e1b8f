"""Pydantic option models and the Row / Table shapes shared across the package.

ParseOptions is validated before any text reaches the csv reader, so a bad
delimiter surfaces as a single ParseError instead of a stream of silently
dropped records.
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from tabular_text.config import DEFAULT_DELIMITER

# A parsed cell: numbers are coerced, everything else stays text
Cell = str | int | float | bool | None

# One record, keyed by column name
Row = Mapping[str, Cell]

# Ordered, read-only sequence of records in input line order
Table = tuple[Row, ...]


class ParseOptions(BaseModel):
    """Options accepted by csv_parse / csv_try_parse.

    ``headers`` replaces header inference: when given, the first
    non-comment line is treated as data rather than as column names.
    A name listed twice keeps the value of its last column.
    """

    model_config = ConfigDict(frozen=True)

    delimiter: str = DEFAULT_DELIMITER
    headers: tuple[str, ...] | None = None

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, value: str) -> str:
        """The csv reader only accepts a single non-quote, non-newline character."""
        if len(value) != 1:
            raise ValueError(f"delimiter must be a single character, got {value!r}")
        if value in ('"', "\r", "\n"):
            raise ValueError(f"delimiter {value!r} collides with the csv grammar")
        return value

    @field_validator("headers")
    @classmethod
    def validate_headers(cls, value: tuple[str, ...] | None) -> tuple[str, ...] | None:
        """An explicit header list must name at least one column."""
        if value is not None and not value:
            raise ValueError("headers must not be empty")
        return value


class MarkdownOptions(BaseModel):
    """Options accepted by csv_to_markdown."""

    model_config = ConfigDict(frozen=True)

    headers: tuple[str, ...] | None = None
