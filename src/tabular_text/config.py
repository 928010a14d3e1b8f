"""Shared defaults for delimited-text parsing and markdown rendering."""

# Column separator used when the caller does not pass one
DEFAULT_DELIMITER = ","

# Lines starting with this prefix are comments and never reach the parser
COMMENT_PREFIX = "#"

# Message handed to the diagnostic sink when csv_try_parse swallows a failure
TRACE_MESSAGE = "reading csv"

# Per-field size ceiling handed to the csv reader; the stdlib default (128 KiB)
# would silently drop well-formed records carrying large cells
FIELD_SIZE_LIMIT = 2**31 - 1
