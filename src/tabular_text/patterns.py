"""Compiled regex patterns for cell coercion and markdown escaping.

Used by parsing.py (numeric detection) and formatting.py (cell escaping).
"""

import re

# ─── Cell Coercion Patterns ───────────────────────────────────────────────────

# Signed integer such as "30", "-4" or "+007"
INTEGER_RE = re.compile(r"^[+-]?\d+$")

# Signed decimal or exponent form such as "2.5", ".5", "3." or "1e-3"
FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")


# ─── Markdown Escaping Patterns ───────────────────────────────────────────────

# Characters that carry markdown meaning; each is prefixed with a backslash
MARKDOWN_SPECIAL_RE = re.compile(r"[\\`*_{}\[\]()#+\-.!]")

# Trailing whitespace stripped from every cell before escaping
TRAILING_WHITESPACE_RE = re.compile(r"\s+\Z")

# Embedded line breaks (LF or CRLF) rendered as <br>
NEWLINE_RE = re.compile(r"\r?\n")
