"""Delimited-text parsing and markdown table rendering.

Submodules:
  config      -- library defaults (delimiter, comment prefix, trace message)
  patterns    -- compiled regex patterns for cell coercion and markdown escaping
  schema      -- ParseOptions / MarkdownOptions Pydantic models, Row and Table aliases
  errors      -- ParseError
  trace       -- diagnostic sink protocol and logging adapter
  parsing     -- csv_parse / csv_try_parse entry points
  formatting  -- cell escaping and csv_to_markdown rendering
"""
