"""Convert tabular text into KaTeX array markup.

Submodules:
  patterns    -- compiled regex patterns and constant tables
  schema      -- Pydantic models and enums (StyleConfig, ConversionResult, ...)
  errors      -- session exceptions
  detection   -- line splitting and dialect detection
  parsers     -- markdown / csv / tsv / space-aligned parsers
  normalize   -- column count, padding, alignment reconciliation
  escaping    -- cell text escaping and emphasis conversion
  formatting  -- KaTeX array markup generation
  export      -- one-line export transform for publishing
  preview     -- preview payload for the KaTeX renderer
  session     -- ConversionSession command interface
  debounce    -- keyed debouncing of repeated triggers
  config      -- environment-driven settings
  cli         -- command-line entry point
  web         -- FastAPI application
"""

__version__ = "0.1.0"
