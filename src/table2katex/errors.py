"""Exceptions raised by the conversion session."""


class Table2KatexError(Exception):
    """Base class for all table2katex errors."""


class TableParseError(Table2KatexError):
    """Non-empty input produced no table rows."""


class NothingToCopyError(Table2KatexError):
    """Copy was requested before any markup was generated."""


class ColumnIndexError(Table2KatexError, IndexError):
    """A per-column alignment edit referenced a column that does not exist."""
