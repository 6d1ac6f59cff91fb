"""Conversion session: the command interface front ends drive.

A ConversionSession owns the state that survives between user actions (the
current grid, the per-column alignments, the style and the generated markup)
and replaces it wholesale on every successful conversion.  Front ends call:

  convert(raw, dialect)            -- parse new input and regenerate
  restyle(style)                   -- regenerate the same grid with a new style
  set_column_alignment(i, align)   -- edit one column
  align_all(align)                 -- bulk-apply one alignment (None is a no-op)
  clear()                          -- drop all state (empty input)
  copy_text()                      -- text for the clipboard

Failures raise the exceptions in errors.py; notice_for() maps them to the
transient message shown to the user.
"""

import logging

from table2katex.detection import detect_dialect, split_lines
from table2katex.errors import ColumnIndexError, NothingToCopyError, Table2KatexError, TableParseError
from table2katex.export import to_export_text
from table2katex.formatting import generate_markup
from table2katex.normalize import apply_alignment_hints, column_count, pad_grid, reconcile_alignments
from table2katex.parsers import parse_table
from table2katex.preview import build_preview
from table2katex.schema import AUTO, Alignment, ConversionResult, Dialect, Grid, Notice, StyleConfig

logger = logging.getLogger(__name__)

# User-facing notice texts
PARSE_FAILED_MESSAGE = "Could not parse the table"
NOTHING_TO_COPY_MESSAGE = "Nothing to copy"
BAD_COLUMN_MESSAGE = "No such column"
COPIED_MESSAGE = "Copied!"

_NOTICE_MESSAGES = {
    TableParseError: PARSE_FAILED_MESSAGE,
    NothingToCopyError: NOTHING_TO_COPY_MESSAGE,
    ColumnIndexError: BAD_COLUMN_MESSAGE,
}


def notice_for(exc: Table2KatexError) -> Notice:
    """Build the transient user notice for a session error."""
    return Notice(message=_NOTICE_MESSAGES.get(type(exc), str(exc)), level="error")


def resolve_dialect(lines: list[str], dialect: Dialect | str = AUTO) -> Dialect:
    """Return the explicit dialect, or detect one when *dialect* is 'auto'."""
    if dialect == AUTO:
        return detect_dialect(lines)
    return Dialect(dialect)


class ConversionSession:
    """Mutable per-user conversion state (single-threaded use)."""

    def __init__(self, style: StyleConfig | None = None):
        self.style = style or StyleConfig()
        self.grid: Grid = []
        self.alignments: list[Alignment] = []
        self.dialect: Dialect | None = None
        self.markup = ""

    @property
    def column_count(self) -> int:
        return len(self.alignments)

    @property
    def has_table(self) -> bool:
        return bool(self.grid)

    # ── Commands ─────────────────────────────────────────────────────────

    def convert(self, raw: str, dialect: Dialect | str = AUTO, style: StyleConfig | None = None) -> ConversionResult:
        """Parse *raw* and regenerate markup.

        Whitespace-only input clears the session.  Input that yields no rows
        raises TableParseError and leaves the previous state untouched.
        """
        lines = split_lines(raw)
        if not lines:
            if style is not None:
                self.style = style
            return self.clear()

        resolved = resolve_dialect(lines, dialect)
        parsed = parse_table(lines, resolved)
        if not parsed.grid:
            logger.warning("Could not parse %d lines as %s", len(lines), resolved.value)
            raise TableParseError(f"No table rows found in {resolved.value} input")

        if style is not None:
            self.style = style
        n_cols = column_count(parsed.grid)
        alignments, reset = reconcile_alignments(self.alignments, n_cols)
        self.alignments = apply_alignment_hints(alignments, parsed.alignment_hints)
        self.grid = pad_grid(parsed.grid, n_cols)
        self.dialect = resolved
        self._regenerate()
        logger.info("Converted %s input: %d rows x %d columns", resolved.value, len(self.grid), n_cols)
        return self.result(alignments_reset=reset)

    def restyle(self, style: StyleConfig) -> str | None:
        """Apply a new style; returns the regenerated markup, or None without a table."""
        self.style = style
        if not self.has_table:
            return None
        return self._regenerate()

    def set_column_alignment(self, index: int, alignment: Alignment | str) -> list[Alignment]:
        """Change one column's alignment and regenerate."""
        if not 0 <= index < self.column_count:
            logger.warning("Alignment edit for column %d ignored; table has %d columns", index, self.column_count)
            raise ColumnIndexError(f"Column {index} out of range (0..{self.column_count - 1})")
        self.alignments[index] = Alignment(alignment)
        self._regenerate()
        return list(self.alignments)

    def align_all(self, alignment: Alignment | str | None) -> list[Alignment]:
        """Set every column to *alignment*; None (unset) leaves alignments alone."""
        if alignment is not None and alignment != "":
            self.alignments = [Alignment(alignment)] * self.column_count
            if self.has_table:
                self._regenerate()
        return list(self.alignments)

    def clear(self) -> ConversionResult:
        """Drop grid, alignments and output."""
        self.grid = []
        self.alignments = []
        self.dialect = None
        self.markup = ""
        logger.info("Session cleared")
        return ConversionResult(cleared=True)

    def copy_text(self) -> str:
        """Return clipboard text, export-transformed when export mode is on."""
        if not self.markup:
            logger.warning("Copy requested with no generated markup")
            raise NothingToCopyError("No markup has been generated yet")
        if self.style.export_mode:
            return to_export_text(self.markup)
        return self.markup

    # ── Views ────────────────────────────────────────────────────────────

    def result(self, alignments_reset: bool = False) -> ConversionResult:
        """Snapshot the current state as a ConversionResult."""
        return ConversionResult(
            dialect=self.dialect,
            grid=[list(row) for row in self.grid],
            column_count=self.column_count,
            alignments=list(self.alignments),
            alignments_reset=alignments_reset,
            markup=self.markup,
            preview=build_preview(self.markup, self.style.size) if self.markup else None,
        )

    def _regenerate(self) -> str:
        self.markup = generate_markup(self.grid, self.alignments, self.style)
        return self.markup
