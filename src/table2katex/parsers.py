"""Dialect parsers: turn non-blank lines into a grid of raw cell strings.

Each parser is a pure function over a list of lines.  None of them fail: a
line without the expected separator simply becomes a one-cell row.  Only the
markdown parser can drop lines (separator rows and rows with no cells), so an
empty grid from non-empty input is only possible there.
"""

import logging

from table2katex.patterns import ALIGN_TOKEN_RE, SEPARATOR_LINE_RE, SPACE_RUN_RE
from table2katex.schema import Alignment, Dialect, Grid, ParsedTable

logger = logging.getLogger(__name__)


# ─── Markdown ────────────────────────────────────────────────────────────────


def is_separator_line(line: str) -> bool:
    """Return True for a markdown header separator such as '|---|:-:|'."""
    return bool(SEPARATOR_LINE_RE.match(line))


def alignment_from_token(token: str) -> Alignment:
    """Map one separator token to an alignment (':-:' centre, '-:' right, else left)."""
    if token.startswith(":") and token.endswith(":"):
        return Alignment.CENTER
    if token.endswith(":"):
        return Alignment.RIGHT
    return Alignment.LEFT


def split_markdown_row(line: str) -> list[str]:
    """Split a pipe row, dropping the empty edge cells a bounding pipe produces."""
    cells = [cell.strip() for cell in line.split("|")]
    if cells and cells[-1] == "":
        cells.pop()
    if cells and cells[0] == "":
        cells.pop(0)
    return cells


def parse_markdown(lines: list[str]) -> ParsedTable:
    """Parse a pipe table.  Separator rows contribute alignment hints, not data.

    When several separator rows are present, later tokens overwrite earlier
    ones position by position; a separator row without tokens changes nothing.
    """
    grid: Grid = []
    hints: list[Alignment] = []
    for line in lines:
        if is_separator_line(line):
            for i, token in enumerate(ALIGN_TOKEN_RE.findall(line)):
                if i < len(hints):
                    hints[i] = alignment_from_token(token)
                else:
                    hints.append(alignment_from_token(token))
            continue
        cells = split_markdown_row(line)
        if cells:
            grid.append(cells)
    return ParsedTable(grid=grid, alignment_hints=hints)


# ─── Delimited Text ──────────────────────────────────────────────────────────


def split_csv_line(line: str) -> list[str]:
    """Scan one CSV line; commas inside double quotes do not split fields.

    Quotes only toggle the quoted state and are not kept.  Doubled quotes are
    not treated as an escaped quote.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())
    return fields


def parse_csv(lines: list[str]) -> ParsedTable:
    """Parse comma-separated lines with double-quote grouping."""
    return ParsedTable(grid=[split_csv_line(line) for line in lines])


def parse_tsv(lines: list[str]) -> ParsedTable:
    """Parse tab-separated lines."""
    return ParsedTable(grid=[[cell.strip() for cell in line.split("\t")] for line in lines])


def parse_space(lines: list[str]) -> ParsedTable:
    """Parse whitespace-aligned lines; two or more spaces separate columns."""
    return ParsedTable(grid=[[cell.strip() for cell in SPACE_RUN_RE.split(line)] for line in lines])


# ─── Dispatch ────────────────────────────────────────────────────────────────

_PARSERS = {
    Dialect.MARKDOWN: parse_markdown,
    Dialect.CSV: parse_csv,
    Dialect.TSV: parse_tsv,
    Dialect.SPACE: parse_space,
}


def parse_table(lines: list[str], dialect: Dialect) -> ParsedTable:
    """Parse lines with the parser registered for *dialect*."""
    parsed = _PARSERS[dialect](lines)
    logger.debug("Parsed %d lines as %s into %d rows", len(lines), dialect.value, len(parsed.grid))
    return parsed
