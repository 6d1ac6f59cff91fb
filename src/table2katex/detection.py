"""Raw-input line splitting and tabular dialect detection."""

import logging

from table2katex.schema import Dialect

logger = logging.getLogger(__name__)


def split_lines(raw: str) -> list[str]:
    """Split raw input into lines, discarding lines that hold only whitespace."""
    return [line for line in raw.split("\n") if line.strip()]


def detect_dialect(lines: list[str]) -> Dialect:
    """Classify non-blank lines as one dialect.  First matching rule wins.

    Pipe anywhere -> markdown, else tab -> tsv, else comma -> csv, else
    space-aligned.  Every input maps to some dialect, including input that
    will not parse into a useful table.
    """
    if any("|" in line for line in lines):
        dialect = Dialect.MARKDOWN
    elif any("\t" in line for line in lines):
        dialect = Dialect.TSV
    elif any("," in line for line in lines):
        dialect = Dialect.CSV
    else:
        dialect = Dialect.SPACE
    logger.debug("Detected dialect %s from %d lines", dialect.value, len(lines))
    return dialect
