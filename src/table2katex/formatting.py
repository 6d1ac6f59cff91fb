"""KaTeX array markup generation.

Combines a grid, the per-column alignments and a StyleConfig into the final
markup text, e.g. for a 2x2 table with a bold header::

    \\def\\arraystretch{1.00}
    \\begin{array}{|l|c|} \\hline
      \\textbf{a} & \\textbf{b} \\\\ \\hline
      1 & 2 \\\\ \\hline
    \\end{array}

In export mode the whole block is wrapped in ``$$`` lines.
"""

import logging

from table2katex.escaping import bold, escape_cell, sans
from table2katex.normalize import column_count
from table2katex.patterns import COLUMN_BORDER, COLUMN_SEPARATOR, EXPORT_DELIMITER, ROW_INDENT, ROW_TERMINATOR, SIZE_DIRECTIVES
from table2katex.schema import Alignment, Grid, StyleConfig, TextStyle

logger = logging.getLogger(__name__)


def column_spec(alignments: list[Alignment]) -> str:
    """Build the array column spec, a border before every column plus one trailing border."""
    return "".join(f"{COLUMN_BORDER}{align.value}" for align in alignments) + COLUMN_BORDER


def format_cell(text: str, emphasised: bool, style: StyleConfig) -> str:
    """Escape a cell and apply bold and/or sans-serif wrapping."""
    content = escape_cell(text)
    if emphasised:
        content = bold(content)
    if style.text_style == TextStyle.SANS:
        content = sans(content)
    return content


def format_row(row: list[str], is_header: bool, n_cols: int, style: StyleConfig) -> str:
    """Render one grid row as an indented array line ending in a row rule."""
    cells = [format_cell(cell, is_header or (col == 0 and style.bold_first_column), style) for col, cell in enumerate(row)]
    cells += [""] * (n_cols - len(cells))
    return ROW_INDENT + COLUMN_SEPARATOR.join(cells) + ROW_TERMINATOR


def generate_markup(grid: Grid, alignments: list[Alignment], style: StyleConfig) -> str:
    """Generate the full markup text for *grid*."""
    n_cols = column_count(grid)
    size_directive = SIZE_DIRECTIVES[style.size.value]

    parts: list[str] = []
    if style.export_mode:
        parts.append(EXPORT_DELIMITER + "\n")
    if size_directive:
        parts.append(size_directive + " ")
    parts.append(f"\\def\\arraystretch{{{style.row_spacing:.2f}}}\n")
    parts.append(f"\\begin{{array}}{{{column_spec(alignments)}}} \\hline\n")
    for idx, row in enumerate(grid):
        parts.append(format_row(row, idx == 0 and style.bold_header, n_cols, style) + "\n")
    parts.append("\\end{array}")
    if style.export_mode:
        parts.append("\n" + EXPORT_DELIMITER)

    markup = "".join(parts)
    logger.debug("Generated markup for %d rows x %d columns (%d chars)", len(grid), n_cols, len(markup))
    return markup
