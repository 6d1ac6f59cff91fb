"""Grid normalisation: column count, right-padding, and alignment reconciliation."""

import logging

from table2katex.schema import Alignment, Grid

logger = logging.getLogger(__name__)


def column_count(grid: Grid) -> int:
    """Return the longest row length, or 0 for an empty grid."""
    return max((len(row) for row in grid), default=0)


def pad_grid(grid: Grid, n_cols: int | None = None) -> Grid:
    """Return a copy of *grid* with every row right-padded with empty cells."""
    if n_cols is None:
        n_cols = column_count(grid)
    return [row + [""] * (n_cols - len(row)) for row in grid]


def reconcile_alignments(alignments: list[Alignment], n_cols: int) -> tuple[list[Alignment], bool]:
    """Size the alignment sequence to *n_cols*.

    Returns (alignments, reset).  When the length already matches, the existing
    choices are kept.  Otherwise every column starts over at left; earlier
    choices are discarded rather than re-mapped.
    """
    if len(alignments) == n_cols:
        return list(alignments), False
    logger.info("Column count changed %d -> %d; resetting alignments to left", len(alignments), n_cols)
    return [Alignment.LEFT] * n_cols, True


def apply_alignment_hints(alignments: list[Alignment], hints: list[Alignment]) -> list[Alignment]:
    """Overwrite leading alignments with markdown separator hints; extra hints are ignored."""
    updated = list(alignments)
    for i, hint in enumerate(hints[: len(updated)]):
        updated[i] = hint
    return updated
