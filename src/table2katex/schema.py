"""Pydantic models and enums shared by the conversion pipeline and its front ends.

StyleConfig is the immutable styling value consumed on every markup
generation.  ConversionResult is what a session hands back to the CLI or web
layer after a conversion; it is plain data, safe to serialise with
model_dump().
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from table2katex.config import NOTICE_SECONDS

Grid = list[list[str]]


class Dialect(str, Enum):
    """Tabular text formats the parsers understand."""

    MARKDOWN = "markdown"
    CSV = "csv"
    TSV = "tsv"
    SPACE = "space"


# Input surfaces accept this in place of a Dialect to request detection
AUTO = "auto"


class Alignment(str, Enum):
    """Column alignment; values are the KaTeX array column codes."""

    LEFT = "l"
    CENTER = "c"
    RIGHT = "r"

    @classmethod
    def _missing_(cls, value):
        # Accept "left" / "center" / "right" as well as the column codes
        if isinstance(value, str):
            for member in cls:
                if member.name.lower() == value.strip().lower():
                    return member
        return None


class Size(str, Enum):
    NORMAL = "normal"
    SMALL = "small"
    LARGE = "large"


class TextStyle(str, Enum):
    SERIF = "serif"
    SANS = "sans"


class StyleConfig(BaseModel):
    """Styling options for one markup generation."""

    model_config = ConfigDict(frozen=True)

    bold_header: bool = True
    bold_first_column: bool = False
    size: Size = Size.NORMAL
    text_style: TextStyle = TextStyle.SERIF
    row_spacing: float = Field(default=1.0, ge=0.01, allow_inf_nan=False)
    export_mode: bool = False


class ParsedTable(BaseModel):
    """Raw parser output: the grid plus any markdown alignment hints."""

    grid: Grid
    alignment_hints: list[Alignment] = Field(default_factory=list)


class PreviewPayload(BaseModel):
    """Everything the external KaTeX renderer needs to draw a preview."""

    latex: str
    scale: float
    options: dict[str, bool]


class Notice(BaseModel):
    """Transient, non-blocking message for the user (rendered as a toast)."""

    message: str
    level: str = "info"
    duration_seconds: float = NOTICE_SECONDS


class ConversionResult(BaseModel):
    """Outcome of converting one raw input."""

    dialect: Dialect | None = None
    grid: Grid = Field(default_factory=list)
    column_count: int = 0
    alignments: list[Alignment] = Field(default_factory=list)
    alignments_reset: bool = False
    markup: str = ""
    preview: PreviewPayload | None = None
    cleared: bool = False
