"""Compiled regex patterns and constant tables for table parsing and KaTeX output.

Used by parsers.py (separator lines, space runs), escaping.py (reserved
characters, emphasis spans), formatting.py (size directives) and preview.py
(directives the preview engine cannot handle).
"""

import re

# ─── Parsing Patterns ─────────────────────────────────────────────────────────

# Markdown separator row such as "|---|:-:|--:|" (hyphens, colons, pipes, whitespace only)
SEPARATOR_LINE_RE = re.compile(r"^[\s|:-]+$")

# One alignment token inside a separator row, e.g. ":-:" or "---:"
ALIGN_TOKEN_RE = re.compile(r"[-:]+")

# Two or more consecutive spaces separate columns in space-aligned text
SPACE_RUN_RE = re.compile(r" {2,}")


# ─── Escaping Patterns ────────────────────────────────────────────────────────

# Reserved characters and their text-mode replacements; one pass, so the
# braces and backslashes inside a replacement are never escaped again
ESCAPE_TABLE = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}
RESERVED_CHAR_RE = re.compile("[" + re.escape("".join(ESCAPE_TABLE)) + "]")

# Markdown strong emphasis spans (non-greedy, no nesting)
BOLD_STAR_RE = re.compile(r"\*\*([^*]+)\*\*")
BOLD_UNDERSCORE_RE = re.compile(r"__([^_]+)__")


# ─── Output Constants ─────────────────────────────────────────────────────────

# Leading size directive per table size (normal has none)
SIZE_DIRECTIVES = {
    "normal": "",
    "small": r"\small",
    "large": r"\large",
}

# Visual scale applied to the preview in place of the stripped size directive
PREVIEW_SCALES = {
    "small": 0.85,
    "normal": 1.0,
    "large": 1.2,
}

COLUMN_BORDER = "|"
COLUMN_SEPARATOR = " & "
ROW_TERMINATOR = r" \\ \hline"
ROW_INDENT = "  "

# Display-math delimiter wrapped around the markup in export mode
EXPORT_DELIMITER = "$$"


# ─── Preview Patterns ─────────────────────────────────────────────────────────

LEADING_DELIMITER_RE = re.compile(r"^\$\$\n?")
TRAILING_DELIMITER_RE = re.compile(r"\n?\$\$$")
ARRAYSTRETCH_RE = re.compile(r"\\def\\arraystretch\{[^}]*\}\n?")
SIZE_DIRECTIVE_RE = re.compile(r"\\(?:small|large)\s*")

# Options handed to the KaTeX renderer for previews
KATEX_OPTIONS = {
    "throwOnError": False,
    "displayMode": True,
    "trust": True,
    "strict": False,
}
