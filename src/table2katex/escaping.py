"""Cell text escaping for KaTeX / LaTeX text mode.

Reserved characters are replaced in a single pass, so the backslashes and
braces a replacement introduces are never escaped a second time.  Markdown
strong emphasis (**x** and __x__) then becomes \\textbf{x}; any leftover single
asterisk is dropped and any leftover underscore is escaped.
"""

from table2katex.patterns import BOLD_STAR_RE, BOLD_UNDERSCORE_RE, ESCAPE_TABLE, RESERVED_CHAR_RE


def bold(text: str) -> str:
    """Wrap text in a bold span."""
    return rf"\textbf{{{text}}}"


def sans(text: str) -> str:
    """Wrap text in a sans-serif span."""
    return rf"\textsf{{{text}}}"


def escape_cell(text: str) -> str:
    """Convert raw cell text into KaTeX-safe text."""
    text = RESERVED_CHAR_RE.sub(lambda m: ESCAPE_TABLE[m.group(0)], text)

    # Emphasis markers are not reserved above, so the spans survive escaping intact
    text = BOLD_STAR_RE.sub(lambda m: bold(m.group(1)), text)
    text = BOLD_UNDERSCORE_RE.sub(lambda m: bold(m.group(1)), text)

    text = text.replace("*", "")
    return text.replace("_", r"\_")
