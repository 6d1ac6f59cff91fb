"""Export transform for publishing surfaces that reflow newlines inside math blocks.

Collapses the markup onto one physical line while keeping each ``$$``
delimiter on a line of its own.
"""

from table2katex.patterns import EXPORT_DELIMITER


def to_export_text(markup: str) -> str:
    """Collapse *markup* into '$$' / one-line body / '$$'."""
    result = ""
    for raw_line in markup.split("\n"):
        line = raw_line.strip()
        if line == EXPORT_DELIMITER:
            result += line + "\n"
        elif line:
            result += line + " "

    # The closing delimiter goes on its own line, not after a space
    suffix = " " + EXPORT_DELIMITER + "\n"
    if result.endswith(suffix):
        result = result[: -len(suffix)] + "\n" + EXPORT_DELIMITER
    return result.rstrip()
