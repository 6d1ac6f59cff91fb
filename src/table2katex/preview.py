"""Preview payload for the external KaTeX renderer.

KaTeX does not support \\arraystretch or the size switches, so they are
stripped and replaced by a visual scale the front end applies to the
rendered element.
"""

from table2katex.patterns import ARRAYSTRETCH_RE, KATEX_OPTIONS, LEADING_DELIMITER_RE, PREVIEW_SCALES, SIZE_DIRECTIVE_RE, TRAILING_DELIMITER_RE
from table2katex.schema import PreviewPayload, Size


def preview_latex(markup: str) -> str:
    """Strip export delimiters and directives the preview engine cannot render."""
    code = LEADING_DELIMITER_RE.sub("", markup)
    code = TRAILING_DELIMITER_RE.sub("", code)
    code = ARRAYSTRETCH_RE.sub("", code)
    return SIZE_DIRECTIVE_RE.sub("", code)


def build_preview(markup: str, size: Size) -> PreviewPayload:
    """Return the stripped markup, display scale and renderer options."""
    return PreviewPayload(latex=preview_latex(markup), scale=PREVIEW_SCALES[size.value], options=dict(KATEX_OPTIONS))
