"""Command-line front end: convert a table file (or stdin) to KaTeX array markup.

Usage:
    table2katex table.md
    pbpaste | table2katex --size small --align l,r,r --export
    table2katex data.csv --watch
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from pydantic import ValidationError

from table2katex.config import LOG_FORMAT, LOG_LEVEL
from table2katex.debounce import Debouncer
from table2katex.errors import Table2KatexError
from table2katex.schema import AUTO, Alignment, Dialect, Size, StyleConfig, TextStyle
from table2katex.session import ConversionSession, notice_for

logger = logging.getLogger(__name__)

# How often --watch checks the input file for modifications
WATCH_POLL_SECONDS = 0.1


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the table2katex command."""
    parser = argparse.ArgumentParser(description="Convert Markdown/CSV/TSV/space-aligned tables to KaTeX array markup")
    parser.add_argument("file", nargs="?", type=Path, help="Input file (default: read stdin)")
    parser.add_argument("--format", dest="dialect", choices=[AUTO] + [d.value for d in Dialect], default=AUTO, help="Input format (default: auto)")
    parser.add_argument("--bold-header", action=argparse.BooleanOptionalAction, default=True, help="Bold the first row (default: on)")
    parser.add_argument("--bold-first-column", action="store_true", help="Bold the first column")
    parser.add_argument("--size", choices=[s.value for s in Size], default=Size.NORMAL.value, help="Table size (default: normal)")
    parser.add_argument("--text-style", choices=[t.value for t in TextStyle], default=TextStyle.SERIF.value, help="Font family (default: serif)")
    parser.add_argument("--row-spacing", type=float, default=1.0, help="Row spacing factor (default: 1.00)")
    parser.add_argument("--align", type=str, default="", help="Comma-separated per-column alignments, e.g. 'l,c,r' or 'left,center'")
    parser.add_argument("--align-all", type=str, default="", help="Apply one alignment to every column")
    parser.add_argument("--export", action="store_true", help="Wrap in $$ and collapse rows for publishing")
    parser.add_argument("--preview", action="store_true", help="Print the preview payload as JSON instead of markup")
    parser.add_argument("--watch", action="store_true", help="Re-convert FILE whenever it changes")
    parser.add_argument("--log-level", default=LOG_LEVEL, help=f"Logging level (default: {LOG_LEVEL})")
    return parser


def style_from_args(args: argparse.Namespace) -> StyleConfig:
    """Build a StyleConfig from parsed command-line arguments."""
    return StyleConfig(
        bold_header=args.bold_header,
        bold_first_column=args.bold_first_column,
        size=args.size,
        text_style=args.text_style,
        row_spacing=args.row_spacing,
        export_mode=args.export,
    )


def apply_alignments(session: ConversionSession, args: argparse.Namespace) -> None:
    """Apply --align-all, then any explicit --align entries, to the session."""
    session.align_all(args.align_all or None)
    for index, value in enumerate(v.strip() for v in args.align.split(",") if v.strip()):
        if index >= session.column_count:
            logger.warning("Ignoring alignment %r for column %d; table has %d columns", value, index + 1, session.column_count)
            break
        session.set_column_alignment(index, Alignment(value))


def render(session: ConversionSession, raw: str, args: argparse.Namespace) -> str:
    """Convert *raw* with the CLI options and return the text to print."""
    result = session.convert(raw, args.dialect)
    if result.cleared:
        return ""
    apply_alignments(session, args)
    if args.preview:
        return session.result().preview.model_dump_json(indent=2)
    return session.copy_text()


def watch(path: Path, session: ConversionSession, args: argparse.Namespace) -> None:
    """Poll *path* and print a fresh conversion after each burst of edits."""
    debouncer = Debouncer()

    def _convert_and_print() -> None:
        try:
            output = render(session, path.read_text(encoding="utf-8"), args)
        except Table2KatexError as exc:
            print(notice_for(exc).message, file=sys.stderr)
            return
        print(output, flush=True)

    last_mtime = None
    logger.info("Watching %s (Ctrl-C to stop)", path)
    try:
        while True:
            try:
                mtime = path.stat().st_mtime
            except FileNotFoundError:
                mtime = None
            if mtime != last_mtime:
                last_mtime = mtime
                if mtime is not None:
                    debouncer.schedule(str(path), _convert_and_print)
            time.sleep(WATCH_POLL_SECONDS)
    except KeyboardInterrupt:
        debouncer.cancel_all()


def main(argv: list[str] | None = None) -> int:
    """Entry point for the table2katex command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    try:
        session = ConversionSession(style_from_args(args))
    except ValidationError as exc:
        parser.error(str(exc))

    if args.watch:
        if args.file is None:
            parser.error("--watch requires a FILE")
        watch(args.file, session, args)
        return 0

    raw = args.file.read_text(encoding="utf-8") if args.file else sys.stdin.read()
    try:
        output = render(session, raw, args)
    except Table2KatexError as exc:
        print(notice_for(exc).message, file=sys.stderr)
        return 1
    except ValueError as exc:
        parser.error(str(exc))

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
