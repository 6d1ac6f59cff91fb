"""FastAPI web server for the table-to-KaTeX converter.

Serves a single-page editor (input box, style controls, per-column alignment,
KaTeX preview, copy button) backed by a JSON API over ConversionSession.
Debouncing, toasts, clipboard access and preview rendering happen in the
browser; the server owns parsing, markup generation and export transforms.

Usage:
    python -m table2katex.web.app
    # => Uvicorn running on http://127.0.0.1:8000
"""

import logging
from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from table2katex.config import DEBOUNCE_SECONDS, HOST, LOG_FORMAT, LOG_LEVEL, NOTICE_SECONDS, PORT, static_path
from table2katex.errors import ColumnIndexError, NothingToCopyError, Table2KatexError, TableParseError
from table2katex.schema import AUTO, Alignment, Notice, StyleConfig
from table2katex.session import COPIED_MESSAGE, ConversionSession, notice_for

logger = logging.getLogger(__name__)

STATIC_DIR = static_path()

# ---------------------------------------------------------------------------
# In-memory state (lost on server restart)
# ---------------------------------------------------------------------------

_sessions: dict[str, ConversionSession] = {}  # session_id -> ConversionSession

# HTTP status per session error
_ERROR_STATUS: dict[type, int] = {
    TableParseError: 422,
    NothingToCopyError: 400,
    ColumnIndexError: 400,
}


def get_session(session_id: str) -> ConversionSession:
    """Return the session for *session_id*, creating it on first use."""
    if session_id not in _sessions:
        _sessions[session_id] = ConversionSession()
        logger.info("New session created: %s", session_id)
    return _sessions[session_id]


def _raise_notice(exc: Table2KatexError) -> None:
    """Turn a session error into an HTTP error carrying the user notice."""
    raise HTTPException(status_code=_ERROR_STATUS.get(type(exc), 400), detail=notice_for(exc).model_dump()) from exc


def _parse_alignment(value: str) -> Alignment:
    try:
        return Alignment(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=Notice(message=f"Unknown alignment: {value}", level="error").model_dump()) from exc


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class SessionRequest(BaseModel):
    session_id: str


class ConvertRequest(SessionRequest):
    text: str = ""
    dialect: Literal["auto", "markdown", "csv", "tsv", "space"] = AUTO
    style: StyleConfig = Field(default_factory=StyleConfig)


class RestyleRequest(SessionRequest):
    style: StyleConfig


class AlignmentRequest(SessionRequest):
    index: int
    alignment: str


class AlignAllRequest(SessionRequest):
    alignment: str | None = None


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="Table to KaTeX")
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get("/", response_class=HTMLResponse)
async def index():
    """Serve the editor UI."""
    return HTMLResponse(STATIC_DIR.joinpath("index.html").read_text(encoding="utf-8"))


@app.get("/api/settings")
async def settings():
    """Timing settings the browser uses for debouncing and toasts."""
    return JSONResponse({"debounce_ms": int(DEBOUNCE_SECONDS * 1000), "notice_ms": int(NOTICE_SECONDS * 1000)})


@app.post("/api/convert")
async def convert(body: ConvertRequest):
    """Convert raw table text; empty text clears the session."""
    session = get_session(body.session_id)
    try:
        result = session.convert(body.text, body.dialect, body.style)
    except TableParseError as exc:
        _raise_notice(exc)
    return JSONResponse(result.model_dump(mode="json"))


@app.post("/api/restyle")
async def restyle(body: RestyleRequest):
    """Regenerate the current table with a new style."""
    session = get_session(body.session_id)
    session.restyle(body.style)
    return JSONResponse(session.result().model_dump(mode="json"))


@app.post("/api/alignment")
async def set_alignment(body: AlignmentRequest):
    """Change one column's alignment."""
    session = get_session(body.session_id)
    try:
        session.set_column_alignment(body.index, _parse_alignment(body.alignment))
    except ColumnIndexError as exc:
        _raise_notice(exc)
    return JSONResponse(session.result().model_dump(mode="json"))


@app.post("/api/align-all")
async def align_all(body: AlignAllRequest):
    """Apply one alignment to every column (null or empty leaves them unchanged)."""
    session = get_session(body.session_id)
    session.align_all(_parse_alignment(body.alignment) if body.alignment else None)
    return JSONResponse(session.result().model_dump(mode="json"))


@app.post("/api/copy")
async def copy(body: SessionRequest):
    """Return the text the browser should place on the clipboard."""
    session = get_session(body.session_id)
    try:
        text = session.copy_text()
    except NothingToCopyError as exc:
        _raise_notice(exc)
    return JSONResponse({"text": text, "notice": Notice(message=COPIED_MESSAGE).model_dump()})


@app.post("/api/clear")
async def clear(body: SessionRequest):
    """Drop the session's table and output."""
    result = get_session(body.session_id).clear()
    return JSONResponse(result.model_dump(mode="json"))


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main():
    """Start the web server via uvicorn."""
    import uvicorn  # pylint: disable=import-outside-toplevel

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
