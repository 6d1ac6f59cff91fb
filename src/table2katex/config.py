"""Shared configuration for the table-to-KaTeX converter front ends."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Quiet interval before a burst of input edits triggers one conversion
DEBOUNCE_SECONDS = int(os.getenv("TABLE2KATEX_DEBOUNCE_MS", "300")) / 1000

# Lifetime of transient user notices (toasts)
NOTICE_SECONDS = int(os.getenv("TABLE2KATEX_NOTICE_MS", "2000")) / 1000

HOST = os.getenv("TABLE2KATEX_HOST", "127.0.0.1")
PORT = int(os.getenv("TABLE2KATEX_PORT", "8000"))

LOG_LEVEL = os.getenv("TABLE2KATEX_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def static_path() -> Path:
    """Return the directory holding the web front end's static assets."""
    return Path(__file__).parent / "web" / "static"
