"""FastAPI web front end for the table-to-KaTeX converter."""
