"""ght: Get HTML Title.

Fetches a page, extracts its `<title>` and prints it (optionally as a Markdown
link, optionally copied to the clipboard).
"""

__version__ = "0.1.0"
