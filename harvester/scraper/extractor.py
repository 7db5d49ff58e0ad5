"""PDF link extraction over raw page text.

Matching is purely lexical: the page is never parsed as markup, so a link in
an attribute, a comment, or plain text is matched alike, and a link split
across constructs is silently missed.
"""

from __future__ import annotations

import re
from typing import Iterable, List

# Absolute http(s) URL ending in ".pdf", optionally followed by a query string.
_PDF_LINK_RE = re.compile(r"""https?://[^\s"'<>]+?\.pdf(?:\?[^\s"'<>]*)?""")


def dedupe(items: Iterable[str]) -> List[str]:
    """Return *items* with duplicates removed, keeping first occurrences in order."""
    seen: set[str] = set()
    unique: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def extract_pdf_links(text: str) -> List[str]:
    """Return every distinct PDF URL found in *text*, in first-seen order.

    >>> extract_pdf_links("<a href='https://ex.com/a.pdf'>x</a> https://ex.com/a.pdf")
    ['https://ex.com/a.pdf']
    """
    if not text:
        return []
    return dedupe(m.group(0) for m in _PDF_LINK_RE.finditer(text))
