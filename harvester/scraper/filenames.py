"""Local filename derivation for downloaded PDFs."""

from __future__ import annotations

import posixpath
import re
from urllib.parse import unquote, unquote_plus, urlsplit

_UNSAFE_RUN_RE = re.compile(r"[^a-z0-9._-]+")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SEPARATOR = "_"


def _last_segment(path: str) -> str:
    """Final element of a URL path, ignoring trailing slashes."""
    if not path:
        return "."
    trimmed = path.rstrip("/")
    if not trimmed:
        return "/"
    return posixpath.basename(trimmed)


def safe_filename(url: str) -> str:
    """Derive a lowercase, filesystem-safe filename from *url*.

    The URL path is percent-decoded before its final segment is taken, so an
    encoded ``%2F`` splits segments.  That segment is decoded once more (``+``
    counts as a space; a malformed escape leaves it raw), lowercased, and every
    run of characters outside ``[a-z0-9._-]`` becomes a single ``_``.

    Returns ``""`` if *url* cannot be parsed or its path holds a malformed
    escape.

    Two different URLs can map to the same name; nothing here resolves that.
    """
    try:
        parsed = urlsplit(url)
    except ValueError:
        return ""
    if _BAD_ESCAPE_RE.search(parsed.path):
        return ""

    # Undecodable bytes become U+FFFD, which the sanitiser turns into "_".
    segment = _last_segment(unquote(parsed.path, errors="replace"))
    if _BAD_ESCAPE_RE.search(segment):
        decoded = segment
    else:
        decoded = unquote_plus(segment, errors="replace")

    return _UNSAFE_RUN_RE.sub(_SEPARATOR, decoded.lower())
