"""Page acquisition: one HTTP GET, or a locally cached copy of the page."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from harvester import storage
from harvester.config import settings

logger = logging.getLogger(__name__)


def _page_client() -> httpx.Client:
    kwargs = {"headers": settings.headers, "follow_redirects": True}
    if settings.page_timeout is not None:
        kwargs["timeout"] = settings.page_timeout
    return httpx.Client(**kwargs)


def fetch_page(url: str, client: Optional[httpx.Client] = None) -> bytes:
    """Fetch *url* and return the raw response body.

    Never raises for network trouble: a transport or body-read error is logged
    and ``b""`` is returned, which downstream yields zero links.  A non-2xx
    status is logged but its body is still returned.  No retries.
    """
    # Over-long host labels fail IDNA encoding with UnicodeError (a ValueError).
    try:
        if client is None:
            with _page_client() as own_client:
                response = own_client.get(url)
        else:
            response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        logger.error("HTTP request for %s failed: %s", url, exc)
        return b""

    if not response.is_success:
        logger.warning("Page %s answered HTTP %d", url, response.status_code)
    return response.content


def load_page(
    url: str,
    cache_file: str | Path,
    client: Optional[httpx.Client] = None,
) -> str:
    """Return the page text for *url*, reading *cache_file* when it exists.

    On a cache miss the page is fetched and written to *cache_file* once.  An
    empty fetch result is returned but not cached, so the next run tries the
    network again.
    """
    cache_path = Path(cache_file)
    if storage.file_exists(cache_path):
        logger.info("Using cached page %s", cache_path)
        return storage.read_text(cache_path)

    logger.info("Fetching %s", url)
    content = fetch_page(url, client=client).decode("utf-8", errors="replace")
    if not content:
        logger.warning("Empty page content from %s; nothing cached", url)
        return ""

    if storage.append_text(cache_path, content):
        logger.info("Cached page to %s", cache_path)
    return content
