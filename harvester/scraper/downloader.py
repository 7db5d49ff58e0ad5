"""Single-file PDF download with presence-based skipping and basic validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from harvester.config import settings
from harvester.scraper.filenames import safe_filename
from harvester.scraper.models import DownloadResult, DownloadStatus

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def download_client() -> httpx.Client:
    """Client configured the way every PDF request expects (timeout, redirects)."""
    return httpx.Client(
        headers=settings.headers,
        timeout=settings.download_timeout,
        follow_redirects=True,
    )


def _failed(url: str, path: Optional[Path], reason: str) -> DownloadResult:
    logger.warning("Skipping %s: %s", url, reason)
    return DownloadResult(url=url, status=DownloadStatus.FAILED, path=path, reason=reason)


def _discard_partial(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.error("Could not remove partial file %s: %s", path, exc)


def _get(url: str, client: Optional[httpx.Client]) -> httpx.Response:
    if client is not None:
        return client.get(url, timeout=settings.download_timeout)
    with download_client() as own_client:
        return own_client.get(url)


def download_pdf(
    url: str,
    folder: str | Path,
    client: Optional[httpx.Client] = None,
) -> DownloadResult:
    """Download *url* into *folder* under its derived filename.

    The item is skipped without a network call if the destination already
    exists.  Any transport error, non-200 status, non-PDF ``Content-Type``,
    empty body, or write error fails this item only; no file is left behind
    and an existing file is never overwritten.
    """
    filename = safe_filename(url)
    if filename in ("", ".", ".."):
        return _failed(url, None, "no usable filename")

    path = Path(folder) / filename
    if path.exists():
        logger.info("Already downloaded, skipping: %s", path)
        return DownloadResult(
            url=url, status=DownloadStatus.SKIPPED, path=path, reason="already exists"
        )

    # Over-long host labels fail IDNA encoding with UnicodeError (a ValueError).
    try:
        response = _get(url, client)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        return _failed(url, path, f"request failed: {exc}")

    if response.status_code != httpx.codes.OK:
        return _failed(url, path, f"bad response HTTP {response.status_code}")

    content_type = response.headers.get("content-type", "")
    if PDF_CONTENT_TYPE not in content_type.lower():
        return _failed(url, path, f"invalid content type {content_type!r}")

    body = response.content
    if not body:
        return _failed(url, path, "empty body")

    try:
        with open(path, "xb") as fh:
            fh.write(body)
    except FileExistsError:
        logger.info("Already downloaded, skipping: %s", path)
        return DownloadResult(
            url=url, status=DownloadStatus.SKIPPED, path=path, reason="already exists"
        )
    except OSError as exc:
        _discard_partial(path)
        return _failed(url, path, f"write failed: {exc}")

    logger.info("Downloaded %d bytes: %s -> %s", len(body), url, path)
    return DownloadResult(
        url=url, status=DownloadStatus.DOWNLOADED, path=path, size=len(body)
    )
