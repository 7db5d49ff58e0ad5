"""End-to-end harvest run.

    load page (cache or network) → extract PDF links → dedupe →
    ensure output directory → download each link, one at a time

Each download is fully resolved before the next one starts, and a failing
item never stops the batch.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from harvester import storage
from harvester.config import settings
from harvester.scraper.downloader import download_client, download_pdf
from harvester.scraper.extractor import dedupe, extract_pdf_links
from harvester.scraper.fetcher import load_page
from harvester.scraper.models import HarvestReport

logger = logging.getLogger(__name__)


def run_harvest(
    source_url: Optional[str] = None,
    cache_file: Optional[str | Path] = None,
    output_dir: Optional[str | Path] = None,
    client: Optional[httpx.Client] = None,
) -> HarvestReport:
    """Run the whole pipeline and return a :class:`HarvestReport`.

    Arguments left as ``None`` fall back to :data:`harvester.config.settings`.
    When *client* is given it is used for every request and left open;
    otherwise one client is created for the run and closed at the end.
    """
    source_url = source_url or settings.source_url
    cache_file = Path(cache_file) if cache_file is not None else settings.cache_file
    output_dir = Path(output_dir) if output_dir is not None else settings.output_dir

    report = HarvestReport(source_url=source_url)

    html = load_page(source_url, cache_file, client=client)
    report.links = dedupe(extract_pdf_links(html))
    logger.info("Found %d PDF link(s) on %s", len(report.links), source_url)

    storage.ensure_directory(output_dir, settings.dir_mode)

    own_client = client is None
    http = download_client() if own_client else client
    try:
        for url in report.links:
            report.results.append(download_pdf(url, output_dir, client=http))
    finally:
        if own_client:
            http.close()

    logger.info(
        "Harvest finished: %d downloaded, %d skipped, %d failed",
        len(report.downloaded),
        len(report.skipped),
        len(report.failed),
    )
    return report
