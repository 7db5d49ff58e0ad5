"""Scraper package: page fetch, PDF link extraction, and file download."""

from harvester.scraper.downloader import download_pdf
from harvester.scraper.extractor import dedupe, extract_pdf_links
from harvester.scraper.fetcher import fetch_page, load_page
from harvester.scraper.filenames import safe_filename
from harvester.scraper.models import DownloadResult, DownloadStatus, HarvestReport

__all__ = [
    "fetch_page",
    "load_page",
    "extract_pdf_links",
    "dedupe",
    "safe_filename",
    "download_pdf",
    "DownloadResult",
    "DownloadStatus",
    "HarvestReport",
]
