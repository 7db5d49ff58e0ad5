"""Data models for the harvest pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class DownloadStatus(str, Enum):
    """Outcome of a single :func:`~harvester.scraper.downloader.download_pdf` call."""

    DOWNLOADED = "downloaded"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class DownloadResult:
    """What happened to one PDF link."""

    url: str
    status: DownloadStatus
    path: Optional[Path] = None
    reason: str = ""
    size: int = 0

    @property
    def ok(self) -> bool:
        """``True`` unless the item failed; a skip counts as success."""
        return self.status is not DownloadStatus.FAILED


@dataclass
class HarvestReport:
    """Summary of a full run: the link set and one result per link."""

    source_url: str
    links: List[str] = field(default_factory=list)
    results: List[DownloadResult] = field(default_factory=list)

    def _with_status(self, status: DownloadStatus) -> List[DownloadResult]:
        return [r for r in self.results if r.status is status]

    @property
    def downloaded(self) -> List[DownloadResult]:
        return self._with_status(DownloadStatus.DOWNLOADED)

    @property
    def skipped(self) -> List[DownloadResult]:
        return self._with_status(DownloadStatus.SKIPPED)

    @property
    def failed(self) -> List[DownloadResult]:
        return self._with_status(DownloadStatus.FAILED)
