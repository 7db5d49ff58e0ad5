"""Centralised settings for the PDF harvester.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  The defaults reproduce
a plain run against the Unilever Professional SDS page.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_float(name: str) -> Optional[float]:
    value = os.environ.get(name, "").strip()
    return float(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Source page
    # ------------------------------------------------------------------
    source_url: str = field(
        default_factory=lambda: os.environ.get(
            "HARVEST_SOURCE_URL", "https://www.unileverprofessional.co.za/sds"
        )
    )
    cache_file: Path = field(
        default_factory=lambda: Path(
            os.environ.get("HARVEST_CACHE_FILE", "unileverprofessional.html")
        )
    )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("HARVEST_OUTPUT_DIR", "PDFs"))
    )
    dir_mode: int = field(
        default_factory=lambda: int(os.environ.get("HARVEST_DIR_MODE", "755"), 8)
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    download_timeout: float = field(
        default_factory=lambda: float(os.environ.get("HARVEST_DOWNLOAD_TIMEOUT", "30.0"))
    )
    # None keeps the httpx client default for the page request.
    page_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("HARVEST_PAGE_TIMEOUT")
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "HARVEST_USER_AGENT", "Mozilla/5.0 (compatible; PDFHarvester/1.0)"
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("HARVEST_LOG_LEVEL", "INFO")
    )

    @property
    def headers(self) -> dict[str, str]:
        """Default request headers shared by every HTTP call."""
        return {"User-Agent": self.user_agent}


# Module-level singleton, import this everywhere:
#   from harvester.config import settings
settings = Settings()
