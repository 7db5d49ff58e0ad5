"""PDF harvester CLI.

Usage:
    python cli/main.py --help

Commands:
    run       → fetch the source page and download every linked PDF
    links     → print the PDF links found on the source page
    download  → download a single PDF URL
    filename  → print the local filename a URL would be saved under
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from harvester.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from harvester import storage
from harvester.config import settings
from harvester.log import configure_logging

app = typer.Typer(
    name="harvest",
    help="Download every PDF linked from a web page.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)."
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level or settings.log_level)


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------
@app.command("run")
def run(
    url: Optional[str] = typer.Option(None, help="Page to scan for PDF links."),
    cache_file: Optional[Path] = typer.Option(None, help="Local copy of the page."),
    output_dir: Optional[Path] = typer.Option(None, help="Folder for downloaded PDFs."),
    refresh: bool = typer.Option(False, "--refresh", help="Discard the cached page first."),
    strict: bool = typer.Option(False, "--strict", help="Exit 1 if any download failed."),
) -> None:
    """Fetch the page, extract PDF links, and download each one."""
    from harvester.pipeline import run_harvest

    source_url = url or settings.source_url
    cache_path = cache_file or settings.cache_file

    if refresh and storage.file_exists(cache_path):
        if storage.remove_file(cache_path):
            typer.echo(f"[run] Removed cached page {cache_path}")
        else:
            typer.echo(f"[run] Could not remove cached page {cache_path}; using it as is")

    typer.echo(f"[run] Harvesting {source_url!r} …")
    report = run_harvest(source_url, cache_path, output_dir)

    typer.echo(f"[run] Links      : {len(report.links)}")
    typer.echo(f"[run] Downloaded : {len(report.downloaded)}")
    typer.echo(f"[run] Skipped    : {len(report.skipped)}")
    typer.echo(f"[run] Failed     : {len(report.failed)}")
    for result in report.failed:
        typer.echo(f"  ✗ {result.url}  ({result.reason})")

    if strict and report.failed:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Inspection helpers
# ---------------------------------------------------------------------------
@app.command("links")
def links(
    url: Optional[str] = typer.Option(None, help="Page to scan for PDF links."),
    cache_file: Optional[Path] = typer.Option(None, help="Local copy of the page."),
) -> None:
    """Print the deduplicated PDF links found on the page."""
    from harvester.scraper import dedupe, extract_pdf_links, load_page

    source_url = url or settings.source_url
    html = load_page(source_url, cache_file or settings.cache_file)
    found = dedupe(extract_pdf_links(html))
    if not found:
        typer.echo("[links] No PDF links found.")
        return
    for link in found:
        typer.echo(link)


@app.command("filename")
def filename(
    url: str = typer.Argument(..., help="PDF URL."),
) -> None:
    """Print the local filename *url* would be saved under."""
    from harvester.scraper import safe_filename

    typer.echo(safe_filename(url))


@app.command("download")
def download(
    url: str = typer.Argument(..., help="PDF URL to download."),
    output_dir: Optional[Path] = typer.Option(None, help="Folder for downloaded PDFs."),
) -> None:
    """Download a single PDF into the output folder."""
    from harvester.scraper import DownloadStatus, download_pdf

    folder = output_dir or settings.output_dir
    storage.ensure_directory(folder, settings.dir_mode)
    result = download_pdf(url, folder)

    if result.status is DownloadStatus.DOWNLOADED:
        typer.echo(f"[download] ✓ {result.size} bytes → {result.path}")
    elif result.status is DownloadStatus.SKIPPED:
        typer.echo(f"[download] Already downloaded: {result.path}")
    else:
        typer.echo(f"[download] ✗ {url}  ({result.reason})")
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
