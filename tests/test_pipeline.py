"""End-to-end tests for :func:`harvester.pipeline.run_harvest`.

The source page and every PDF are served by ``respx``; the cache file and the
output folder live under ``tmp_path``.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from harvester.pipeline import run_harvest
from harvester.scraper.models import DownloadStatus

_SOURCE = "https://ex.com/sds"
_PDF = b"%PDF-1.7 body"
_PDF_HEADERS = {"Content-Type": "application/pdf"}


@pytest.fixture
def paths(tmp_path):
    return tmp_path / "page.html", tmp_path / "PDFs"


def _pdf(status: int = 200) -> httpx.Response:
    return httpx.Response(status, content=_PDF, headers=_PDF_HEADERS)


class TestRunHarvest:
    def test_single_link_scenario(self, paths) -> None:
        cache, out = paths
        page = "<a href='https://ex.com/a.pdf'>x</a> https://ex.com/a.pdf"
        with respx.mock:
            respx.get(_SOURCE).mock(return_value=httpx.Response(200, text=page))
            pdf_route = respx.get("https://ex.com/a.pdf").mock(return_value=_pdf())
            report = run_harvest(_SOURCE, cache, out)

        assert report.links == ["https://ex.com/a.pdf"]
        assert pdf_route.call_count == 1
        assert sorted(p.name for p in out.iterdir()) == ["a.pdf"]
        assert (out / "a.pdf").read_bytes() == _PDF
        assert [r.status for r in report.results] == [DownloadStatus.DOWNLOADED]

    def test_second_run_skips_everything(self, paths) -> None:
        cache, out = paths
        page = "https://ex.com/a.pdf https://ex.com/b.pdf"
        with respx.mock(assert_all_called=False) as router:
            page_route = router.get(_SOURCE).mock(return_value=httpx.Response(200, text=page))
            a_route = router.get("https://ex.com/a.pdf").mock(return_value=_pdf())
            b_route = router.get("https://ex.com/b.pdf").mock(return_value=_pdf())

            first = run_harvest(_SOURCE, cache, out)
            (out / "a.pdf").write_bytes(b"edited locally")
            second = run_harvest(_SOURCE, cache, out)

        assert len(first.downloaded) == 2
        assert len(second.skipped) == 2
        assert second.downloaded == []
        assert page_route.call_count == 1
        assert a_route.call_count == 1
        assert b_route.call_count == 1
        assert (out / "a.pdf").read_bytes() == b"edited locally"

    def test_failed_item_does_not_stop_batch(self, paths) -> None:
        cache, out = paths
        page = "https://ex.com/a.pdf https://ex.com/b.pdf https://ex.com/c.pdf"
        with respx.mock:
            respx.get(_SOURCE).mock(return_value=httpx.Response(200, text=page))
            respx.get("https://ex.com/a.pdf").mock(return_value=_pdf())
            respx.get("https://ex.com/b.pdf").mock(return_value=_pdf(status=500))
            respx.get("https://ex.com/c.pdf").mock(side_effect=httpx.ConnectError("reset"))
            report = run_harvest(_SOURCE, cache, out)

        assert [r.status for r in report.results] == [
            DownloadStatus.DOWNLOADED,
            DownloadStatus.FAILED,
            DownloadStatus.FAILED,
        ]
        assert sorted(p.name for p in out.iterdir()) == ["a.pdf"]

    def test_host_encoding_error_does_not_stop_batch(self, paths) -> None:
        cache, out = paths
        long_host = "https://" + "a" * 70 + ".example.com/x.pdf"
        page = f"{long_host} https://ex.com/b.pdf"
        with respx.mock:
            respx.get(_SOURCE).mock(return_value=httpx.Response(200, text=page))
            respx.get(long_host).mock(side_effect=UnicodeError("label empty or too long"))
            respx.get("https://ex.com/b.pdf").mock(return_value=_pdf())
            report = run_harvest(_SOURCE, cache, out)

        assert report.links == [long_host, "https://ex.com/b.pdf"]
        assert [r.status for r in report.results] == [
            DownloadStatus.FAILED,
            DownloadStatus.DOWNLOADED,
        ]
        assert sorted(p.name for p in out.iterdir()) == ["b.pdf"]

    def test_unreachable_page_yields_empty_report(self, paths) -> None:
        cache, out = paths
        with respx.mock:
            respx.get(_SOURCE).mock(side_effect=httpx.ConnectError("no route"))
            report = run_harvest(_SOURCE, cache, out)

        assert report.links == []
        assert report.results == []
        assert not cache.exists()
        assert out.is_dir()

    def test_uses_cached_page(self, paths) -> None:
        cache, out = paths
        cache.write_text("https://ex.com/cached.pdf\n", encoding="utf-8")
        with respx.mock:
            respx.get("https://ex.com/cached.pdf").mock(return_value=_pdf())
            report = run_harvest(_SOURCE, cache, out)

        assert report.links == ["https://ex.com/cached.pdf"]
        assert (out / "cached.pdf").exists()

    def test_directory_creation_failure_is_not_fatal(self, paths) -> None:
        cache, out = paths
        out.write_text("a file where the folder should be")
        with respx.mock:
            respx.get(_SOURCE).mock(return_value=httpx.Response(200, text="https://ex.com/a.pdf"))
            respx.get("https://ex.com/a.pdf").mock(return_value=_pdf())
            report = run_harvest(_SOURCE, cache, out)

        assert len(report.failed) == 1
        assert out.is_file()

    def test_defaults_come_from_settings(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr("harvester.config.settings.source_url", _SOURCE)
        monkeypatch.setattr("harvester.config.settings.cache_file", tmp_path / "c.html")
        monkeypatch.setattr("harvester.config.settings.output_dir", tmp_path / "out")
        with respx.mock:
            respx.get(_SOURCE).mock(return_value=httpx.Response(200, text="https://ex.com/d.pdf"))
            respx.get("https://ex.com/d.pdf").mock(return_value=_pdf())
            report = run_harvest()

        assert report.source_url == _SOURCE
        assert (tmp_path / "out" / "d.pdf").exists()
        assert (tmp_path / "c.html").exists()
