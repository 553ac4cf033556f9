"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from hn2vast.cli import USAGE, main
from hn2vast.exceptions import FetchError


class TestMain:
    """Tests for the main function."""

    def test_no_input_prints_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without arguments the usage text is shown."""
        assert main([]) == 0
        assert USAGE in capsys.readouterr().out

    def test_prints_json_to_stdout(
        self, thread_html: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Without an output path the document goes to stdout."""
        page = tmp_path / "thread.html"
        page.write_text(thread_html, encoding="utf-8")

        assert main([str(page)]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["format"] == "vast"
        assert payload["source"] == str(page)
        assert [c["name"] for c in payload["vast"]["children"]] == ["101", "105"]

    def test_writes_output_file(self, thread_html: str, tmp_path: Path) -> None:
        """The third argument names the output file."""
        page = tmp_path / "thread.html"
        page.write_text(thread_html, encoding="utf-8")
        output = tmp_path / "thread.json"

        assert main([str(page), str(tmp_path), str(output)]) == 0

        payload = json.loads(output.read_text(encoding="utf-8"))
        assert payload["vast"]["type"] == "topic"

    def test_tmpdir_and_no_cache_reach_ingestion(
        self, thread_html: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Remote fetches use the given directory and cache flag."""
        with patch(
            "hn2vast.ingestion.fetch_item_html", AsyncMock(return_value=thread_html)
        ) as mock_fetch:
            assert main(["hn:100", str(tmp_path), "--no-cache"]) == 0

        assert mock_fetch.call_args.kwargs["cache_path"] == tmp_path
        assert mock_fetch.call_args.kwargs["use_cache"] is False
        assert json.loads(capsys.readouterr().out)["source"].endswith("id=100")

    def test_missing_file_is_reported(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Errors go to stderr with a non-zero exit code."""
        assert main([str(tmp_path / "missing.html")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: HTML file not found" in captured.err

    def test_fetch_error_is_reported(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Library errors are reported, not raised."""
        with patch(
            "hn2vast.ingestion.fetch_item_html",
            AsyncMock(side_effect=FetchError("Failed to fetch")),
        ):
            assert main(["hn:100"]) == 1
        assert "error: Failed to fetch" in capsys.readouterr().err

    def test_invalid_input_is_reported(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Unsupported hosts are rejected."""
        assert main(["https://example.com/item?id=1"]) == 1
        assert "Unsupported host" in capsys.readouterr().err

    @pytest.mark.parametrize(
        ("argv", "expected"),
        [
            (["hn:100", "."], Path(".")),
            (["hn:100"], None),
        ],
    )
    def test_tmpdir_is_taken_literally(
        self,
        thread_html: str,
        argv: list[str],
        expected: Path | None,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A given TMPDIR, even ".", is the cache root; omitted means default."""
        with patch(
            "hn2vast.ingestion.fetch_item_html", AsyncMock(return_value=thread_html)
        ) as mock_fetch:
            assert main(argv) == 0

        assert mock_fetch.call_args.kwargs["cache_path"] == expected
        capsys.readouterr()
