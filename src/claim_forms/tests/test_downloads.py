"""Tests for the temp-file lifecycle of downloads."""

from __future__ import annotations

from pathlib import Path

import pytest

from claim_forms.downloads import iter_file_and_remove, remove_temp_file, write_temp_pdf


def test_write_temp_pdf_name(temp_dir: Path) -> None:
    path = write_temp_pdf(b"%PDF-1.7 test", "SAHLReport_filled")
    assert path.parent == temp_dir
    assert path.name.startswith("SAHLReport_filled_")
    assert path.suffix == ".pdf"
    assert path.read_bytes() == b"%PDF-1.7 test"


def test_same_millisecond_writes_get_distinct_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("claim_forms.downloads.time.time", lambda: 1700000000.123)
    first = write_temp_pdf(b"%PDF-A", "SAHLReport_filled", temp_dir=tmp_path)
    second = write_temp_pdf(b"%PDF-B", "SAHLReport_filled", temp_dir=tmp_path)

    assert first != second
    assert first.name.startswith("SAHLReport_filled_1700000000123_")
    assert b"".join(iter_file_and_remove(first)) == b"%PDF-A"
    assert b"".join(iter_file_and_remove(second)) == b"%PDF-B"


def test_stream_removes_file(tmp_path: Path) -> None:
    path = write_temp_pdf(b"x" * 10, "discovery-1", temp_dir=tmp_path)
    assert b"".join(iter_file_and_remove(path, chunk_size=4)) == b"x" * 10
    assert not path.exists()


def test_aborted_stream_removes_file(tmp_path: Path) -> None:
    path = write_temp_pdf(b"x" * 10, "discovery-1", temp_dir=tmp_path)
    stream = iter_file_and_remove(path, chunk_size=4)
    assert next(stream) == b"xxxx"
    stream.close()
    assert not path.exists()


def test_remove_missing_file_is_quiet(tmp_path: Path) -> None:
    remove_temp_file(tmp_path / "gone.pdf")


def test_remove_failure_is_logged(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_temp_pdf(b"x", "noncompliance-1", temp_dir=tmp_path)

    def fail_unlink(self, missing_ok: bool = False) -> None:
        raise PermissionError("locked")

    monkeypatch.setattr(Path, "unlink", fail_unlink)
    with caplog.at_level("ERROR"):
        remove_temp_file(path)
    assert "Error deleting temporary file" in caplog.text
