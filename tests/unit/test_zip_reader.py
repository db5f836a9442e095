import zipfile
from unittest.mock import patch

import pytest

from folderdeck.archive.exceptions import ArchiveCorruptError
from folderdeck.archive.zip_reader import ZipArchiveReader


class TestReadEntries:
    def test_returns_entries_in_archive_order(self, sample_zip_bytes: bytes) -> None:
        entries = ZipArchiveReader().read(sample_zip_bytes)

        assert [e.path for e in entries] == ["a/1.png", "a/2.jpg", "b/x.gif", "loose.png"]

    def test_exposes_payloads(self, sample_zip_bytes: bytes) -> None:
        entries = ZipArchiveReader().read(sample_zip_bytes)

        assert entries[0].payload == b"png-1"
        assert entries[2].payload == b"gif-x"

    def test_skips_directory_markers(self, zip_builder) -> None:
        data = zip_builder([("photos/", b""), ("photos/nested/", b""), ("photos/a.png", b"x")])

        entries = ZipArchiveReader().read(data)

        assert [e.path for e in entries] == ["photos/a.png"]

    def test_empty_archive_yields_no_entries(self, zip_builder) -> None:
        assert ZipArchiveReader().read(zip_builder([])) == []


class TestReadRaisesForCorruptArchive:
    def test_raises_for_non_zip_bytes(self) -> None:
        with pytest.raises(ArchiveCorruptError, match="could not be read"):
            ZipArchiveReader().read(b"definitely not a zip file")

    def test_raises_for_empty_bytes(self) -> None:
        with pytest.raises(ArchiveCorruptError):
            ZipArchiveReader().read(b"")

    def test_raises_for_truncated_archive(self, sample_zip_bytes: bytes) -> None:
        with pytest.raises(ArchiveCorruptError):
            ZipArchiveReader().read(sample_zip_bytes[: len(sample_zip_bytes) // 2])

    @pytest.mark.parametrize(
        "error",
        [
            RuntimeError("File 'a/1.png' is encrypted, password required for extraction"),
            NotImplementedError("That compression method is not supported"),
        ],
    )
    def test_raises_for_unreadable_member(self, sample_zip_bytes: bytes, error: Exception) -> None:
        with (
            patch.object(zipfile.ZipFile, "read", side_effect=error),
            pytest.raises(ArchiveCorruptError, match="could not be read") as exc_info,
        ):
            ZipArchiveReader().read(sample_zip_bytes)

        assert exc_info.value.__cause__ is error
