import io
import zipfile
from collections.abc import Callable

import pytest

ZipBuilder = Callable[[list[tuple[str, bytes]]], bytes]


def _build_zip(entries: list[tuple[str, bytes]]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for path, payload in entries:
            if path.endswith("/"):
                archive.writestr(zipfile.ZipInfo(path), b"")
            else:
                archive.writestr(path, payload)
    return buf.getvalue()


@pytest.fixture()
def zip_builder() -> ZipBuilder:
    """Build an in-memory ZIP archive from (path, payload) pairs; paths ending in '/' are directories."""
    return _build_zip


@pytest.fixture()
def sample_zip_bytes() -> bytes:
    """Two image folders, a directory marker and a loose top-level image."""
    return _build_zip(
        [
            ("a/", b""),
            ("a/1.png", b"png-1"),
            ("a/2.jpg", b"jpg-2"),
            ("b/x.gif", b"gif-x"),
            ("loose.png", b"loose"),
        ]
    )


@pytest.fixture()
def no_folders_zip_bytes() -> bytes:
    """Archive with files but nothing that qualifies as a folder image."""
    return _build_zip(
        [
            ("loose.png", b"loose"),
            ("docs/readme.txt", b"text"),
        ]
    )
