import io
import zipfile
import zlib

from folderdeck.archive.base import BaseArchiveReader
from folderdeck.archive.exceptions import ArchiveCorruptError
from folderdeck.processor.models import ArchiveEntry


class ZipArchiveReader(BaseArchiveReader):
    """Reads ZIP archives using the standard library zipfile module."""

    def read(self, archive_bytes: bytes) -> list[ArchiveEntry]:
        try:
            with zipfile.ZipFile(io.BytesIO(archive_bytes)) as archive:
                return [
                    ArchiveEntry(path=info.filename, payload=archive.read(info))
                    for info in archive.infolist()
                    if not info.is_dir()
                ]
        except (
            zipfile.BadZipFile,
            zlib.error,
            EOFError,
            NotImplementedError,  # unsupported compression method
            RuntimeError,  # encrypted member
        ) as exc:
            raise ArchiveCorruptError(f"ZIP archive could not be read: {exc}") from exc
