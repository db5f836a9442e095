from abc import ABC, abstractmethod

from folderdeck.processor.models import ArchiveEntry


class BaseArchiveReader(ABC):
    """Contract for all archive reading adapters."""

    @abstractmethod
    def read(self, archive_bytes: bytes) -> list[ArchiveEntry]:
        """List the file entries of an archive.

        Args:
            archive_bytes: Raw archive file content.

        Returns:
            Entries in archive order. Directory markers are not included.

        Raises:
            ArchiveCorruptError: if the archive cannot be opened or read.
        """
