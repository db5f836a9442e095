import mimetypes
from collections.abc import Iterable

from folderdeck.logging.logger import Log
from folderdeck.processor.models import ArchiveEntry, ImageFile, ImageFolder
from folderdeck.resources.registry import ResourceRegistry

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


def is_image_file(file_name: str) -> bool:
    """Check the file name against the recognized image extensions, ignoring case."""
    return file_name.lower().endswith(IMAGE_EXTENSIONS)


class FolderGrouper:
    """Groups archive entries into image folders keyed by their top-level segment."""

    def __init__(self, registry: ResourceRegistry) -> None:
        self._registry = registry

    def group(self, entries: Iterable[ArchiveEntry]) -> list[ImageFolder]:
        """Build folders in first-encounter order, images in archive order.

        Loose top-level files and entries without a recognized image
        extension are skipped, so every returned folder has at least one image.
        """
        folders: dict[str, ImageFolder] = {}
        for entry in entries:
            segments = entry.path.split("/")
            if len(segments) < 2:
                continue
            folder_name, file_name = segments[0], segments[-1]
            if not is_image_file(file_name):
                continue
            if not folder_name:
                Log.debug(f"Skipping entry with empty folder segment: {entry.path}")
                continue
            folder = folders.setdefault(folder_name, ImageFolder(name=folder_name))
            folder.images.append(self._make_image(file_name, entry.payload))
        return list(folders.values())

    def _make_image(self, file_name: str, content: bytes) -> ImageFile:
        media_type = mimetypes.guess_type(file_name)[0] or _FALLBACK_MEDIA_TYPE
        url = self._registry.create(content, media_type, filename=file_name)
        return ImageFile(name=file_name, content=content, access_url=url)
