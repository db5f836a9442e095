import uuid
from dataclasses import dataclass

from folderdeck.resources.exceptions import ResourceNotFoundError

URL_SCHEME = "memory://"


@dataclass(frozen=True)
class DownloadResource:
    """In-memory content addressable through a registry reference."""

    url: str
    content: bytes
    media_type: str
    filename: str | None = None


class ResourceRegistry:
    """Session-scoped store of ephemeral references to in-memory content.

    Nothing is released implicitly: the owner calls release() or
    release_all() when the references go stale (form reset, new submission).
    """

    def __init__(self) -> None:
        self._resources: dict[str, DownloadResource] = {}

    def create(
        self,
        content: bytes,
        media_type: str,
        filename: str | None = None,
    ) -> str:
        """Register content and return a new reference to it."""
        url = f"{URL_SCHEME}{uuid.uuid4().hex}"
        self._resources[url] = DownloadResource(
            url=url,
            content=content,
            media_type=media_type,
            filename=filename,
        )
        return url

    def resolve(self, url: str) -> DownloadResource:
        """Return the resource behind a reference.

        Raises:
            ResourceNotFoundError: if the reference is unknown or released.
        """
        try:
            return self._resources[url]
        except KeyError:
            raise ResourceNotFoundError(url) from None

    def release(self, url: str) -> bool:
        """Drop a single reference. Returns False if it was not registered."""
        return self._resources.pop(url, None) is not None

    def release_all(self) -> int:
        """Drop every reference and return how many were released."""
        count = len(self._resources)
        self._resources.clear()
        return count

    def __contains__(self, url: object) -> bool:
        return url in self._resources

    def __len__(self) -> int:
        return len(self._resources)
