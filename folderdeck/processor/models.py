from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadedFile:
    """A file handed over by the caller: its client-side name and raw bytes."""

    name: str
    content: bytes


@dataclass(frozen=True)
class ArchiveEntry:
    """A single non-directory member of an archive."""

    path: str  # archive-internal, forward-slash separated
    payload: bytes


@dataclass(frozen=True)
class ImageFile:
    """An image found inside a folder of the archive."""

    name: str  # last path segment only
    content: bytes
    access_url: str  # reference owned by the session's ResourceRegistry


@dataclass
class ImageFolder:
    """Images grouped under one top-level archive folder, in archive order."""

    name: str
    images: list[ImageFile] = field(default_factory=list)


@dataclass
class ProcessingStep:
    """Display state of one pipeline phase."""

    id: str
    label: str
    completed: bool = False
    progress: float = 0.0


@dataclass(frozen=True)
class ProcessingResult:
    """Terminal outcome of one processing run."""

    success: bool
    message: str
    download_url: str | None = None
    filename: str | None = None
