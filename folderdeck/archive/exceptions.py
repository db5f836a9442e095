class ArchiveCorruptError(Exception):
    """Raised when an archive cannot be opened or one of its members cannot be read."""
