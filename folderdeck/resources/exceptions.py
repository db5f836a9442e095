class ResourceNotFoundError(KeyError):
    """Raised when a reference is unknown to the registry or was already released."""
