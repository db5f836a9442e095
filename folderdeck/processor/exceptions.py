class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class EmptyExtractionError(ProcessorError):
    """Raised when an archive holds no recognized images inside any folder."""


class ProcessorBusyError(ProcessorError):
    """Raised when a run is requested while another one is still in flight."""
