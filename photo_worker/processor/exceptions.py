class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class ArtifactWriteError(ProcessorError):
    """Raised when a diagnostic artifact cannot be written to disk."""
