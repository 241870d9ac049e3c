class PhotoServiceError(Exception):
    """Base exception for photo fetch/upload collaborators."""


class PhotoFetchError(PhotoServiceError):
    """Raised when photo bytes cannot be retrieved for a record."""


class PhotoUploadError(PhotoServiceError):
    """Raised when compressed photo bytes are rejected or cannot be sent."""
