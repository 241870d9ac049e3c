class CompressionError(Exception):
    """Base exception for raster decode/encode failures inside the pipeline."""


class ImageDecodeError(CompressionError):
    """Raised when bytes cannot be decoded by any known image decoder."""


class ImageEncodeError(CompressionError):
    """Raised when a raster cannot be encoded to JPEG."""


class ImageResizeError(CompressionError):
    """Raised when a raster cannot be resampled to the target size."""
