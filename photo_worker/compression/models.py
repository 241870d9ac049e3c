from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from photo_worker.config.settings import Settings


class CompressionStatus(str, Enum):
    """Terminal outcome of one compression call."""

    OK = "ok"
    NOT_IMAGE = "not-image"
    DECODE_ERROR = "decode-error"
    ENCODE_ERROR = "encode-error"
    RESIZE_ENCODE_ERROR = "resize-encode-error"
    TOO_LARGE_AFTER_RESIZE = "too-large-after-resize"


@dataclass(frozen=True)
class CompressionConfig:
    """Encode quality, output ceiling and downscale bounding box."""

    quality: int = 40
    size_ceiling_bytes: int = 37_500
    max_width: int = 400
    max_height: int = 600

    def __post_init__(self) -> None:
        if not 1 <= self.quality <= 100:
            raise ValueError(f"quality must be within 1..100, got {self.quality}")
        if self.size_ceiling_bytes <= 0:
            raise ValueError(
                f"size_ceiling_bytes must be positive, got {self.size_ceiling_bytes}"
            )
        if self.max_width <= 0 or self.max_height <= 0:
            raise ValueError(
                f"bounding box must be positive, got {self.max_width}x{self.max_height}"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> CompressionConfig:
        return cls(
            quality=settings.compression_quality,
            size_ceiling_bytes=settings.compression_size_ceiling_bytes,
            max_width=settings.compression_max_width,
            max_height=settings.compression_max_height,
        )


@dataclass(frozen=True)
class EncodedResult:
    """Output of one compression call.

    ``data`` is non-empty only when ``status`` is ``ok``. On failures,
    ``compressed_size`` keeps the last measured encode size (0 if nothing was
    encoded) and, for ``decode-error``, ``failed_input`` carries the raw bytes and
    ``decode_error`` the message of every failed decoder attempt.
    """

    data: bytes
    original_size: int
    compressed_size: int
    status: CompressionStatus
    width: int = 0
    height: int = 0
    resized: bool = False
    failed_input: bytes = b""
    decode_error: str = ""

    @property
    def is_ok(self) -> bool:
        return self.status is CompressionStatus.OK and bool(self.data)
