from abc import ABC, abstractmethod
from dataclasses import dataclass

from PIL import Image

from photo_worker.compression.models import CompressionConfig, CompressionStatus, EncodedResult


@dataclass(slots=True)
class CompressionContext:
    raw_bytes: bytes
    content_type_hint: str | None
    config: CompressionConfig
    image: Image.Image | None = None
    encoded: bytes = b""
    compressed_size: int = 0
    resized: bool = False
    decode_error: str = ""
    status: CompressionStatus | None = None

    @property
    def finished(self) -> bool:
        return self.status is not None

    def to_result(self) -> EncodedResult:
        if self.status is None:
            raise RuntimeError("Compression ended without a terminal status")
        width, height = self.image.size if self.image is not None else (0, 0)
        ok = self.status is CompressionStatus.OK
        return EncodedResult(
            data=self.encoded if ok else b"",
            original_size=len(self.raw_bytes),
            compressed_size=self.compressed_size,
            status=self.status,
            width=width,
            height=height,
            resized=self.resized,
            failed_input=(
                self.raw_bytes if self.status is CompressionStatus.DECODE_ERROR else b""
            ),
            decode_error=self.decode_error,
        )


class CompressionStep(ABC):
    @abstractmethod
    def run(self, context: CompressionContext) -> CompressionContext:
        raise NotImplementedError
