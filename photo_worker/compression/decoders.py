import io
from abc import ABC, abstractmethod
from typing import ClassVar

from PIL import Image

from photo_worker.compression.exceptions import ImageDecodeError


class BaseImageDecoder(ABC):
    """Contract for all single-format raster decoders."""

    format_name: ClassVar[str]

    @abstractmethod
    def decode(self, data: bytes) -> Image.Image:
        """Decode raw bytes into a fully loaded raster.

        Raises:
            ImageDecodeError: if the bytes are not a valid image of this format.
        """


class PillowDecoder(BaseImageDecoder):
    """Decodes one format with Pillow, refusing every other format."""

    def decode(self, data: bytes) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(data), formats=[self.format_name])
            # Image.open is lazy; load() surfaces truncated or corrupt pixel data.
            image.load()
        except Exception as exc:
            raise ImageDecodeError(f"{self.format_name} decode failed: {exc}") from exc
        return image


class JpegDecoder(PillowDecoder):
    format_name = "JPEG"


class PngDecoder(PillowDecoder):
    format_name = "PNG"


class DecoderFactory:
    """Builds the ordered list of decoders to try for a content-type hint."""

    DECODERS: ClassVar[dict[str, type[BaseImageDecoder]]] = {
        "jpeg": JpegDecoder,
        "png": PngDecoder,
    }
    DEFAULT_ORDER: ClassVar[tuple[str, ...]] = ("jpeg", "png")

    @classmethod
    def attempt_order(cls, content_type_hint: str | None) -> list[BaseImageDecoder]:
        """Return decoders with the hinted format first.

        A hint naming PNG puts PNG first; anything else (JPEG, ambiguous or
        missing) keeps the default JPEG-then-PNG order.
        """
        hint = (content_type_hint or "").lower()
        order = list(cls.DEFAULT_ORDER)
        if "png" in hint:
            order.remove("png")
            order.insert(0, "png")
        return [cls.DECODERS[name]() for name in order]
