import io

from PIL import Image

from photo_worker.compression.exceptions import ImageEncodeError

JPEG_COMPATIBLE_MODES = ("RGB", "L")


def encode_jpeg(image: Image.Image, quality: int) -> bytes:
    """Encode a raster as baseline JPEG at the given quality.

    Modes JPEG cannot hold (alpha, palette, 16-bit) are flattened to RGB first.

    Raises:
        ImageEncodeError: if Pillow fails to convert or save the raster.
    """
    try:
        if image.mode not in JPEG_COMPATIBLE_MODES:
            image = image.convert("RGB")
        buffer = io.BytesIO()
        image.save(buffer, format="JPEG", quality=quality)
    except Exception as exc:
        raise ImageEncodeError(f"JPEG encode failed: {exc}") from exc
    return buffer.getvalue()
