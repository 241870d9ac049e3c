from PIL import Image

from photo_worker.compression.exceptions import ImageResizeError


def fit_within(
    width: int,
    height: int,
    max_width: int,
    max_height: int,
) -> tuple[int, int] | None:
    """Compute the downscaled size that fits the bounding box.

    Uses a single uniform factor min(max_width / width, max_height / height)
    and floors each side, never going below 1. Returns None when the raster
    already fits, since there is no valid downscale in that case.
    """
    if width <= max_width and height <= max_height:
        return None
    # Integer comparison of the two ratios keeps the flooring exact.
    if max_width * height <= max_height * width:
        new_width = max_width
        new_height = height * max_width // width
    else:
        new_width = width * max_height // height
        new_height = max_height
    return max(new_width, 1), max(new_height, 1)


def downscale(image: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Resample with the bicubic (Catmull-Rom) kernel.

    Raises:
        ImageResizeError: if Pillow cannot resample the raster.
    """
    try:
        # Pillow silently falls back to nearest-neighbour for palette and 1-bit.
        if image.mode in ("P", "1"):
            image = image.convert("RGB")
        return image.resize(size, Image.Resampling.BICUBIC)
    except Exception as exc:
        raise ImageResizeError(f"resize to {size[0]}x{size[1]} failed: {exc}") from exc
