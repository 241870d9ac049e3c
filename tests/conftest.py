import io
import logging
import random
from collections.abc import Callable, Iterator

import pytest
from PIL import Image

ImageFactory = Callable[..., bytes]


def _render(
    width: int,
    height: int,
    fmt: str,
    mode: str,
    noise: bool,
    quality: int,
) -> bytes:
    if noise:
        rng = random.Random(width * 10_000 + height)
        image = Image.frombytes("RGB", (width, height), rng.randbytes(width * height * 3))
        if mode != "RGB":
            image = image.convert(mode)
    else:
        image = Image.new(mode, (width, height), color=_solid_color(mode))
    buf = io.BytesIO()
    if fmt == "JPEG":
        image.save(buf, format=fmt, quality=quality)
    else:
        image.save(buf, format=fmt)
    return buf.getvalue()


def _solid_color(mode: str) -> object:
    if mode == "L":
        return 128
    if mode == "RGBA":
        return (200, 120, 40, 128)
    if mode == "P":
        return 3
    return (200, 120, 40)


@pytest.fixture()
def make_image_bytes() -> ImageFactory:
    """Build encoded test images; noise images compress poorly on purpose."""

    def _make(
        width: int,
        height: int,
        fmt: str = "JPEG",
        mode: str = "RGB",
        noise: bool = False,
        quality: int = 95,
    ) -> bytes:
        return _render(width, height, fmt, mode, noise, quality)

    return _make


@pytest.fixture()
def small_jpeg_bytes(make_image_bytes: ImageFactory) -> bytes:
    return make_image_bytes(64, 48)


@pytest.fixture()
def small_png_bytes(make_image_bytes: ImageFactory) -> bytes:
    return make_image_bytes(64, 48, fmt="PNG")


@pytest.fixture()
def noise_jpeg_bytes(make_image_bytes: ImageFactory) -> bytes:
    return make_image_bytes(400, 400, noise=True)


@pytest.fixture(autouse=True)
def _restore_worker_logger() -> Iterator[None]:
    """Undo Log.configure() so handlers never outlive pytest's captured stdout."""
    logger = logging.getLogger("photo_worker")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
