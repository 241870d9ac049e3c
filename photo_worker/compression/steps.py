from photo_worker.compression.decoders import DecoderFactory
from photo_worker.compression.encoder import encode_jpeg
from photo_worker.compression.exceptions import CompressionError, ImageDecodeError
from photo_worker.compression.models import CompressionStatus
from photo_worker.compression.pipeline import CompressionContext, CompressionStep
from photo_worker.compression.resize import downscale, fit_within

IMAGE_CONTENT_TYPE_PREFIX = "image/"


class ContentTypeGateStep(CompressionStep):
    """Rejects payloads whose content type is not an image (e.g. error pages)."""

    def run(self, context: CompressionContext) -> CompressionContext:
        hint = (context.content_type_hint or "").strip().lower()
        if not hint.startswith(IMAGE_CONTENT_TYPE_PREFIX):
            context.status = CompressionStatus.NOT_IMAGE
        return context


class DecodeStep(CompressionStep):
    def __init__(self, decoder_factory: type[DecoderFactory] = DecoderFactory) -> None:
        self._decoder_factory = decoder_factory

    def run(self, context: CompressionContext) -> CompressionContext:
        errors: list[str] = []
        for decoder in self._decoder_factory.attempt_order(context.content_type_hint):
            try:
                context.image = decoder.decode(context.raw_bytes)
            except ImageDecodeError as exc:
                errors.append(str(exc))
                continue
            return context
        context.decode_error = "; ".join(errors)
        context.status = CompressionStatus.DECODE_ERROR
        return context


class FirstPassEncodeStep(CompressionStep):
    def run(self, context: CompressionContext) -> CompressionContext:
        if context.image is None:
            raise ValueError("CompressionContext.image must be set before encoding")
        try:
            encoded = encode_jpeg(context.image, context.config.quality)
        except CompressionError:
            context.status = CompressionStatus.ENCODE_ERROR
            return context
        context.encoded = encoded
        context.compressed_size = len(encoded)
        if context.compressed_size <= context.config.size_ceiling_bytes:
            context.status = CompressionStatus.OK
        return context


class DownscaleStep(CompressionStep):
    """Shrinks the raster into the bounding box, or fails when it already fits."""

    def run(self, context: CompressionContext) -> CompressionContext:
        if context.image is None:
            raise ValueError("CompressionContext.image must be set before resizing")
        config = context.config
        width, height = context.image.size
        target = fit_within(width, height, config.max_width, config.max_height)
        if target is None:
            context.status = CompressionStatus.TOO_LARGE_AFTER_RESIZE
            return context
        try:
            context.image = downscale(context.image, target)
        except CompressionError:
            context.status = CompressionStatus.RESIZE_ENCODE_ERROR
            return context
        context.resized = True
        return context


class SecondPassEncodeStep(CompressionStep):
    def run(self, context: CompressionContext) -> CompressionContext:
        if context.image is None:
            raise ValueError("CompressionContext.image must be set before encoding")
        try:
            encoded = encode_jpeg(context.image, context.config.quality)
        except CompressionError:
            context.status = CompressionStatus.RESIZE_ENCODE_ERROR
            return context
        context.encoded = encoded
        context.compressed_size = len(encoded)
        if context.compressed_size <= context.config.size_ceiling_bytes:
            context.status = CompressionStatus.OK
        else:
            context.status = CompressionStatus.TOO_LARGE_AFTER_RESIZE
        return context
