from photo_worker.compression.models import CompressionConfig, EncodedResult
from photo_worker.compression.pipeline import CompressionContext, CompressionStep
from photo_worker.compression.steps import (
    ContentTypeGateStep,
    DecodeStep,
    DownscaleStep,
    FirstPassEncodeStep,
    SecondPassEncodeStep,
)


def default_steps() -> list[CompressionStep]:
    """gate -> decode -> encode -> (downscale -> encode)."""
    return [
        ContentTypeGateStep(),
        DecodeStep(),
        FirstPassEncodeStep(),
        DownscaleStep(),
        SecondPassEncodeStep(),
    ]


class Compressor:
    """Runs compression steps until one of them sets a terminal status.

    Steps hold no per-call state, so one instance may be shared across threads.
    """

    def __init__(self, steps: list[CompressionStep] | None = None) -> None:
        self._steps = steps if steps is not None else default_steps()

    def compress(
        self,
        raw_bytes: bytes,
        content_type_hint: str | None,
        config: CompressionConfig | None = None,
    ) -> EncodedResult:
        context = CompressionContext(
            raw_bytes=raw_bytes,
            content_type_hint=content_type_hint,
            config=config if config is not None else CompressionConfig(),
        )
        for step in self._steps:
            context = step.run(context)
            if context.finished:
                break
        return context.to_result()


_default_compressor = Compressor()


def compress(
    raw_bytes: bytes,
    content_type_hint: str | None,
    config: CompressionConfig | None = None,
) -> EncodedResult:
    """Compress photo bytes under the configured size ceiling."""
    return _default_compressor.compress(raw_bytes, content_type_hint, config)
