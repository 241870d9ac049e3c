from pathlib import Path

import httpx

from photo_worker.compression.compressor import Compressor
from photo_worker.compression.models import CompressionConfig
from photo_worker.config.settings import Settings
from photo_worker.photos.factory import PhotoUploaderFactory
from photo_worker.photos.http_client import HttpPhotoFetcher
from photo_worker.processor.artifacts import FailedPhotoDumper
from photo_worker.processor.models import RecordOutcome
from photo_worker.processor.pipeline import PipelineContext, PipelineStep
from photo_worker.processor.steps import (
    CompressPhotoStep,
    DumpFailedPhotoStep,
    FetchPhotoStep,
    UploadPhotoStep,
)


class Processor:
    """Runs one record through the photo pipeline.

    Pipeline: fetch -> compress -> dump undecodable input -> upload.
    Collaborator exceptions propagate to the caller.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, record_id: str) -> RecordOutcome:
        context = PipelineContext(record_id=record_id)
        for step in self._steps:
            context = step.run(context)
        return self._to_outcome(context)

    def _to_outcome(self, context: PipelineContext) -> RecordOutcome:
        if context.result is None:
            raise ValueError(f"Record {context.record_id} finished without a compression result")
        return RecordOutcome(
            record_id=context.record_id,
            status=context.result.status.value,
            original_size=context.result.original_size,
            compressed_size=context.result.compressed_size,
            uploaded=context.uploaded,
        )


def build_processor(settings: Settings, client: httpx.Client) -> Processor:
    """Build a Processor with all required adapters."""
    dump_dir = Path(settings.failed_photos_dir) if settings.failed_photos_dir else None
    steps: list[PipelineStep] = [
        FetchPhotoStep(HttpPhotoFetcher(client)),
        CompressPhotoStep(Compressor(), CompressionConfig.from_settings(settings)),
        DumpFailedPhotoStep(FailedPhotoDumper(dump_dir)),
        UploadPhotoStep(PhotoUploaderFactory.create(settings, client)),
    ]
    return Processor(steps=steps)
