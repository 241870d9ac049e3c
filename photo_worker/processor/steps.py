from photo_worker.compression.compressor import Compressor
from photo_worker.compression.models import CompressionConfig, CompressionStatus
from photo_worker.logging.logger import Log
from photo_worker.photos.base import BasePhotoFetcher, BasePhotoUploader
from photo_worker.processor.artifacts import FailedPhotoDumper
from photo_worker.processor.exceptions import ArtifactWriteError
from photo_worker.processor.pipeline import PipelineContext, PipelineStep


class FetchPhotoStep(PipelineStep):
    def __init__(self, fetcher: BasePhotoFetcher) -> None:
        self._fetcher = fetcher

    def run(self, context: PipelineContext) -> PipelineContext:
        context.photo = self._fetcher.fetch(context.record_id)
        Log.debug(
            f"Fetched {len(context.photo.data)} bytes for record {context.record_id}",
            content_type=context.photo.content_type,
        )
        return context


class CompressPhotoStep(PipelineStep):
    def __init__(self, compressor: Compressor, config: CompressionConfig) -> None:
        self._compressor = compressor
        self._config = config

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.photo is None:
            raise ValueError("PipelineContext.photo must be set before compression")
        photo = context.photo
        context.result = self._compressor.compress(
            photo.data, photo.content_type, self._config
        )
        status = context.result.status
        if status is CompressionStatus.NOT_IMAGE:
            Log.warning(
                f"Record {context.record_id}: unexpected Content-Type",
                content_type=photo.content_type,
            )
        elif status is CompressionStatus.DECODE_ERROR:
            Log.warning(
                f"Record {context.record_id}: decode error",
                content_type=photo.content_type,
                first_bytes=photo.data[:16].hex(" "),
                error=context.result.decode_error,
            )
        return context


class DumpFailedPhotoStep(PipelineStep):
    """Writes undecodable input to disk; a failed write never fails the record."""

    def __init__(self, dumper: FailedPhotoDumper) -> None:
        self._dumper = dumper

    def run(self, context: PipelineContext) -> PipelineContext:
        result = context.result
        if result is None or result.status is not CompressionStatus.DECODE_ERROR:
            return context
        try:
            context.artifact_path = self._dumper.write(context.record_id, result.failed_input)
        except ArtifactWriteError as exc:
            Log.error(f"Record {context.record_id}: {exc}")
            return context
        if context.artifact_path is not None:
            Log.info(f"Record {context.record_id}: dumped input to {context.artifact_path}")
        return context


class UploadPhotoStep(PipelineStep):
    def __init__(self, uploader: BasePhotoUploader) -> None:
        self._uploader = uploader

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.result is None or not context.result.is_ok:
            return context
        self._uploader.upload(context.record_id, context.result.data)
        context.uploaded = True
        return context
