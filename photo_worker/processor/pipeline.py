from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from photo_worker.compression.models import EncodedResult
from photo_worker.photos.models import FetchedPhoto


@dataclass(slots=True)
class PipelineContext:
    record_id: str
    photo: FetchedPhoto | None = None
    result: EncodedResult | None = None
    artifact_path: Path | None = None
    uploaded: bool = False


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
