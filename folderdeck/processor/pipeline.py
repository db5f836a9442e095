from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from folderdeck.processor.models import ImageFolder, ProcessingResult, UploadedFile


@dataclass(slots=True)
class PipelineContext:
    document: UploadedFile
    archive: UploadedFile
    folders: list[ImageFolder] = field(default_factory=list)
    processed_folders: int = 0
    result: ProcessingResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
