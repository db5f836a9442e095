from collections.abc import Sequence

from folderdeck.archive.zip_reader import ZipArchiveReader
from folderdeck.config.settings import Settings
from folderdeck.grouping.grouper import FolderGrouper
from folderdeck.logging.logger import Log
from folderdeck.processor.exceptions import EmptyExtractionError, ProcessorBusyError
from folderdeck.processor.models import ProcessingResult, UploadedFile
from folderdeck.processor.pipeline import PipelineContext, PipelineStep
from folderdeck.processor.progress import ProgressListener
from folderdeck.processor.steps import (
    AnalyzeStep,
    CompleteStep,
    ExtractStep,
    ProcessFoldersStep,
)
from folderdeck.report.generator import ReportGenerator
from folderdeck.report.locale import ENGLISH, MessageCatalog, get_catalog
from folderdeck.resources.registry import ResourceRegistry


class Processor:
    """Runs the extract -> analyze -> process -> complete pipeline.

    Every failure ends up in a failed ProcessingResult; nothing is retried and
    a failed run has to be started over with a fresh call.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        catalog: MessageCatalog = ENGLISH,
    ) -> None:
        self._steps = list(steps)
        self._catalog = catalog
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def process_files(
        self,
        document: UploadedFile,
        archive: UploadedFile,
    ) -> ProcessingResult:
        """Process a slide deck together with its image archive."""
        try:
            if self._running:
                raise ProcessorBusyError("a processing run is already in progress")
            self._running = True
            try:
                return await self._run_steps(document, archive)
            finally:
                self._running = False
        except EmptyExtractionError as exc:
            Log.warning(str(exc))
            return ProcessingResult(success=False, message=self._catalog.no_folders_found)
        except Exception as exc:
            Log.exception(f"Processing of {document.name} failed: {exc}")
            cause = str(exc) or self._catalog.unknown_error
            return ProcessingResult(
                success=False,
                message=self._catalog.processing_error.format(cause=cause),
            )

    async def _run_steps(
        self,
        document: UploadedFile,
        archive: UploadedFile,
    ) -> ProcessingResult:
        Log.info(f"Processing {document.name} with images from {archive.name}")
        context = PipelineContext(document=document, archive=archive)
        for step in self._steps:
            context = await step.run(context)
        if context.result is None:
            raise RuntimeError("pipeline finished without producing a result")
        return context.result


def build_processor(
    settings: Settings,
    listener: ProgressListener,
    registry: ResourceRegistry,
) -> Processor:
    """Build a Processor with all required adapters."""
    catalog = get_catalog(settings.locale)
    steps = [
        ExtractStep(
            archive_reader=ZipArchiveReader(),
            grouper=FolderGrouper(registry),
            listener=listener,
        ),
        AnalyzeStep(listener=listener, delay_seconds=settings.analyze_delay_seconds),
        ProcessFoldersStep(listener=listener, delay_seconds=settings.folder_delay_seconds),
        CompleteStep(
            report_generator=ReportGenerator(registry, catalog=catalog),
            listener=listener,
            catalog=catalog,
        ),
    ]
    return Processor(steps=steps, catalog=catalog)
