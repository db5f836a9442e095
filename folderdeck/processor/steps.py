import asyncio

from folderdeck.archive.base import BaseArchiveReader
from folderdeck.grouping.grouper import FolderGrouper
from folderdeck.logging.logger import Log
from folderdeck.processor.exceptions import EmptyExtractionError
from folderdeck.processor.models import ProcessingResult
from folderdeck.processor.pipeline import PipelineContext, PipelineStep
from folderdeck.processor.progress import (
    STEP_ANALYZE,
    STEP_COMPLETE,
    STEP_EXTRACT,
    STEP_PROCESS,
    ProgressListener,
)
from folderdeck.report.generator import ReportGenerator
from folderdeck.report.locale import MessageCatalog


class ExtractStep(PipelineStep):
    def __init__(
        self,
        archive_reader: BaseArchiveReader,
        grouper: FolderGrouper,
        listener: ProgressListener,
    ) -> None:
        self._archive_reader = archive_reader
        self._grouper = grouper
        self._listener = listener

    async def run(self, context: PipelineContext) -> PipelineContext:
        self._listener.on_step_progress(STEP_EXTRACT, 0, False)
        entries = self._archive_reader.read(context.archive.content)
        context.folders = self._grouper.group(entries)
        Log.info(
            f"Extracted {len(context.folders)} image folders from {len(entries)} "
            f"entries of {context.archive.name}"
        )
        self._listener.on_step_progress(STEP_EXTRACT, 100, True)
        if not context.folders:
            raise EmptyExtractionError(f"No image folders found in {context.archive.name}")
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, listener: ProgressListener, delay_seconds: float) -> None:
        self._listener = listener
        self._delay_seconds = delay_seconds

    async def run(self, context: PipelineContext) -> PipelineContext:
        self._listener.on_step_progress(STEP_ANALYZE, 0, False)
        self._listener.on_folder_count_change(len(context.folders), 0)
        await asyncio.sleep(self._delay_seconds)
        self._listener.on_step_progress(STEP_ANALYZE, 100, True)
        return context


class ProcessFoldersStep(PipelineStep):
    """Walks the folders in order, pacing each one.

    The presentation itself is not modified here; the step only reports
    per-folder progress.
    """

    def __init__(self, listener: ProgressListener, delay_seconds: float) -> None:
        self._listener = listener
        self._delay_seconds = delay_seconds

    async def run(self, context: PipelineContext) -> PipelineContext:
        self._listener.on_step_progress(STEP_PROCESS, 0, False)
        total = len(context.folders)
        for folder in context.folders:
            context.processed_folders += 1
            self._listener.on_folder_count_change(total, context.processed_folders)
            self._listener.on_step_progress(
                STEP_PROCESS, context.processed_folders / total * 100, False
            )
            Log.debug(
                f"Processed folder {folder.name} ({len(folder.images)} images), "
                f"{context.processed_folders}/{total}"
            )
            await asyncio.sleep(self._delay_seconds)
        self._listener.on_step_progress(STEP_PROCESS, 100, True)
        return context


class CompleteStep(PipelineStep):
    def __init__(
        self,
        report_generator: ReportGenerator,
        listener: ProgressListener,
        catalog: MessageCatalog,
    ) -> None:
        self._report_generator = report_generator
        self._listener = listener
        self._catalog = catalog

    async def run(self, context: PipelineContext) -> PipelineContext:
        self._listener.on_step_progress(STEP_COMPLETE, 0, False)
        report = self._report_generator.generate(context.document.name, context.folders)
        self._listener.on_step_progress(STEP_COMPLETE, 100, True)
        context.result = ProcessingResult(
            success=True,
            message=self._catalog.folders_processed.format(count=len(context.folders)),
            download_url=report.download_url,
            filename=report.filename,
        )
        Log.info(f"Report {report.filename} ready ({len(report.text)} chars)")
        return context
