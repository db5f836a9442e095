from folderdeck.config.settings import Settings
from folderdeck.logging.logger import Log
from folderdeck.processor.models import ProcessingResult, ProcessingStep, UploadedFile
from folderdeck.processor.processor import Processor, build_processor
from folderdeck.processor.progress import STEP_EXTRACT, STEP_IDS, STEP_PROCESS
from folderdeck.report.locale import get_catalog
from folderdeck.resources.exceptions import ResourceNotFoundError
from folderdeck.resources.registry import DownloadResource, ResourceRegistry


class ProcessingSession:
    """Display state of one user session and owner of its download references.

    Receives the processor's progress callbacks and keeps the step list,
    folder counters and last result the way a front end renders them.
    """

    def __init__(
        self,
        settings: Settings,
        registry: ResourceRegistry | None = None,
    ) -> None:
        self._catalog = get_catalog(settings.locale)
        self.registry = registry if registry is not None else ResourceRegistry()
        self.steps = [
            ProcessingStep(id=step_id, label=label)
            for step_id, label in zip(STEP_IDS, self._catalog.step_labels)
        ]
        self.current_step = STEP_EXTRACT
        self.total_folders = 0
        self.processed_folders = 0
        self.is_processing = False
        self.result: ProcessingResult | None = None
        self._processor: Processor = build_processor(settings, self, self.registry)

    def on_step_progress(self, step_index: int, progress: float, completed: bool) -> None:
        step = self.steps[step_index]
        step.progress = progress
        step.completed = completed
        if completed:
            Log.info(f"Step {step.id} completed")

    def on_folder_count_change(self, total: int, processed: int) -> None:
        self.total_folders = total
        self.processed_folders = processed
        self.current_step = STEP_PROCESS

    @property
    def all_steps_completed(self) -> bool:
        return all(step.completed for step in self.steps)

    async def submit(
        self,
        document: UploadedFile | None,
        archive: UploadedFile | None,
    ) -> ProcessingResult:
        """Run the pipeline for a new pair of files.

        References handed out for a previous submission are released first.
        A submission made while another one is running is refused and leaves
        the running one untouched.
        """
        if document is None or archive is None:
            Log.warning("Submission refused: both files are required")
            return ProcessingResult(success=False, message=self._catalog.missing_files)
        if self.is_processing or self._processor.is_running:
            Log.warning("Submission refused: a processing run is already in progress")
            return ProcessingResult(
                success=False,
                message=self._catalog.processing_error.format(
                    cause="a processing run is already in progress"
                ),
            )

        self.reset()
        self.is_processing = True
        try:
            self.result = await self._processor.process_files(document, archive)
        finally:
            self.is_processing = False
        return self.result

    def reset(self) -> None:
        """Clear the display state and release every outstanding reference."""
        released = self.registry.release_all()
        if released:
            Log.debug(f"Released {released} download references")
        for step in self.steps:
            step.completed = False
            step.progress = 0
        self.current_step = STEP_EXTRACT
        self.total_folders = 0
        self.processed_folders = 0
        self.result = None

    def download(self) -> DownloadResource:
        """Return the report produced by the last successful submission.

        Raises:
            ResourceNotFoundError: if there is no report to download.
        """
        if self.result is None or self.result.download_url is None:
            raise ResourceNotFoundError("no report available")
        return self.registry.resolve(self.result.download_url)
