from collections.abc import Callable
from typing import Protocol

STEP_EXTRACT = 0
STEP_ANALYZE = 1
STEP_PROCESS = 2
STEP_COMPLETE = 3

STEP_IDS = ("extract", "analyze", "process", "complete")


class ProgressListener(Protocol):
    """Observer of pipeline progress. Calls are purely informational."""

    def on_step_progress(self, step_index: int, progress: float, completed: bool) -> None: ...

    def on_folder_count_change(self, total: int, processed: int) -> None: ...


class CallbackProgressListener:
    """Adapts two plain callables to the ProgressListener protocol."""

    def __init__(
        self,
        on_step_progress: Callable[[int, float, bool], None],
        on_folder_count_change: Callable[[int, int], None],
    ) -> None:
        self._on_step_progress = on_step_progress
        self._on_folder_count_change = on_folder_count_change

    def on_step_progress(self, step_index: int, progress: float, completed: bool) -> None:
        self._on_step_progress(step_index, progress, completed)

    def on_folder_count_change(self, total: int, processed: int) -> None:
        self._on_folder_count_change(total, processed)
