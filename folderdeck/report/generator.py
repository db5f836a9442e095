import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

from folderdeck.processor.models import ImageFolder
from folderdeck.report.locale import ENGLISH, MessageCatalog
from folderdeck.resources.registry import ResourceRegistry

REPORT_MEDIA_TYPE = "text/plain; charset=utf-8"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class GeneratedReport:
    """Report text together with its download reference and file name."""

    text: str
    filename: str
    download_url: str


def report_filename(document_name: str, marker: str) -> str:
    """Build '<document base name>_<marker>.txt' from the original document name."""
    base_name, _extension = os.path.splitext(document_name)
    return f"{base_name}_{marker}.txt"


class ReportGenerator:
    """Summarizes the folder grouping as a downloadable UTF-8 text report."""

    def __init__(
        self,
        registry: ResourceRegistry,
        catalog: MessageCatalog = ENGLISH,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._registry = registry
        self._catalog = catalog
        self._clock = clock

    def generate(self, document_name: str, folders: Sequence[ImageFolder]) -> GeneratedReport:
        """Render the report and register it for download."""
        text = self.render(document_name, folders)
        filename = report_filename(document_name, self._catalog.report_marker)
        url = self._registry.create(
            text.encode("utf-8"),
            REPORT_MEDIA_TYPE,
            filename=filename,
        )
        return GeneratedReport(text=text, filename=filename, download_url=url)

    def render(self, document_name: str, folders: Sequence[ImageFolder]) -> str:
        """Render the report text. Only the embedded timestamp varies between calls."""
        c = self._catalog
        lines = [
            c.report_title,
            "",
            f"{c.original_file_label}: {document_name}",
            f"{c.processed_at_label}: {self._clock().strftime(TIMESTAMP_FORMAT)}",
            f"{c.folder_count_label}: {len(folders)}",
            "",
            c.details_title,
            "",
        ]
        for index, folder in enumerate(folders, start=1):
            lines.append(f"{index}. {c.folder_label}: {folder.name}")
            lines.append(f"   {c.image_count_label}: {len(folder.images)}")
            lines.append(f"   {c.image_names_label}:")
            lines.extend(f"     - {image.name}" for image in folder.images)
            lines.append("")
        lines.append(c.notes_title)
        lines.extend(f"• {note}" for note in c.notes)
        return "\n".join(lines) + "\n"
