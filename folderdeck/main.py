import argparse
import asyncio
import sys
from pathlib import Path

from folderdeck.config.settings import Settings
from folderdeck.logging.logger import Log
from folderdeck.processor.models import UploadedFile
from folderdeck.session.session import ProcessingSession


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="folderdeck",
        description="Group the images of a ZIP archive by folder and report on a slide deck.",
    )
    parser.add_argument("document", type=Path, help="PowerPoint (.pptx) file")
    parser.add_argument("archive", type=Path, help="ZIP archive of image folders")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path.cwd(),
        help="directory the report is written to (default: current directory)",
    )
    return parser.parse_args(argv)


def _load(path: Path) -> UploadedFile:
    return UploadedFile(name=path.name, content=path.read_bytes())


def main(argv: list[str] | None = None) -> int:
    """Entry point: load both files -> run a session -> write the report."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    session = ProcessingSession(settings)
    try:
        result = asyncio.run(session.submit(_load(args.document), _load(args.archive)))
        if not result.success:
            Log.error(result.message)
            return 1

        report = session.download()
        args.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = args.output_dir / (result.filename or "report.txt")
        output_path.write_bytes(report.content)
        Log.info(f"{result.message}: report written to {output_path}")
        return 0
    finally:
        session.reset()


if __name__ == "__main__":
    sys.exit(main())
