"""Command-line entry point: run a batch of documents through the intake pipeline."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from intake.config.settings import Settings
from intake.logging.logger import Log
from intake.pipeline.exceptions import FileReadError
from intake.pipeline.file_loader import FileLoader
from intake.pipeline.models import ProfileUpdate, TaskView
from intake.pipeline.scheduler import build_pipeline
from intake.pipeline.sink import InMemoryProfileStore


def log_progress(view: TaskView) -> None:
    detail = view.error or view.summary
    category = view.category.value if view.category is not None else "..."
    Log.info(f"{view.name:<32} {category:<10} {view.status.value:<12} {detail}")


async def run(paths: list[Path], settings: Settings) -> ProfileUpdate:
    """Process the files at ``paths`` and return the merged profile."""
    files = FileLoader().load_all(paths)
    store = InMemoryProfileStore()
    async with build_pipeline(settings, store, listener=log_progress) as pipeline:
        pipeline.submit(files)
        if files:
            await pipeline.wait_until_complete()
        failed = [view for view in pipeline.tasks if view.error is not None]
        Log.info(f"{len(pipeline.tasks) - len(failed)} succeeded, {len(failed)} failed")
    return store.profile


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> pipeline run -> profile JSON on stdout."""
    parser = argparse.ArgumentParser(
        prog="intake",
        description="Classify identity and education documents and merge them into a profile.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="PDF, PNG or JPEG documents")
    args = parser.parse_args(argv)

    settings = Settings()
    Log.configure(settings.log_level)

    try:
        profile = asyncio.run(run(args.files, settings))
    except FileReadError as exc:
        Log.error(str(exc))
        return 1
    except KeyboardInterrupt:
        Log.info("Interrupted, shutting down")
        return 130

    print(json.dumps(profile.as_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
