import asyncio
from collections.abc import Awaitable, Callable

from intake.documents.base import BaseClassifier, BaseExtractor
from intake.documents.exceptions import IntakeError, UnsupportedCategoryError
from intake.documents.models import DocumentCategory, ExtractedFields
from intake.logging.logger import Log
from intake.pipeline.aggregator import Aggregator
from intake.pipeline.models import Task, TaskView

ProgressListener = Callable[[TaskView], None]
ExtractCall = Callable[[bytes, str], Awaitable[ExtractedFields]]


class TaskProcessor:
    """Drives one task through classify -> extract -> merge.

    Task-scoped failures are recorded on the task and never raised, so the
    scheduler can always move on to the next queued task.
    """

    UNRECOGNIZED_MESSAGE = "Document type not recognized for extraction."
    FALLBACK_MESSAGE = "Analysis failed."
    CANCELLED_MESSAGE = "Processing cancelled."

    def __init__(
        self,
        classifier: BaseClassifier,
        extractor: BaseExtractor,
        listener: ProgressListener | None = None,
    ) -> None:
        self._classifier = classifier
        self._listener = listener
        self._extractors: dict[DocumentCategory, ExtractCall] = {
            DocumentCategory.PAN: extractor.extract_pan,
            DocumentCategory.AADHAAR: extractor.extract_aadhaar,
            DocumentCategory.ADMISSION: extractor.extract_education,
            DocumentCategory.MARKSHEET: extractor.extract_education,
        }

    async def process(self, task: Task, aggregator: Aggregator) -> None:
        """Run the task to a terminal status, merging into ``aggregator`` on success."""
        Log.info(f"Processing {task.id} ({task.file.media_type})")
        try:
            category, fields = await self._classify_and_extract(task)
            aggregator.merge(category, fields)
        except IntakeError as exc:
            self._fail(task, str(exc) or self.FALLBACK_MESSAGE)
            return
        except asyncio.CancelledError:
            self._fail(task, self.CANCELLED_MESSAGE)
            raise
        except Exception as exc:
            Log.error(f"Unexpected {type(exc).__name__} while processing {task.id}")
            self._fail(task, str(exc) or self.FALLBACK_MESSAGE)
            return

        task.mark_succeeded(fields.as_display())
        self._report(task)
        Log.info(f"Task {task.id} succeeded as {category.value}")

    async def _classify_and_extract(
        self, task: Task
    ) -> tuple[DocumentCategory, ExtractedFields]:
        file = task.file
        task.mark_classifying()
        self._report(task)
        category = await self._classifier.classify(
            file.payload, file.media_type, file_name=file.name
        )

        task.mark_extracting(category)
        self._report(task)
        extract = self._extractors.get(category)
        if extract is None:
            raise UnsupportedCategoryError(self.UNRECOGNIZED_MESSAGE)
        return category, await extract(file.payload, file.media_type)

    def _fail(self, task: Task, message: str) -> None:
        task.mark_failed(message)
        self._report(task)
        Log.error(f"Task {task.id} failed: {message}")

    def _report(self, task: Task) -> None:
        if self._listener is None:
            return
        try:
            self._listener(task.view())
        except Exception as exc:
            Log.error(f"Progress listener failed for {task.id}: {exc}")
