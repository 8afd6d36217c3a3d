import asyncio
import contextlib
from collections.abc import Iterable
from types import TracebackType

from intake.config.settings import Settings
from intake.documents.factory import DocumentServicesFactory
from intake.logging.logger import Log
from intake.pipeline.aggregator import Aggregator
from intake.pipeline.models import ProfileUpdate, SubmittedFile, TaskView
from intake.pipeline.processor import ProgressListener, TaskProcessor
from intake.pipeline.queue import TaskQueue
from intake.pipeline.sink import BaseCompletionSink


class IntakePipeline:
    """Owns the task queue and schedules one task at a time.

    The worker sleeps on a wake-up event set by ``submit``. Each wake-up
    drains the queue in FIFO order, holding the in-flight lock for exactly one
    task at a time, then checks completion. When every task is terminal the
    aggregated profile snapshot is pushed to the completion sink.

    Usage::

        async with IntakePipeline(processor, sink) as pipeline:
            pipeline.submit(files)
            profile = await pipeline.wait_until_complete()
    """

    def __init__(
        self,
        processor: TaskProcessor,
        sink: BaseCompletionSink,
        aggregator: Aggregator | None = None,
    ) -> None:
        self._processor = processor
        self._sink = sink
        self._aggregator = aggregator if aggregator is not None else Aggregator()
        self._queue = TaskQueue()
        self._in_flight = asyncio.Lock()
        self._wakeup = asyncio.Event()
        self._completed = asyncio.Event()
        self._worker: asyncio.Task[None] | None = None
        self._closed = False

    @property
    def tasks(self) -> tuple[TaskView, ...]:
        return self._queue.views()

    @property
    def all_terminal(self) -> bool:
        return self._queue.all_terminal

    @property
    def is_processing(self) -> bool:
        return self._in_flight.locked()

    @property
    def profile(self) -> ProfileUpdate:
        return self._aggregator.snapshot()

    def submit(self, files: Iterable[SubmittedFile]) -> list[TaskView]:
        """Queue the files, skipping any whose id is already queued."""
        if self._closed:
            raise RuntimeError("IntakePipeline is closed")
        added = self._queue.submit(files)
        if added:
            Log.info(f"Queued {len(added)} document(s), {len(self._queue)} total")
            self._completed.clear()
            self._wakeup.set()
        return [task.view() for task in added]

    def start(self) -> None:
        """Spawn the background worker on the running event loop."""
        if self._worker is None:
            self._worker = asyncio.get_running_loop().create_task(
                self._run(), name="intake-scheduler"
            )

    async def aclose(self) -> None:
        """Cancel the worker; an in-flight task is marked failed and no profile is pushed."""
        self._closed = True
        if self._worker is None:
            return
        self._worker.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._worker
        self._worker = None
        Log.info("Intake scheduler stopped")

    async def wait_until_complete(self) -> ProfileUpdate:
        """Wait until every submitted task is terminal and return the pushed snapshot."""
        await self._completed.wait()
        return self.profile

    async def run_until_complete(self) -> ProfileUpdate:
        """Drain the queue in the calling coroutine, without the background worker."""
        await self._drain()
        return self.profile

    async def __aenter__(self) -> "IntakePipeline":
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _run(self) -> None:
        Log.info("Intake scheduler started")
        while True:
            await self._wakeup.wait()
            self._wakeup.clear()
            try:
                await self._drain()
            except Exception as exc:
                Log.error(f"Intake scheduler pass failed: {type(exc).__name__}: {exc}")

    async def _drain(self) -> None:
        while True:
            async with self._in_flight:
                task = self._queue.next_queued()
                if task is None:
                    break
                await self._processor.process(task, self._aggregator)
        self._check_completion()

    def _check_completion(self) -> None:
        if not self._queue.all_terminal:
            return
        snapshot = self._aggregator.snapshot()
        Log.info(f"All {len(self._queue)} document(s) processed, pushing profile")
        try:
            self._sink.apply(snapshot)
        except Exception as exc:
            Log.error(f"Completion sink rejected profile: {type(exc).__name__}: {exc}")
        self._completed.set()


def build_pipeline(
    settings: Settings,
    sink: BaseCompletionSink,
    listener: ProgressListener | None = None,
) -> IntakePipeline:
    """Build an IntakePipeline with the configured classifier and extractor."""
    classifier, extractor = DocumentServicesFactory.create(settings)
    processor = TaskProcessor(classifier, extractor, listener=listener)
    return IntakePipeline(processor, sink)
