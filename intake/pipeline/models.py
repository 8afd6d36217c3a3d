from dataclasses import dataclass, field, replace
from enum import Enum

from intake.documents.models import DocumentCategory
from intake.pipeline.exceptions import InvalidTransitionError


class TaskStatus(str, Enum):
    QUEUED = "queued"
    CLASSIFYING = "classifying"
    EXTRACTING = "extracting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (TaskStatus.SUCCEEDED, TaskStatus.FAILED)

    @property
    def is_in_flight(self) -> bool:
        return self in (TaskStatus.CLASSIFYING, TaskStatus.EXTRACTING)


_TRANSITIONS: dict[TaskStatus, frozenset[TaskStatus]] = {
    TaskStatus.QUEUED: frozenset({TaskStatus.CLASSIFYING}),
    TaskStatus.CLASSIFYING: frozenset({TaskStatus.EXTRACTING, TaskStatus.FAILED}),
    TaskStatus.EXTRACTING: frozenset({TaskStatus.SUCCEEDED, TaskStatus.FAILED}),
    TaskStatus.SUCCEEDED: frozenset(),
    TaskStatus.FAILED: frozenset(),
}


@dataclass(frozen=True)
class SubmittedFile:
    """A user-supplied file: display name, modification time (ms), media type, bytes."""

    name: str
    last_modified: int
    media_type: str
    payload: bytes = field(repr=False)

    @property
    def task_id(self) -> str:
        return f"{self.name}-{self.last_modified}"


@dataclass(frozen=True)
class TaskView:
    """Read-only snapshot of a task for progress display."""

    id: str
    name: str
    status: TaskStatus
    category: DocumentCategory | None = None
    extracted: dict[str, str] | None = None
    error: str | None = None

    @property
    def summary(self) -> str:
        if self.extracted is None:
            return ""
        return ", ".join(f"{key}: {value}" for key, value in self.extracted.items())


@dataclass
class Task:
    """One queued unit of work for a single submitted document.

    ``extracted`` and ``error`` are mutually exclusive and stay ``None`` until
    the task reaches a terminal status.
    """

    file: SubmittedFile
    status: TaskStatus = TaskStatus.QUEUED
    category: DocumentCategory | None = None
    extracted: dict[str, str] | None = None
    error: str | None = None

    @property
    def id(self) -> str:
        return self.file.task_id

    def mark_classifying(self) -> None:
        self._move(TaskStatus.CLASSIFYING)

    def mark_extracting(self, category: DocumentCategory) -> None:
        self._move(TaskStatus.EXTRACTING)
        self.category = category

    def mark_succeeded(self, extracted: dict[str, str]) -> None:
        self._move(TaskStatus.SUCCEEDED)
        self.extracted = dict(extracted)

    def mark_failed(self, error: str) -> None:
        self._move(TaskStatus.FAILED)
        self.error = error

    def view(self) -> TaskView:
        return TaskView(
            id=self.id,
            name=self.file.name,
            status=self.status,
            category=self.category,
            extracted=dict(self.extracted) if self.extracted is not None else None,
            error=self.error,
        )

    def _move(self, target: TaskStatus) -> None:
        if target not in _TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                f"Task {self.id} cannot move from {self.status.value} to {target.value}"
            )
        self.status = target


@dataclass
class ProfileDraft:
    """The partial user profile assembled from successful extractions."""

    name: str | None = None
    tax_id: str | None = None
    institute: str | None = None

    def snapshot(self) -> "ProfileUpdate":
        return ProfileUpdate(name=self.name, tax_id=self.tax_id, institute=self.institute)


@dataclass(frozen=True)
class ProfileUpdate:
    """Immutable copy of a ProfileDraft handed to the completion sink."""

    name: str | None = None
    tax_id: str | None = None
    institute: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Only the fields that were filled in."""
        values = {"name": self.name, "tax_id": self.tax_id, "institute": self.institute}
        return {key: value for key, value in values.items() if value}

    def merged_into(self, profile: "ProfileUpdate") -> "ProfileUpdate":
        """Return ``profile`` with this update's filled fields applied on top."""
        return replace(profile, **self.as_dict())
