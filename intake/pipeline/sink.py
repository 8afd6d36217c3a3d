from abc import ABC, abstractmethod

from intake.logging.logger import Log
from intake.pipeline.models import ProfileUpdate


class BaseCompletionSink(ABC):
    """Receives the aggregated profile once every task is terminal."""

    @abstractmethod
    def apply(self, update: ProfileUpdate) -> None:
        """Apply a profile update.

        Must be idempotent: applying the same snapshot again leaves the
        stored profile unchanged.
        """


class InMemoryProfileStore(BaseCompletionSink):
    """Keeps the user profile in memory and merges updates into it.

    Filled fields of an update replace the stored ones; empty fields leave
    them alone.
    """

    def __init__(self, profile: ProfileUpdate | None = None) -> None:
        self._profile = profile or ProfileUpdate()
        self.applied: list[ProfileUpdate] = []

    @property
    def profile(self) -> ProfileUpdate:
        return self._profile

    def apply(self, update: ProfileUpdate) -> None:
        self._profile = update.merged_into(self._profile)
        self.applied.append(update)
        Log.info(f"Profile updated: {sorted(update.as_dict())}")
