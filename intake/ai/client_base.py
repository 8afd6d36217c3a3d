from abc import ABC, abstractmethod

from intake.ai.models import Attachment


class BaseAIClient(ABC):
    """Contract for provider-specific structured-output AI clients."""

    @abstractmethod
    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        schema_name: str,
        attachment: Attachment | None = None,
    ) -> str:
        """Return the provider response as plain text (expected to be JSON)."""
