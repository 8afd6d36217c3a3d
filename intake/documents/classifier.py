from pathlib import Path

from intake.documents.ai_service import AIDocumentService, PromptSpec
from intake.documents.base import BaseClassifier
from intake.documents.exceptions import ClassificationError
from intake.documents.models import DocumentCategory
from intake.documents.validator import build_category
from intake.logging.logger import Log


class AIClassifier(AIDocumentService, BaseClassifier):
    """Classifies documents with a structured-output AI model."""

    def _load_prompts(self, prompt_dir: Path | None) -> None:
        self._prompt = PromptSpec("classification", "document_classification", prompt_dir)

    async def classify(
        self,
        payload: bytes,
        media_type: str,
        *,
        file_name: str | None = None,
    ) -> DocumentCategory:
        attachment = self._attachment(payload, media_type, ClassificationError)
        prompt = self._prompt.render(
            file_name=file_name or "(not provided)",
            media_type=media_type,
        )
        data = await self._ask(self._prompt, prompt, attachment, ClassificationError)
        category = build_category(data)
        Log.info(f"Classified {file_name or 'document'} as {category.value}")
        return category
