"""Shared plumbing for the AI-backed classifier and extractor."""

import json
from pathlib import Path

from intake.ai.client_base import BaseAIClient
from intake.ai.exceptions import AIProviderError
from intake.ai.models import Attachment
from intake.documents.exceptions import IntakeError
from intake.documents.models import MediaType
from intake.documents.prompt_loader import load_json_schema, load_prompt_template
from intake.logging.logger import Log
from intake.pdf.base import BasePdfReader
from intake.pdf.exceptions import PdfReadError


class PromptSpec:
    """A prompt template paired with its response schema."""

    def __init__(self, name: str, schema_name: str, prompt_dir: Path | None = None) -> None:
        self.schema_name = schema_name
        self.template = load_prompt_template(name, prompt_dir)
        self.json_schema = load_json_schema(name, prompt_dir)
        self.json_schema_text = json.dumps(self.json_schema, indent=2)

    def render(self, **values: str) -> str:
        return self.template.format(json_schema=self.json_schema_text, **values)


class AIDocumentService:
    """Builds attachments, calls the AI client and parses its JSON answer."""

    SYSTEM_PROMPT = (
        "You read Indian identity and education documents for a loan application. "
        "Answer only with JSON that matches the requested schema."
    )

    def __init__(
        self,
        *,
        client: BaseAIClient,
        model: str,
        pdf_reader: BasePdfReader,
        temperature: float = 0.0,
        pdf_max_pages: int | None = None,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._pdf_reader = pdf_reader
        self._temperature = max(0.0, min(0.2, temperature))
        self._pdf_max_pages = pdf_max_pages
        self._load_prompts(prompt_dir)

    def _load_prompts(self, prompt_dir: Path | None) -> None:
        """Load the PromptSpecs a concrete service needs."""

    def _attachment(
        self, payload: bytes, media_type: str, error_cls: type[IntakeError]
    ) -> Attachment:
        media_type = media_type.lower()
        if media_type not in MediaType.SUPPORTED:
            raise error_cls(f"Unsupported media type '{media_type}'")
        if media_type in MediaType.IMAGES:
            return Attachment.from_image(payload, media_type)
        try:
            text = self._pdf_reader.read_text(payload, max_pages=self._pdf_max_pages)
        except PdfReadError as exc:
            raise error_cls(str(exc)) from exc
        if not text:
            raise error_cls("PDF has no readable text layer; upload a clearer image instead")
        return Attachment.from_text(text, media_type)

    async def _ask(
        self,
        spec: PromptSpec,
        prompt: str,
        attachment: Attachment,
        error_cls: type[IntakeError],
    ) -> dict[str, object]:
        Log.debug(f"AI prompt ({spec.schema_name}):\n{prompt}")
        try:
            raw = await self._client.create_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self.SYSTEM_PROMPT,
                user_prompt=prompt,
                json_schema=spec.json_schema,
                schema_name=spec.schema_name,
                attachment=attachment,
            )
        except AIProviderError as exc:
            raise error_cls(str(exc)) from exc
        Log.debug(f"AI raw response ({spec.schema_name}):\n{raw}")
        return self._parse_json(raw, error_cls)

    @staticmethod
    def _parse_json(raw: str, error_cls: type[IntakeError]) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise error_cls(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise error_cls("JSON response must be an object")
        return parsed
