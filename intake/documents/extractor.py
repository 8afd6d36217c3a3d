from pathlib import Path

from intake.documents.ai_service import AIDocumentService, PromptSpec
from intake.documents.base import BaseExtractor
from intake.documents.exceptions import ExtractionError
from intake.documents.models import AadhaarFields, EducationFields, PanFields
from intake.documents.validator import (
    build_aadhaar_fields,
    build_education_fields,
    build_pan_fields,
)


class AIExtractor(AIDocumentService, BaseExtractor):
    """Extracts category-specific fields with a structured-output AI model."""

    def _load_prompts(self, prompt_dir: Path | None) -> None:
        self._pan_prompt = PromptSpec("pan", "pan_extraction", prompt_dir)
        self._aadhaar_prompt = PromptSpec("aadhaar", "aadhaar_extraction", prompt_dir)
        self._education_prompt = PromptSpec("education", "education_extraction", prompt_dir)

    async def extract_pan(self, payload: bytes, media_type: str) -> PanFields:
        return build_pan_fields(await self._extract(self._pan_prompt, payload, media_type))

    async def extract_aadhaar(self, payload: bytes, media_type: str) -> AadhaarFields:
        return build_aadhaar_fields(
            await self._extract(self._aadhaar_prompt, payload, media_type)
        )

    async def extract_education(self, payload: bytes, media_type: str) -> EducationFields:
        return build_education_fields(
            await self._extract(self._education_prompt, payload, media_type)
        )

    async def _extract(
        self, spec: PromptSpec, payload: bytes, media_type: str
    ) -> dict[str, object]:
        attachment = self._attachment(payload, media_type, ExtractionError)
        return await self._ask(spec, spec.render(), attachment, ExtractionError)
