"""Offline AI client adapter.

Returns canned structured responses keyed by schema name. Useful for local
runs without an API key, for tests, and as a template for new providers:
implement BaseAIClient and register the provider in DocumentServicesFactory.
"""

import json
import re
from typing import ClassVar

from intake.ai.client_base import BaseAIClient
from intake.ai.models import Attachment

_FILE_NAME_LINE = re.compile(r"^File name: (.*)$", re.MULTILINE)


class ExampleClientAdapter(BaseAIClient):
    """Deterministic adapter; no network calls."""

    DEFAULT_RESPONSES: ClassVar[dict[str, dict[str, object]]] = {
        "pan_extraction": {"full_name": "Asha Rao", "tax_id": "ABCDE1234F"},
        "aadhaar_extraction": {"full_name": "Asha Rao", "national_id": "1234 5678 9012"},
        "education_extraction": {"institute": "IIT Delhi", "document_kind": "Marksheet"},
    }

    # File-name and text-layer hints let offline runs exercise every extractor.
    CATEGORY_HINTS: ClassVar[dict[str, str]] = {
        "pan": "PAN",
        "aadhaar": "AADHAAR",
        "admission": "ADMISSION",
        "marksheet": "MARKSHEET",
    }

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
        _ = model, temperature, system_prompt, json_schema
        if schema_name == "document_classification":
            return json.dumps({"category": self._guess_category(user_prompt, attachment)})
        return json.dumps(self.DEFAULT_RESPONSES.get(schema_name, {}))

    def _guess_category(self, user_prompt: str, attachment: Attachment | None) -> str:
        match = _FILE_NAME_LINE.search(user_prompt)
        haystack = match.group(1) if match else ""
        if attachment is not None and attachment.text:
            haystack = f"{haystack} {attachment.text}"
        lowered = haystack.lower()
        for hint, category in self.CATEGORY_HINTS.items():
            if hint in lowered:
                return category
        return "unknown"
