from typing import ClassVar

from intake.ai.client_base import BaseAIClient
from intake.ai.example_client_adapter import ExampleClientAdapter
from intake.ai.openai_client_adapter import OpenAIClientAdapter
from intake.config.settings import Settings
from intake.documents.classifier import AIClassifier
from intake.documents.extractor import AIExtractor
from intake.pdf.factory import PdfReaderFactory


class DocumentServicesFactory:
    """Creates the configured classifier and extractor pair."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> tuple[AIClassifier, AIExtractor]:
        """Build both services around one shared AI client and PDF reader."""
        provider = settings.extraction_provider.lower()
        client: BaseAIClient
        if provider == "example":
            client, model, temperature = ExampleClientAdapter(), "example", 0.0
        else:
            client = OpenAIClientAdapter(
                api_key=cls._resolve_api_key(provider, settings),
                timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
                base_url=cls._resolve_base_url(provider, settings),
            )
            model = cls._resolve_model_name(provider, settings)
            temperature = settings.extraction_openai_temperature if provider == "openai" else 0.0

        pdf_reader = PdfReaderFactory.create(settings)
        common = {
            "client": client,
            "model": model,
            "pdf_reader": pdf_reader,
            "temperature": temperature,
            "pdf_max_pages": settings.pdf_max_pages,
        }
        return AIClassifier(**common), AIExtractor(**common)

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.extraction_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "extraction_openai_compatible_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )

    @staticmethod
    def _resolve_api_key(provider: str, settings: Settings) -> str:
        return getattr(settings, f"extraction_{provider}_api_key", "") or ""

    @staticmethod
    def _resolve_model_name(provider: str, settings: Settings) -> str:
        return getattr(settings, f"extraction_{provider}_model_name", "") or ""

    @staticmethod
    def _resolve_timeout_seconds(provider: str, settings: Settings) -> int:
        return getattr(settings, f"extraction_{provider}_timeout_seconds", 30) or 30
