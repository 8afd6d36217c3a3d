import httpx
import openai

from intake.ai.client_base import BaseAIClient
from intake.ai.exceptions import AIProviderError, AIProviderNetworkError
from intake.ai.models import Attachment


class OpenAIClientAdapter(BaseAIClient):
    """AI client adapter built on the OpenAI-compatible async chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

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
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": schema_name,
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": self._user_content(user_prompt, attachment)},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AIProviderNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AIProviderNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AIProviderError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AIProviderError("AI returned empty response")
        return content

    @staticmethod
    def _user_content(
        user_prompt: str, attachment: Attachment | None
    ) -> list[dict[str, object]]:
        parts: list[dict[str, object]] = [{"type": "text", "text": user_prompt}]
        if attachment is None:
            return parts
        if attachment.image_data_url is not None:
            parts.append(
                {"type": "image_url", "image_url": {"url": attachment.image_data_url}}
            )
        elif attachment.text is not None:
            parts.append(
                {"type": "text", "text": f"Document text:\n---\n{attachment.text}\n---"}
            )
        return parts
