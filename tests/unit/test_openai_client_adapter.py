from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from intake.ai.exceptions import AIProviderError, AIProviderNetworkError
from intake.ai.models import Attachment
from intake.ai.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _make_adapter(create: AsyncMock) -> tuple[OpenAIClientAdapter, MagicMock]:
    mock_client = MagicMock()
    mock_client.chat.completions.create = create
    with patch(
        "intake.ai.openai_client_adapter.openai.AsyncOpenAI",
        return_value=mock_client,
    ) as mock_cls:
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)
    mock_cls.assert_called_once_with(api_key="k", timeout=30, base_url=None)
    return adapter, mock_client


async def _complete(
    adapter: OpenAIClientAdapter, attachment: Attachment | None = None
) -> str:
    return await adapter.create_completion(
        model="m",
        temperature=0.0,
        system_prompt="system",
        user_prompt="user",
        json_schema={"type": "object"},
        schema_name="pan_extraction",
        attachment=attachment,
    )


class TestOpenAIClientAdapter:
    @pytest.mark.asyncio
    async def test_returns_content(self) -> None:
        adapter, _client = _make_adapter(
            AsyncMock(return_value=_make_mock_response('{"ok": true}'))
        )
        assert await _complete(adapter) == '{"ok": true}'

    @pytest.mark.asyncio
    async def test_sends_strict_json_schema(self) -> None:
        create = AsyncMock(return_value=_make_mock_response("{}"))
        adapter, _client = _make_adapter(create)

        await _complete(adapter)

        kwargs = create.await_args.kwargs
        assert kwargs["model"] == "m"
        assert kwargs["response_format"] == {
            "type": "json_schema",
            "json_schema": {
                "name": "pan_extraction",
                "strict": True,
                "schema": {"type": "object"},
            },
        }
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}
        assert kwargs["messages"][1]["content"] == [{"type": "text", "text": "user"}]

    @pytest.mark.asyncio
    async def test_sends_image_as_data_url(self) -> None:
        create = AsyncMock(return_value=_make_mock_response("{}"))
        adapter, _client = _make_adapter(create)

        await _complete(adapter, Attachment.from_image(b"img", "image/png"))

        parts = create.await_args.kwargs["messages"][1]["content"]
        assert parts[1] == {
            "type": "image_url",
            "image_url": {"url": "data:image/png;base64,aW1n"},
        }

    @pytest.mark.asyncio
    async def test_sends_pdf_text_inline(self) -> None:
        create = AsyncMock(return_value=_make_mock_response("{}"))
        adapter, _client = _make_adapter(create)

        await _complete(adapter, Attachment.from_text("ABCDE1234F", "application/pdf"))

        parts = create.await_args.kwargs["messages"][1]["content"]
        assert parts[1]["type"] == "text"
        assert "ABCDE1234F" in parts[1]["text"]

    @pytest.mark.asyncio
    async def test_raises_error_for_empty_content(self) -> None:
        adapter, _client = _make_adapter(AsyncMock(return_value=_make_mock_response(None)))
        with pytest.raises(AIProviderError, match="empty response"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_raises_error_for_no_choices(self) -> None:
        response = MagicMock()
        response.choices = []
        adapter, _client = _make_adapter(AsyncMock(return_value=response))
        with pytest.raises(AIProviderError, match="no choices"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_raises_network_error_on_connection_failure(self) -> None:
        adapter, _client = _make_adapter(
            AsyncMock(side_effect=openai.APIConnectionError(request=MagicMock()))
        )
        with pytest.raises(AIProviderNetworkError, match="network error"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_raises_network_error_on_timeout(self) -> None:
        adapter, _client = _make_adapter(
            AsyncMock(side_effect=httpx.TimeoutException("timeout"))
        )
        with pytest.raises(AIProviderNetworkError, match="network error"):
            await _complete(adapter)

    @pytest.mark.asyncio
    async def test_raises_network_error_on_api_error(self) -> None:
        adapter, _client = _make_adapter(
            AsyncMock(
                side_effect=openai.APIError(
                    message="server error", request=MagicMock(), body=None
                )
            )
        )
        with pytest.raises(AIProviderNetworkError, match="API error"):
            await _complete(adapter)
