"""OpenAI / Azure OpenAI chat-completion backend in JSON mode."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

import openai
from openai import AsyncAzureOpenAI, AsyncOpenAI

from src.lookup.errors import ProviderError

logger = logging.getLogger(__name__)


class OpenAIChatCompleter:
    """Calls Chat Completions with ``response_format={"type": "json_object"}``.

    *model* is the model name for OpenAI and the deployment name for Azure.
    The SDK client is built on first use, so a missing key surfaces as a
    failed request rather than a failed startup.
    """

    def __init__(
        self,
        client_factory: Callable[[], AsyncOpenAI],
        model: str,
        *,
        provider: str = "OpenAI",
        temperature: float = 0.2,
        top_p: float = 0.9,
        max_tokens: int = 500,
    ) -> None:
        self._client_factory = client_factory
        self._client: AsyncOpenAI | None = None
        self._model = model
        self._provider = provider
        self._temperature = temperature
        self._top_p = top_p
        self._max_tokens = max_tokens

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        logger.info("chat completion request", extra={"provider": self._provider, "llm_model": self._model})
        try:
            response = await self._get_client().chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self._temperature,
                top_p=self._top_p,
                max_tokens=self._max_tokens,
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as exc:
            raise ProviderError(self._provider, "completion", str(exc) or type(exc).__name__) from exc

        if response.usage is not None:
            logger.debug(
                "chat completion usage",
                extra={
                    "provider": self._provider,
                    "prompt_tokens": response.usage.prompt_tokens,
                    "completion_tokens": response.usage.completion_tokens,
                },
            )
        if not response.choices:
            return ""
        return (response.choices[0].message.content or "").strip()


def openai_completer(
    api_key: str,
    model: str,
    *,
    timeout: float,
    temperature: float,
    top_p: float,
    max_tokens: int,
) -> OpenAIChatCompleter:
    factory = partial(AsyncOpenAI, api_key=api_key, timeout=timeout, max_retries=0)
    return OpenAIChatCompleter(
        factory,
        model,
        provider="OpenAI",
        temperature=temperature,
        top_p=top_p,
        max_tokens=max_tokens,
    )


def azure_completer(
    api_key: str,
    endpoint: str,
    deployment: str,
    api_version: str,
    *,
    timeout: float,
    temperature: float,
    top_p: float,
    max_tokens: int,
) -> OpenAIChatCompleter:
    factory = partial(
        AsyncAzureOpenAI,
        api_key=api_key,
        azure_endpoint=endpoint,
        api_version=api_version,
        timeout=timeout,
        max_retries=0,
    )
    return OpenAIChatCompleter(
        factory,
        deployment,
        provider="Azure OpenAI",
        temperature=temperature,
        top_p=top_p,
        max_tokens=max_tokens,
    )
