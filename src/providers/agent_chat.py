"""PydanticAI-backed completer for any provider PydanticAI supports."""

from __future__ import annotations

import logging

from pydantic_ai import Agent
from pydantic_ai.settings import ModelSettings

from src.lookup.errors import ProviderError

logger = logging.getLogger(__name__)


class AgentCompleter:
    """Runs a one-shot PydanticAI agent with a plain-text output.

    *model* uses PydanticAI's ``provider:model`` form, e.g.
    ``anthropic:claude-3-5-haiku-latest``. JSON-only output is requested by the
    system prompt, since not every provider offers a JSON response mode.
    """

    def __init__(
        self,
        model: str,
        *,
        temperature: float = 0.2,
        top_p: float = 0.9,
        max_tokens: int = 500,
        timeout: float = 20.0,
    ) -> None:
        self._model = model
        self._model_settings = ModelSettings(
            temperature=temperature,
            top_p=top_p,
            max_tokens=max_tokens,
            timeout=timeout,
        )

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        logger.info("agent completion request", extra={"llm_model": self._model})
        try:
            # Model and provider credentials are resolved in the constructor
            agent = Agent(self._model, system_prompt=system_prompt, model_settings=self._model_settings)
            result = await agent.run(user_prompt)
        except Exception as exc:
            raise ProviderError(self._model.split(":")[0], "completion", str(exc) or type(exc).__name__) from exc

        usage = result.usage()
        logger.debug(
            "agent completion usage",
            extra={
                "llm_model": self._model,
                "input_tokens": usage.input_tokens or 0,
                "output_tokens": usage.output_tokens or 0,
            },
        )
        return str(result.output).strip()
