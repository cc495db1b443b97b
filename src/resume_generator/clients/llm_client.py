"""Claude API wrapper with a per-attempt timeout and immediate retries."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Union

import anthropic
from tenacity import AsyncRetrying, stop_after_attempt, wait_none

from resume_generator.config import LLMConfig
from resume_generator.errors import GenerationTimeoutError, ProviderError

logger = logging.getLogger(__name__)

Turns = Union[str, Sequence[Mapping[str, str]]]


@dataclass
class ModelResult:
    """Provider-agnostic result of one model invocation."""

    text: str
    stop_reason: str | None
    input_tokens: int
    output_tokens: int
    model: str = ""

    @property
    def truncated(self) -> bool:
        return self.stop_reason == "max_tokens"


def split_system(turns: Turns) -> tuple[str | None, list[dict[str, str]]]:
    """Separate the optional system turn from the conversational turns."""
    if isinstance(turns, str):
        return None, [{"role": "user", "content": turns}]

    system: str | None = None
    messages: list[dict[str, str]] = []
    for turn in turns:
        role = turn["role"]
        if role == "system":
            if system is not None:
                raise ValueError("At most one system turn is allowed")
            system = turn["content"]
            continue
        messages.append({"role": role, "content": turn["content"]})
    return system, messages


class LLMClient:
    """Async Claude API client.

    Each attempt races the API call against ``timeout`` with ``asyncio.wait_for``,
    which cancels the in-flight request when the timer wins. Failed attempts are
    retried immediately until ``retries`` attempts have been made.
    """

    def __init__(self, config: LLMConfig | None = None):
        self.config = config or LLMConfig()
        # invoke() owns the retry budget; SDK-level retries stay off.
        kwargs: dict = {"max_retries": 0}
        if self.config.api_key is not None:
            kwargs["api_key"] = self.config.api_key
        self.client = anthropic.AsyncAnthropic(**kwargs)

    async def invoke(
        self,
        turns: Turns,
        model: str | None = None,
        max_tokens: int | None = None,
        retries: int | None = None,
        timeout: float | None = None,
        temperature: float | None = None,
    ) -> ModelResult:
        """Send turns to Claude and return the text with stop reason and usage.

        Raises:
            GenerationTimeoutError: the last attempt did not finish within ``timeout``.
            ProviderError: the last attempt failed at the provider.
        """
        system, messages = split_system(turns)
        params: dict = {
            "model": model or self.config.model,
            "max_tokens": max_tokens or self.config.max_tokens,
            "temperature": self.config.temperature if temperature is None else temperature,
            "messages": messages,
        }
        if system:
            params["system"] = system

        attempts = retries or self.config.max_retries
        timeout = timeout or self.config.timeout

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(attempts),
            wait=wait_none(),
            reraise=True,
        ):
            with attempt:
                number = attempt.retry_state.attempt_number
                logger.debug("LLM call: model=%s attempt=%d/%d", params["model"], number, attempts)
                message = await self._call_once(params, timeout, number, attempts)

        result = self._to_result(message, params["model"])
        logger.info(
            "LLM response: stop_reason=%s, %d input, %d output tokens",
            result.stop_reason,
            result.input_tokens,
            result.output_tokens,
        )
        return result

    async def _call_once(self, params: dict, timeout: float, number: int, attempts: int):
        try:
            return await asyncio.wait_for(self.client.messages.create(**params), timeout=timeout)
        except asyncio.TimeoutError as exc:
            logger.warning("LLM call timed out after %ss (attempt %d/%d)", timeout, number, attempts)
            raise GenerationTimeoutError(f"Model request timed out after {timeout}s") from exc
        except Exception as exc:
            logger.warning("LLM call failed (attempt %d/%d): %s", number, attempts, exc)
            raise ProviderError(f"Model provider error: {exc}") from exc

    @staticmethod
    def _to_result(message, model: str) -> ModelResult:
        parts = [
            block.text for block in message.content if isinstance(getattr(block, "text", None), str)
        ]
        usage = getattr(message, "usage", None)
        return ModelResult(
            text="".join(parts),
            stop_reason=getattr(message, "stop_reason", None),
            input_tokens=getattr(usage, "input_tokens", 0) or 0,
            output_tokens=getattr(usage, "output_tokens", 0) or 0,
            model=model,
        )
