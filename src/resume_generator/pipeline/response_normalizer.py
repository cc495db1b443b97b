"""Turns a raw model reply into a parsed JSON object."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from resume_generator.clients.llm_client import LLMClient, ModelResult, Turns
from resume_generator.errors import RefusalError
from resume_generator.utils.json_parser import EXCERPT_LENGTH, extract_json, is_refusal

logger = logging.getLogger(__name__)


@dataclass
class NormalizedResponse:
    data: dict
    results: list[ModelResult] = field(default_factory=list)

    @property
    def retried(self) -> bool:
        return len(self.results) > 1


class ResponseNormalizer:
    """Recovers from truncation, rejects refusals and extracts the JSON payload.

    ``invoke_kwargs`` are forwarded to ``LLMClient.invoke`` for the
    truncation-recovery call so it runs with the same model and budgets as the
    first one.
    """

    def __init__(self, llm: LLMClient, **invoke_kwargs):
        self.llm = llm
        self.invoke_kwargs = invoke_kwargs

    async def normalize(
        self,
        result: ModelResult,
        reduced_turns: Turns | None = None,
    ) -> NormalizedResponse:
        results = [result]
        if result.truncated and reduced_turns is not None:
            result = await self.recover_truncation(result, reduced_turns)
            results.append(result)
        return NormalizedResponse(data=self.parse(result.text), results=results)

    async def recover_truncation(self, result: ModelResult, reduced_turns: Turns) -> ModelResult:
        """Re-invoke once with the reduced-scope instruction."""
        logger.warning(
            "Model hit max_tokens (output_tokens=%d); retrying once with reduced requirements",
            result.output_tokens,
        )
        retry = await self.llm.invoke(reduced_turns, **self.invoke_kwargs)
        logger.info(
            "Retry response: stop_reason=%s, output_tokens=%d",
            retry.stop_reason,
            retry.output_tokens,
        )
        if retry.truncated:
            logger.warning("Reduced-scope retry was also truncated; continuing with partial output")
        return retry

    def parse(self, text: str) -> dict:
        content = text.strip()
        if is_refusal(content):
            logger.error("Model refused instead of returning JSON: %s", content[:EXCERPT_LENGTH])
            raise RefusalError(content[:EXCERPT_LENGTH])
        return extract_json(content)
