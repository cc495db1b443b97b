"""Cost estimate for Claude API usage."""

from __future__ import annotations

from collections.abc import Iterable

from resume_generator.clients.llm_client import ModelResult

# Pricing per 1M tokens (USD), keyed by model family prefix
MODEL_PRICING: dict[str, dict[str, float]] = {
    "claude-3-5-haiku": {"input": 0.80, "output": 4.00},
    "claude-3-5-sonnet": {"input": 3.00, "output": 15.00},
    "claude-3-7-sonnet": {"input": 3.00, "output": 15.00},
    "claude-haiku-4-5": {"input": 1.00, "output": 5.00},
    "claude-sonnet-4": {"input": 3.00, "output": 15.00},
    "claude-opus-4": {"input": 15.00, "output": 75.00},
}


def pricing_for(model_id: str) -> dict[str, float] | None:
    """Longest matching family prefix wins; unknown models have no price."""
    matches = [prefix for prefix in MODEL_PRICING if model_id.startswith(prefix)]
    if not matches:
        return None
    return MODEL_PRICING[max(matches, key=len)]


def calculate_cost(results: Iterable[ModelResult]) -> float:
    """Total estimated cost in USD for a set of model invocations."""
    total = 0.0
    for result in results:
        pricing = pricing_for(result.model)
        if pricing is None:
            continue
        total += (result.input_tokens / 1_000_000) * pricing["input"]
        total += (result.output_tokens / 1_000_000) * pricing["output"]
    return total


def usage_summary(results: Iterable[ModelResult]) -> dict:
    """Token totals, per-call breakdown and estimated cost."""
    results = list(results)
    return {
        "input": sum(r.input_tokens for r in results),
        "output": sum(r.output_tokens for r in results),
        "calls": [(r.model, r.input_tokens, r.output_tokens, r.stop_reason) for r in results],
        "estimated_cost_usd": calculate_cost(results),
    }
