"""OpenTelemetry metrics for LLM and plan parsing observability."""

from common.metrics.instruments import (
    llm_completion_tokens,
    llm_prompt_tokens,
    llm_total_duration,
    llm_tps,
    llm_ttft,
    plan_parse_warnings,
    plan_schedule_rows,
    plan_unassigned_rows,
)

__all__ = [
    "llm_completion_tokens",
    "llm_prompt_tokens",
    "llm_total_duration",
    "llm_tps",
    "llm_ttft",
    "plan_parse_warnings",
    "plan_schedule_rows",
    "plan_unassigned_rows",
]
