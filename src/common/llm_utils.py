"""LLM utilities for Ollama interactions."""

import ollama

from common.config import (
    LLM_MODEL,
    LLM_NUM_CTX,
    LLM_NUM_PREDICT,
    LLM_SYSTEM_PROMPT,
    LLM_TEMPERATURE,
    LLM_TOP_K,
    LLM_TOP_P,
)
from common.logging_config import get_logger
from common.metrics import (
    llm_completion_tokens,
    llm_prompt_tokens,
    llm_total_duration,
    llm_tps,
    llm_ttft,
)

logger = get_logger("common_llm_utils")

logger.info(f"LLM configured: model={LLM_MODEL}, temp={LLM_TEMPERATURE}, num_ctx={LLM_NUM_CTX}")


def _log_metrics(response: dict, caller: str = "unknown") -> None:
    """
    Log and export LLM performance metrics from an Ollama response.

    Ollama reports timings in nanoseconds; they are converted to milliseconds
    before logging and recording.
    """
    total_ns = response.get("total_duration") or 0
    prompt_eval_ns = response.get("prompt_eval_duration") or 0
    eval_ns = response.get("eval_duration") or 0
    load_ns = response.get("load_duration") or 0
    prompt_tokens = response.get("prompt_eval_count") or 0
    completion_tokens = response.get("eval_count") or 0

    total_ms = total_ns / 1_000_000
    ttft_ms = (load_ns + prompt_eval_ns) / 1_000_000
    tps = (completion_tokens / (eval_ns / 1_000_000_000)) if eval_ns > 0 else 0

    logger.info(
        f"[{caller}] "
        f"total={total_ms:.0f}ms | "
        f"TTFT={ttft_ms:.0f}ms | "
        f"tokens={prompt_tokens}→{completion_tokens} | "
        f"TPS={tps:.1f}"
    )

    attrs = {"caller": caller, "model": LLM_MODEL}
    llm_ttft.record(ttft_ms, attributes=attrs)
    llm_total_duration.record(total_ms, attributes=attrs)
    llm_tps.record(tps, attributes=attrs)
    llm_prompt_tokens.add(prompt_tokens, attributes=attrs)
    llm_completion_tokens.add(completion_tokens, attributes=attrs)


def _get_llm_options() -> dict:
    """Build the options dict for Ollama calls from config."""
    return {
        "num_ctx": LLM_NUM_CTX,
        "temperature": LLM_TEMPERATURE,
        "top_p": LLM_TOP_P,
        "top_k": LLM_TOP_K,
        "num_predict": LLM_NUM_PREDICT,
    }


def _prepare_messages(messages: list[dict]) -> list[dict]:
    """Prepend the configured system prompt unless one is already present."""
    if LLM_SYSTEM_PROMPT is None:
        return messages
    if messages and messages[0].get("role") == "system":
        return messages
    return [{"role": "system", "content": LLM_SYSTEM_PROMPT}] + messages


def _log_llm_context(messages: list[dict], caller: str = "unknown") -> None:
    """Log the full message list at DEBUG level for prompt debugging."""
    logger.debug(f"\n{'=' * 80}")
    logger.debug(f"LLM CALL from: {caller}")
    logger.debug(f"Model: {LLM_MODEL}")
    logger.debug(f"Message count: {len(messages)}")
    logger.debug(f"{'=' * 80}")

    for i, msg in enumerate(messages):
        logger.debug(f"[{i}] ROLE: {msg.get('role', 'unknown').upper()}")
        logger.debug(f"{msg.get('content', '')}")

    logger.debug(f"{'=' * 80}\n")


def get_ai_response(messages: list[dict], caller: str = "get_ai_response") -> str:
    """Get a plain text response from the LLM."""
    prepared_messages = _prepare_messages(messages)
    _log_llm_context(prepared_messages, caller=caller)
    response = ollama.chat(
        model=LLM_MODEL,
        messages=prepared_messages,
        options=_get_llm_options(),
    )
    response_content = response["message"]["content"]
    _log_metrics(response, caller=caller)

    logger.debug(f"\n{'─' * 40}")
    logger.debug("LLM RESPONSE:")
    logger.debug(f"{response_content}")
    logger.debug(f"{'─' * 40}\n")

    return response_content
