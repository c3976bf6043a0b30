"""
Orchestration adapter layer for the plan surfaces.

This module provides a UI-agnostic interface that wraps the pipeline,
enabling any frontend (Chainlit, CLI) to collect trip parameters and get a
parsed plan without direct coupling to the core modules.

NO Chainlit imports allowed in this file.
"""

from dataclasses import dataclass

from common.config import DEFAULT_BUDGET, DEFAULT_DESTINATION, DEFAULT_DURATION, DEFAULT_ORIGIN
from orchestrator.core import PlanContext, run_full_pipeline
from plan_requestor.core import INVALID_INPUT_MESSAGE, TravelPlanInput


INVALID_BUDGET_MESSAGE = "予算は数値で入力してください（例: 200000、20万円）。不要な場合は 0 を入力してください。"
UNIT_SUFFIXES = ("円", "日間", "日")
MAN_UNIT = 10_000


@dataclass
class FormField:
    """One question asked to the traveler."""

    name: str
    question: str
    default: str


FORM_FIELDS: list[FormField] = [
    FormField(name="origin", question="出発地を入力してください", default=DEFAULT_ORIGIN),
    FormField(name="destination", question="目的地を入力してください", default=DEFAULT_DESTINATION),
    FormField(name="duration", question="旅行日数を入力してください", default=str(DEFAULT_DURATION)),
    FormField(
        name="budget",
        question="予算（円）を入力してください。予算を入力すると、より詳細な予算プランを提案します（不要な場合は 0）",
        default=str(DEFAULT_BUDGET),
    ),
]


def _parse_int(value: str) -> int:
    """
    Parse a number typed by the user.

    Accepts thousands separators, a trailing 円, 日 or 日間, and the 万 unit
    ("20万円" is 200000). Raises ValueError when nothing numeric is left.
    """
    cleaned = value.strip().replace(",", "").replace("，", "")
    for suffix in UNIT_SUFFIXES:
        cleaned = cleaned.removesuffix(suffix)
    if cleaned.endswith("万"):
        return round(float(cleaned[:-1]) * MAN_UNIT)
    return int(cleaned)


def build_travel_input(answers: dict[str, str]) -> TravelPlanInput:
    """
    Build a TravelPlanInput from raw form answers.

    Blank answers fall back to the field default. A budget of 0 means no
    budget breakdown is requested.

    Raises:
        ValueError: duration or budget is not a number; the message is
            meant for the traveler
    """
    values = {}
    for form_field in FORM_FIELDS:
        answer = (answers.get(form_field.name) or "").strip()
        values[form_field.name] = answer or form_field.default

    try:
        duration = _parse_int(values["duration"])
    except (ValueError, OverflowError):
        raise ValueError(INVALID_INPUT_MESSAGE) from None
    try:
        budget = _parse_int(values["budget"])
    except (ValueError, OverflowError):
        raise ValueError(INVALID_BUDGET_MESSAGE) from None

    return TravelPlanInput(
        origin=values["origin"],
        destination=values["destination"],
        duration=duration,
        budget=budget if budget > 0 else None,
    )


def plan_trip(travel_input: TravelPlanInput) -> PlanContext:
    """Run the full pipeline for one request."""
    return run_full_pipeline(travel_input)


__all__ = [
    "FormField",
    "FORM_FIELDS",
    "INVALID_BUDGET_MESSAGE",
    "build_travel_input",
    "plan_trip",
    "PlanContext",
]
