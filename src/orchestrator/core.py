"""
Plan Orchestrator

Coordinates the plan pipeline:
1. Plan Requestor (LLM calls, optional budget breakdown)
2. Plan Parser (raw text -> ParsedPlan)
3. Day grouping (ParsedPlan -> per-day views)

Uses a shared PlanContext to pass data between stages.
"""

from dataclasses import dataclass, field

from common.logging_config import get_logger
from common.metrics import plan_parse_warnings, plan_schedule_rows, plan_unassigned_rows
from plan_parser.core import parse_plan, split_budget_plan
from plan_parser.grouping import group_by_day, unassigned_entries
from plan_parser.types import DaySchedule, ParsedPlan, ScheduleEntry
from plan_requestor.core import TravelPlanInput, generate_plan, validate_travel_input

logger = get_logger("orchestrator")


@dataclass
class PlanContext:
    """
    Shared context that accumulates outputs from each stage of the pipeline.

    Each stage reads what it needs and writes its output to this context.
    """

    travel_input: TravelPlanInput | None = None
    raw_text: str | None = None
    itinerary_text: str | None = None
    budget_text: str | None = None
    parsed_plan: ParsedPlan | None = None
    day_schedules: list[DaySchedule] = field(default_factory=list)
    unassigned: list[ScheduleEntry] = field(default_factory=list)
    error: str | None = None


def run_requestor(ctx: PlanContext) -> PlanContext:
    """
    Ask the LLM for a plan.

    Requires: ctx.travel_input
    Produces: ctx.raw_text
    """
    if ctx.travel_input is None:
        ctx.error = "Requestor requires travel_input"
        logger.error(ctx.error)
        return ctx

    validation_error = validate_travel_input(ctx.travel_input)
    if validation_error:
        ctx.error = f"Invalid travel_input: {validation_error}"
        logger.error(ctx.error)
        return ctx

    logger.info("Running plan requestor...")

    try:
        ctx.raw_text = generate_plan(ctx.travel_input)
    except Exception as e:
        ctx.error = f"LLM request failed: {e}"
        logger.error(ctx.error)
        return ctx

    logger.info(f"Plan received ({len(ctx.raw_text)} chars)")
    return ctx


def run_parser(ctx: PlanContext, strict: bool = False) -> PlanContext:
    """
    Parse the raw plan and build the per-day views.

    Requires: ctx.raw_text (ctx.travel_input for the per-day views)
    Produces: ctx.parsed_plan, ctx.day_schedules, ctx.unassigned,
              ctx.itinerary_text, ctx.budget_text
    """
    if ctx.raw_text is None:
        ctx.error = "Parser requires raw_text"
        logger.error(ctx.error)
        return ctx

    ctx.itinerary_text, ctx.budget_text = split_budget_plan(ctx.raw_text)
    ctx.parsed_plan = parse_plan(ctx.raw_text, strict=strict)

    # Without a trip length there are no days to group rows into
    duration = ctx.travel_input.duration if ctx.travel_input else None
    if duration is not None:
        ctx.day_schedules = group_by_day(ctx.parsed_plan.schedule, duration)
        ctx.unassigned = unassigned_entries(ctx.parsed_plan.schedule, duration)

    for warning in ctx.parsed_plan.warnings:
        logger.warning(f"Parse warning [{warning.kind}]: {warning.message} ({warning.line!r})")
        plan_parse_warnings.add(1, attributes={"kind": warning.kind})
    if ctx.unassigned:
        logger.warning(f"{len(ctx.unassigned)} schedule rows match no day of a {duration}-day trip")
        plan_unassigned_rows.add(len(ctx.unassigned))
    plan_schedule_rows.add(len(ctx.parsed_plan.schedule), attributes={"strict": strict})

    logger.info(
        f"Parsed plan: {len(ctx.parsed_plan.schedule)} schedule rows, "
        f"{len(ctx.parsed_plan.warnings)} warnings, budget={'yes' if ctx.budget_text else 'no'}"
    )
    return ctx


def run_full_pipeline(travel_input: TravelPlanInput, strict: bool = False) -> PlanContext:
    """
    Run the full pipeline from trip parameters to a parsed, grouped plan.

    Args:
        travel_input: Trip parameters
        strict: Reject under-populated schedule rows

    Returns:
        PlanContext with all results, or with error set
    """
    ctx = PlanContext(travel_input=travel_input)

    ctx = run_requestor(ctx)
    if ctx.error:
        return ctx

    return run_parser(ctx, strict=strict)
