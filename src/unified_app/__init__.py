"""
Web Layer for the Travel Itinerary Planner.

This package provides a Chainlit application that collects the trip
parameters and runs the pipeline: Plan Requestor → Plan Parser →
Day Grouping → Rendering.
"""

from unified_app.formatting import (
    format_additional,
    format_day_schedule,
    format_error_for_display,
    format_overview,
    format_plan,
    format_progress,
)
from unified_app.orchestration import (
    FORM_FIELDS,
    FormField,
    PlanContext,
    build_travel_input,
    plan_trip,
)

__all__ = [
    # Orchestration
    "FormField",
    "FORM_FIELDS",
    "build_travel_input",
    "plan_trip",
    "PlanContext",
    # Formatting
    "format_progress",
    "format_overview",
    "format_day_schedule",
    "format_additional",
    "format_plan",
    "format_error_for_display",
]
