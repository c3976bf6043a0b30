"""
Plan Parser

Reads the markdown-like itinerary produced by the LLM back into typed
records and builds per-day views for rendering.
"""

from plan_parser.core import (
    extract_keyword_fields,
    extract_schedule,
    parse_plan,
    parse_schedule_row,
    split_budget_plan,
    split_sections,
)
from plan_parser.grouping import group_by_day, unassigned_entries
from plan_parser.types import (
    AdditionalInfo,
    DaySchedule,
    MalformedRow,
    OverviewInfo,
    ParsedPlan,
    ParseWarning,
    ScheduleEntry,
    Section,
    SectionKind,
    is_malformed_row,
)

__all__ = [
    # Parsing
    "parse_plan",
    "split_sections",
    "extract_keyword_fields",
    "extract_schedule",
    "parse_schedule_row",
    "split_budget_plan",
    # Grouping
    "group_by_day",
    "unassigned_entries",
    # Types
    "AdditionalInfo",
    "DaySchedule",
    "MalformedRow",
    "OverviewInfo",
    "ParsedPlan",
    "ParseWarning",
    "ScheduleEntry",
    "Section",
    "SectionKind",
    "is_malformed_row",
]
