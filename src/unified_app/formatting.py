"""
Formatting utilities for the plan surfaces.

Provides markdown rendering for parsed plans, the loading indicator and
error messages. All functions are UI-agnostic and return plain strings.

NO Chainlit imports allowed in this file.
"""

from common.config import PROGRESS_MAX_DOTS, PROGRESS_MESSAGE
from orchestrator.core import PlanContext
from plan_parser.types import AdditionalInfo, DaySchedule, OverviewInfo

# Display labels, in display order
OVERVIEW_LABELS = {
    "transportation": "移動手段",
    "accommodation": "宿泊先",
    "budget": "予算目安",
    "items": "持ち物",
}

ADDITIONAL_LABELS = {
    "food": "おすすめグルメスポット",
    "climate": "気候と服装",
    "notes": "注意点",
}

SCHEDULE_HEADERS = ("時間", "行動", "詳細", "移動手段")


def format_progress(tick: int) -> str:
    """
    Format the loading indicator for a given animation tick.

    Example output (tick=2):
        旅行プランを考え中..
    """
    return PROGRESS_MESSAGE + "." * (tick % (PROGRESS_MAX_DOTS + 1))


def _clean_value(value: str | None) -> str:
    """Strip the separator left over after the keyword, e.g. ': 飛行機' -> '飛行機'."""
    if not value:
        return ""
    return value.strip().lstrip(":：").strip()


def _format_fields(title: str, info: OverviewInfo | AdditionalInfo, labels: dict[str, str]) -> str:
    lines = [f"## {title}\n"]
    for name, label in labels.items():
        lines.append(f"### {label}")
        lines.append(_clean_value(getattr(info, name)) or "-")
        lines.append("")
    return "\n".join(lines)


def format_overview(overview: OverviewInfo) -> str:
    """Render the trip overview as markdown."""
    return _format_fields("旅行の概要", overview, OVERVIEW_LABELS)


def format_additional(additional: AdditionalInfo) -> str:
    """Render the supplementary information as markdown."""
    return _format_fields("補足情報", additional, ADDITIONAL_LABELS)


def format_day_schedule(day_schedule: DaySchedule) -> str:
    """Render one day as a markdown table (時間 / 行動 / 詳細 / 移動手段)."""
    lines = [f"### {day_schedule.label}"]
    if not day_schedule.entries:
        lines.append("予定がありません")
        return "\n".join(lines)

    lines.append("| " + " | ".join(SCHEDULE_HEADERS) + " |")
    lines.append("|" + "|".join("---" for _ in SCHEDULE_HEADERS) + "|")
    for entry in day_schedule.entries:
        cells = (entry.time, entry.action, entry.detail, entry.transport)
        lines.append("| " + " | ".join(cell or "" for cell in cells) + " |")
    return "\n".join(lines)


def format_plan(ctx: PlanContext) -> str:
    """
    Format a parsed plan for display.

    Args:
        ctx: PlanContext after the parser stage

    Returns:
        Markdown with overview, per-day schedule, supplementary information
        and the budget breakdown when one was requested.
    """
    if ctx.parsed_plan is None:
        return "プランがまだ生成されていません。"

    parts = [format_overview(ctx.parsed_plan.overview), "## 詳細日程\n"]
    for day_schedule in ctx.day_schedules:
        parts.append(format_day_schedule(day_schedule))
        parts.append("")

    if ctx.unassigned:
        parts.append(f"※日付を判別できない予定が{len(ctx.unassigned)}件あります")
        parts.append("")

    parts.append(format_additional(ctx.parsed_plan.additional))

    if ctx.budget_text:
        parts.append("## 予算最適化プラン\n")
        parts.append(ctx.budget_text.strip())

    return "\n".join(parts).rstrip() + "\n"


def format_error_for_display(error: str) -> str:
    """
    Convert internal error message to user-friendly format.

    Args:
        error: The raw error message from the pipeline

    Returns:
        A sanitized, user-friendly error message.
    """
    if not error:
        return "予期しないエラーが発生しました。もう一度お試しください。"

    error_mappings = {
        "Invalid travel_input": "すべての項目を入力してください。日数は1以上の数値を入力してください。",
        "LLM": "プランの生成中にエラーが発生しました。もう一度お試しください。",
        "requires": "プランを生成する準備ができていません。",
        "timeout": "プランの生成に時間がかかりすぎました。もう一度お試しください。",
        "connection": "AIサービスに接続できません。接続を確認してもう一度お試しください。",
    }

    error_lower = error.lower()
    for pattern, friendly in error_mappings.items():
        if pattern.lower() in error_lower:
            return friendly

    return "予期しないエラーが発生しました。もう一度お試しください。"
