"""
Plan Parser

Turns the markdown-like text returned by the LLM into a ParsedPlan:
- Section splitting on "#" headings
- Keyword-line extraction for the overview and supplementary sections
- Pipe-table extraction for the detailed schedule

Parsing is best effort and never raises: missing sections keep their
defaults, unmatched keywords stay empty and malformed table rows are dropped
or reported as ParseWarning entries.
"""

import re
from collections.abc import Callable, Iterator

from common.config import BUDGET_PLAN_HEADING
from plan_parser.types import (
    AdditionalInfo,
    MalformedRow,
    OverviewInfo,
    ParsedPlan,
    ParseWarning,
    ScheduleEntry,
    Section,
    SectionKind,
    is_malformed_row,
)

HEADING_DELIMITER = "#"
TABLE_DELIMITER = "|"
SCHEDULE_COLUMNS = ("day", "time", "action", "detail", "transport")

# Checked in order, the first keyword contained in a heading label wins
SECTION_KEYWORDS: tuple[tuple[str, SectionKind], ...] = (
    ("概要", SectionKind.OVERVIEW),
    ("詳細日程", SectionKind.SCHEDULE),
    ("補足情報", SectionKind.ADDITIONAL),
)

OVERVIEW_KEYWORDS: dict[str, str] = {
    "transportation": "移動手段",
    "accommodation": "宿泊先",
    "budget": "予算",
    "items": "持ち物",
}

ADDITIONAL_KEYWORDS: dict[str, str] = {
    "food": "グルメスポット",
    "climate": "気候",
    "notes": "注意点",
}

# Markdown table separator row, e.g. |------|:----:|
SEPARATOR_PATTERN = re.compile(r"^[\s|:\-]*-[\s|:\-]*$")


def split_sections(text: str) -> list[Section]:
    """
    Split raw plan text into sections on the heading delimiter.

    The label is the first line of each fragment; the body is the remaining
    non-blank lines, kept verbatim. Empty fragments are discarded.
    """
    sections: list[Section] = []
    for fragment in text.split(HEADING_DELIMITER):
        fragment = fragment.strip()
        if not fragment:
            continue
        label, *body = fragment.splitlines()
        sections.append(Section(label=label.strip(), body=[line for line in body if line.strip()]))
    return sections


def classify_section(label: str) -> SectionKind:
    """Map a heading label to its section kind by keyword containment."""
    for keyword, kind in SECTION_KEYWORDS:
        if keyword in label:
            return kind
    return SectionKind.OTHER


def _iter_keyword_matches(lines: list[str], keywords: dict[str, str]) -> Iterator[tuple[str, str]]:
    for line in lines:
        for name, keyword in keywords.items():
            if keyword in line:
                yield name, line.split(keyword, 1)[1]


def extract_keyword_fields(lines: list[str], keywords: dict[str, str]) -> dict[str, str]:
    """
    Extract one value per field from keyword lines.

    A line containing a field's keyword sets the field to everything after the
    first occurrence of that keyword. Later matches overwrite earlier ones and
    fields without a matching line stay empty.

    Args:
        lines: Section body lines
        keywords: Ordered mapping of field name to keyword

    Returns:
        Dict with one string value per field name
    """
    values = {name: "" for name in keywords}
    for name, value in _iter_keyword_matches(lines, keywords):
        values[name] = value
    return values


def parse_schedule_row(line: str) -> ScheduleEntry | MalformedRow:
    """
    Map one pipe-delimited table line onto the schedule columns.

    The first and last cells (outside the leading and trailing pipes) are
    discarded. Cells beyond the fifth are ignored.
    """
    cells = [cell.strip() for cell in line.split(TABLE_DELIMITER)[1:-1]]
    if len(cells) < len(SCHEDULE_COLUMNS):
        return MalformedRow(
            line=line,
            cells=cells,
            reason=f"expected {len(SCHEDULE_COLUMNS)} cells, found {len(cells)}",
        )
    day, time, action, detail, transport = cells[: len(SCHEDULE_COLUMNS)]
    return ScheduleEntry(day=day, time=time, action=action, detail=detail, transport=transport)


def _check_table_head(head: list[str]) -> list[ParseWarning]:
    """Compare the two skipped table lines with the expected header/separator shapes."""
    warnings: list[ParseWarning] = []
    if head and SEPARATOR_PATTERN.match(head[0]):
        warnings.append(
            ParseWarning(
                kind="unexpected_header",
                message="first table line looks like a separator, not a header",
                line=head[0],
            )
        )
    if len(head) > 1 and not SEPARATOR_PATTERN.match(head[1]):
        warnings.append(
            ParseWarning(
                kind="unexpected_separator",
                message="second table line is not a separator row and was skipped anyway",
                line=head[1],
            )
        )
    return warnings


def extract_schedule(
    lines: list[str], strict: bool = False
) -> tuple[list[ScheduleEntry], list[ParseWarning]]:
    """
    Parse the detailed schedule section into schedule entries.

    The first two table lines are always skipped as header and separator.
    Rows with an empty day cell are dropped silently. Rows with fewer than
    five cells are kept with None in the missing cells, or dropped when
    strict is set; both cases add a short_row warning.

    Args:
        lines: Body lines of the schedule section
        strict: Reject under-populated rows instead of partially accepting them

    Returns:
        Tuple of (entries in source order, warnings)
    """
    table_lines = [line for line in lines if TABLE_DELIMITER in line]
    warnings = _check_table_head(table_lines[:2])
    entries: list[ScheduleEntry] = []

    for line in table_lines[2:]:
        result = parse_schedule_row(line)
        if is_malformed_row(result):
            if not result.cells or not result.cells[0]:
                continue
            warnings.append(ParseWarning(kind="short_row", message=result.reason, line=line))
            if strict:
                continue
            padded = result.cells + [None] * (len(SCHEDULE_COLUMNS) - len(result.cells))
            result = ScheduleEntry(*padded)

        if result.day:
            entries.append(result)

    return entries, warnings


def _parse_overview(plan: ParsedPlan, section: Section, strict: bool) -> None:
    for name, value in _iter_keyword_matches(section.body, OVERVIEW_KEYWORDS):
        setattr(plan.overview, name, value)


def _parse_schedule(plan: ParsedPlan, section: Section, strict: bool) -> None:
    entries, warnings = extract_schedule(section.body, strict=strict)
    plan.schedule.extend(entries)
    plan.warnings.extend(warnings)


def _parse_additional(plan: ParsedPlan, section: Section, strict: bool) -> None:
    for name, value in _iter_keyword_matches(section.body, ADDITIONAL_KEYWORDS):
        setattr(plan.additional, name, value)


SECTION_HANDLERS: dict[SectionKind, Callable[[ParsedPlan, Section, bool], None]] = {
    SectionKind.OVERVIEW: _parse_overview,
    SectionKind.SCHEDULE: _parse_schedule,
    SectionKind.ADDITIONAL: _parse_additional,
}


def parse_plan(text: str, strict: bool = False) -> ParsedPlan:
    """
    Parse raw LLM plan text into a ParsedPlan.

    Sections are recognized by label keyword, not position. Unrecognized
    sections (such as an appended budget breakdown) are ignored.

    Args:
        text: Raw plan text as returned by the LLM
        strict: Reject under-populated schedule rows

    Returns:
        ParsedPlan; all fields keep their defaults when nothing is recognized
    """
    plan = ParsedPlan(overview=OverviewInfo(), additional=AdditionalInfo())
    for section in split_sections(text):
        handler = SECTION_HANDLERS.get(classify_section(section.label))
        if handler is not None:
            handler(plan, section, strict)
    return plan


def split_budget_plan(text: str) -> tuple[str, str | None]:
    """
    Split a merged response into the itinerary and the budget breakdown.

    Returns:
        Tuple of (itinerary_text, budget_text_or_none)
    """
    itinerary, marker, budget = text.partition(f"\n\n{BUDGET_PLAN_HEADING}\n")
    if not marker:
        return text, None
    return itinerary, budget
