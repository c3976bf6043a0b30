"""Type definitions for the plan parser."""

from dataclasses import dataclass, field
from enum import Enum


class SectionKind(Enum):
    """Top-level section of a generated plan, classified by its heading label."""

    OVERVIEW = "overview"
    SCHEDULE = "schedule"
    ADDITIONAL = "additional"
    OTHER = "other"


@dataclass
class Section:
    """A heading-delimited block of raw plan text."""

    label: str
    body: list[str] = field(default_factory=list)


@dataclass
class OverviewInfo:
    """Trip overview extracted from the 概要 section."""

    transportation: str = ""
    accommodation: str = ""
    budget: str = ""
    items: str = ""


@dataclass
class ScheduleEntry:
    """
    One row of the detailed schedule table.

    Entries kept by the parser always have a non-empty day. The other cells
    are None when the source row was too short to provide them.
    """

    day: str
    time: str | None
    action: str | None
    detail: str | None
    transport: str | None

    @property
    def needs_transport(self) -> bool:
        """False when the transport cell is "-" (not applicable) or missing."""
        return bool(self.transport) and self.transport != "-"


@dataclass
class MalformedRow:
    """A schedule table row that could not be mapped onto all five columns."""

    line: str
    cells: list[str]
    reason: str


@dataclass
class AdditionalInfo:
    """Supplementary advice extracted from the 補足情報 section."""

    food: str = ""
    climate: str = ""
    notes: str = ""


@dataclass
class ParseWarning:
    """Recoverable problem noticed while parsing."""

    kind: str
    message: str
    line: str | None = None


@dataclass
class ParsedPlan:
    """Complete parser output."""

    overview: OverviewInfo = field(default_factory=OverviewInfo)
    schedule: list[ScheduleEntry] = field(default_factory=list)
    additional: AdditionalInfo = field(default_factory=AdditionalInfo)
    warnings: list[ParseWarning] = field(default_factory=list)


@dataclass
class DaySchedule:
    """Schedule entries belonging to one day of the trip."""

    day: int
    label: str
    entries: list[ScheduleEntry] = field(default_factory=list)


def is_malformed_row(result: ScheduleEntry | MalformedRow) -> bool:
    """Check if a parsed schedule row is the malformed variant."""
    return isinstance(result, MalformedRow)
