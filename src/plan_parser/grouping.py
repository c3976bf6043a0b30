"""Per-day views over a parsed schedule."""

from plan_parser.types import DaySchedule, ScheduleEntry


def day_label(day: int) -> str:
    """Marker the schedule table uses for a day, e.g. 1日目."""
    return f"{day}日目"


def entries_for_day(schedule: list[ScheduleEntry], day: int) -> list[ScheduleEntry]:
    """
    Select the entries shown under one day.

    An entry belongs to the day when its day cell contains the day marker.
    Entries with an empty day cell are attached to every day that has at
    least one marked entry.
    """
    # TODO: empty-day rows land under every matched day; needs a product decision
    # before switching to "nearest preceding day".
    marker = day_label(day)
    has_marked = any(marker in entry.day for entry in schedule)
    return [
        entry
        for entry in schedule
        if marker in entry.day or (entry.day == "" and has_marked)
    ]


def group_by_day(schedule: list[ScheduleEntry], duration: int) -> list[DaySchedule]:
    """
    Build one DaySchedule per trip day, in day order.

    The schedule is not modified; each bucket keeps source order.
    """
    return [
        DaySchedule(day=day, label=day_label(day), entries=entries_for_day(schedule, day))
        for day in range(1, duration + 1)
    ]


def unassigned_entries(schedule: list[ScheduleEntry], duration: int) -> list[ScheduleEntry]:
    """Entries with a day cell that matches none of the trip's day markers."""
    markers = [day_label(day) for day in range(1, duration + 1)]
    return [
        entry
        for entry in schedule
        if entry.day and not any(marker in entry.day for marker in markers)
    ]
