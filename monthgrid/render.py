"""
Plain-text rendering of a CalendarView.

This is one possible rendering surface: it reads the day slots and event
placements and never looks at layout internals.
"""

from pathlib import Path
from typing import Dict, List, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from . import timeutil
from .domain import (
    DAYS_PER_WEEK,
    CalendarEvent,
    CalendarView,
    DayClassification,
    EventPlacement,
)
from .layout import stack_depth

CELL_WIDTH = 11
WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

DAY_MARKERS = {
    DayClassification.PRESENT: "*",
    DayClassification.NEARBY: " ",
    DayClassification.FARAWAY: ".",
}


def _cell(text: str) -> str:
    return text[: CELL_WIDTH - 1].ljust(CELL_WIDTH)


def _segment_cells(title: str, placement: EventPlacement) -> List[str]:
    """Draw one week segment as ``[Title-----]`` across its columns."""
    columns = placement.day_end - placement.day_start + 1
    width = columns * CELL_WIDTH - 1
    text = f"[{title}"[: width - 1].ljust(width - 1, "-") + "] "
    return [
        text[i * CELL_WIDTH : (i + 1) * CELL_WIDTH] for i in range(columns)
    ]


def _weekday_header(calendar_view: CalendarView) -> List[str]:
    first = timeutil.instant(calendar_view.view.start).weekday()
    return [
        _cell(WEEKDAY_NAMES[(first + i) % DAYS_PER_WEEK])
        for i in range(DAYS_PER_WEEK)
    ]


def build_render_context(
    calendar_view: CalendarView,
    events: Mapping[str, CalendarEvent],
    title: Optional[str] = None,
) -> Dict[str, object]:
    """Translate slots and placements into rows of fixed-width cells."""
    depth = stack_depth(calendar_view.placements)
    weeks = []
    for week_index in range(calendar_view.grid_rows):
        row = calendar_view.day_slots[
            week_index * DAYS_PER_WEEK : (week_index + 1) * DAYS_PER_WEEK
        ]
        days = [
            _cell(
                f"{timeutil.instant(slot.date).day:>2}"
                f"{DAY_MARKERS[slot.classification]}"
            )
            for slot in row
        ]
        lanes = [
            [" " * CELL_WIDTH] * DAYS_PER_WEEK
            for _ in range(depth.get(week_index, 0))
        ]
        for placement in calendar_view.placements:
            if placement.week_index != week_index:
                continue
            event = events.get(placement.event_id)
            label = event.title if event is not None else placement.event_id
            lane = lanes[placement.stack_offset - 1]
            lane[placement.day_start : placement.day_end + 1] = (
                _segment_cells(label, placement)
            )
        weeks.append({"days": days, "lanes": lanes})

    if title is None:
        title = timeutil.instant(calendar_view.cursor).format("MMMM YYYY")

    legend = []
    if any(
        slot.classification is DayClassification.PRESENT
        for slot in calendar_view.day_slots
    ):
        legend.append("* today")

    return {
        "title": title,
        "rule": "=" * (CELL_WIDTH * DAYS_PER_WEEK),
        "header": _weekday_header(calendar_view),
        "weeks": weeks,
        "legend": legend,
    }


def render_month(
    calendar_view: CalendarView,
    events: Mapping[str, CalendarEvent],
    title: Optional[str] = None,
) -> str:
    """
    Render a CalendarView as plain text using Jinja2 templates.

    Args:
        calendar_view: The refresh result to draw
        events: Event lookup used for titles, usually the store snapshot
        title: Heading (defaults to the month name and year)

    Returns:
        The rendered month
    """
    template_dir = Path(__file__).parent / "templates"

    if not template_dir.exists():
        raise FileNotFoundError(
            f"Template directory not found: {template_dir}"
        )

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    template = env.get_template("month.txt.j2")

    return template.render(
        **build_render_context(calendar_view, events, title)
    )
