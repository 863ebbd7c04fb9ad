"""
Event layout for the month grid.

Places every visible event on the grid so that two events sharing a day
never share a stack offset. Longer events are placed first so they claim
the lowest offsets and shorter events fit around them.

The per-slot counters live only for the duration of one call; nothing is
kept between calls, so identical inputs always yield identical output.
"""

import logging
from typing import Dict, Iterable, List, NamedTuple

from . import timeutil
from .domain import CalendarEvent, EventPlacement, Interval

logger = logging.getLogger(__name__)


class _VisibleSpan(NamedTuple):
    event_id: str
    span: Interval
    slots: List[int]


def visible_span(event: CalendarEvent, view: Interval) -> Interval:
    """
    The part of an event drawn on the grid.

    The event is widened to whole days in the view's timezone, then
    clipped to the view.
    """
    view_tz = timeutil.instant(view.start).timezone
    local = Interval(
        start=timeutil.instant(event.start, tz=view_tz),
        end=timeutil.instant(event.end, tz=view_tz),
    )
    span = local.expand_to_days().intersection(view)
    if span is None:
        # Unreachable for events that passed the overlap filter.
        raise ValueError(f"Event '{event.event_id}' is not visible in view")
    return span


def _slot_indexes(span: Interval, view: Interval) -> List[int]:
    return [
        timeutil.days_between(view.start, day.start)
        for day in span.split_by_days()
    ]


def layout_events(
    view: Interval, events: Iterable[CalendarEvent]
) -> List[EventPlacement]:
    """
    Compute placements for ``events`` inside ``view``.

    ``events`` must iterate in store insertion order; the order breaks
    ties between spans of equal length, so an earlier event always gets
    the lower offset.

    Returns placements grouped per event, in placement order, each event's
    week segments in row order.
    """
    visible = [event for event in events if event.interval.overlaps(view)]
    if not visible:
        logger.debug("No visible events in view")
        return []

    spans = []
    for event in visible:
        span = visible_span(event, view)
        spans.append(
            _VisibleSpan(event.event_id, span, _slot_indexes(span, view))
        )

    # list.sort is stable: equal lengths keep insertion order.
    spans.sort(key=lambda s: s.span.length_in_days(), reverse=True)

    slot_count = timeutil.days_between(view.start, view.end)
    counters = [0] * slot_count
    weeks = list(view.split_by_weeks())

    placements: List[EventPlacement] = []
    for entry in spans:
        offset = 1 + max(counters[slot] for slot in entry.slots)
        for slot in entry.slots:
            counters[slot] = offset

        for week_index, week in enumerate(weeks):
            segment = entry.span.intersection(week)
            if segment is None:
                continue
            placements.append(
                EventPlacement(
                    event_id=entry.event_id,
                    week_index=week_index,
                    day_start=timeutil.days_between(week.start, segment.start),
                    day_end=timeutil.days_between(week.start, segment.end)
                    - 1,
                    stack_offset=offset,
                )
            )

    logger.debug(
        "Laid out events",
        extra={
            "visible_event_count": len(visible),
            "placement_count": len(placements),
            "max_stack_offset": max(counters),
        },
    )
    return placements


def stack_depth(placements: Iterable[EventPlacement]) -> Dict[int, int]:
    """Highest stack offset used in each week row that has placements."""
    depth: Dict[int, int] = {}
    for placement in placements:
        depth[placement.week_index] = max(
            depth.get(placement.week_index, 0), placement.stack_offset
        )
    return depth
