"""
Month grid calendar layout.

This package computes the visible days of a month view, classifies them
against today and the viewed month, and stacks events onto the grid
without overlap. Rendering is left to the caller.
"""

from .domain import (
    CalendarEvent,
    CalendarView,
    DayClassification,
    DaySlot,
    EventPlacement,
    GridConfiguration,
    Interval,
)
from .errors import (
    ConfigurationError,
    DuplicateIdError,
    InvalidIntervalError,
    MonthGridError,
    NotFoundError,
)
from .layout import layout_events, stack_depth
from .navigation import NavigationController
from .repositories import Clock, EventStore, GridConfigurationRepository
from .usecase import RefreshCalendarUseCase, refresh
from .view import (
    build_day_slots,
    classify_day,
    compute_view_window,
    day_slot_dates,
    month_fits,
)

__all__ = [
    # Value types and derived records
    "Interval",
    "CalendarEvent",
    "DayClassification",
    "DaySlot",
    "EventPlacement",
    "CalendarView",
    "GridConfiguration",
    # Errors
    "MonthGridError",
    "InvalidIntervalError",
    "DuplicateIdError",
    "NotFoundError",
    "ConfigurationError",
    # Repository protocols
    "EventStore",
    "Clock",
    "GridConfigurationRepository",
    # View window and classification
    "compute_view_window",
    "day_slot_dates",
    "month_fits",
    "classify_day",
    "build_day_slots",
    # Layout
    "layout_events",
    "stack_depth",
    # Use case and navigation
    "refresh",
    "RefreshCalendarUseCase",
    "NavigationController",
]
