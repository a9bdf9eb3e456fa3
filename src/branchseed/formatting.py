"""
Display formatting for generated branch data.

The dashboard renders dates as en-US short dates ("Jan 01, 2024") and
statistic deltas as "+7% this month". These helpers produce exactly those
strings without depending on the process locale.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Union

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DateLike = Union[date, datetime]


def change_label(change: int) -> str:
    """
    Render a month-over-month percentage change.

    Positive values get an explicit "+"; negative values already carry
    their sign; zero renders bare.

    >>> change_label(7)
    '+7% this month'
    >>> change_label(-3)
    '-3% this month'
    """
    sign = "+" if change > 0 else ""
    return f"{sign}{change}% this month"


def as_date(value: DateLike) -> date:
    """Drop the time component of a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_before(now: DateLike, days: int) -> date:
    """Calendar date `days` days before `now`."""
    return as_date(now) - timedelta(days=days)


def display_date(value: DateLike) -> str:
    """
    Format a date as the dashboard shows it.

    >>> display_date(date(2024, 1, 1))
    'Jan 01, 2024'
    """
    d = as_date(value)
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.day:02d}, {d.year}"


def format_naira(amount: float) -> str:
    """
    Format an amount as Naira for currency statistic cards.

    >>> format_naira(137551.69753086418)
    '₦137,551.70'
    """
    if amount < 0:
        return f"-₦{abs(amount):,.2f}"
    return f"₦{amount:,.2f}"


__all__ = [
    "MONTH_ABBREVIATIONS",
    "change_label",
    "as_date",
    "days_before",
    "display_date",
    "format_naira",
]
