"""
dates.py

Parsing and labelling of the feed's ETD / ETA strings.

The feed writes dates as DD/MM/YY, with the occasional DD/MM/YYYY for the
years listed in NORMALIZED_FOUR_DIGIT_YEARS. Two-digit years are anchored to
the 2000s.
"""

import logging
from typing import Any, List, Optional

import pandas as pd

from .config import DATE_SEPARATOR, NORMALIZED_FOUR_DIGIT_YEARS
from .models import DateLabel
from .ports import resolve_port_name

logger = logging.getLogger("booking_tracker")


def split_date_parts(text: Any) -> Optional[List[str]]:
    """
    Split a date string into [day, month, year] with the year normalized.
    Returns None when the text is not three '/'-separated digit groups.
    """
    if not isinstance(text, str) or not text.strip():
        return None

    parts = [p.strip() for p in text.strip().split(DATE_SEPARATOR)]
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return None

    day, month, year = parts
    if year in NORMALIZED_FOUR_DIGIT_YEARS:
        year = year[-2:]
    return [day, month, year]


def parse_shipment_date(text: Any) -> Optional[pd.Timestamp]:
    """
    Parse DD/MM/YY (or a normalized DD/MM/YYYY) into a midnight Timestamp.

    Unnormalized four-digit years end up as year "20" + YYYY, which is out of
    range, so they come back as None like any other malformed value.
    """
    parts = split_date_parts(text)
    if parts is None:
        return None

    day, month, year = parts
    try:
        return pd.Timestamp(year=int("20" + year), month=int(month), day=int(day))
    except (ValueError, OverflowError):
        return None


def _action(is_departure: bool, is_past: bool) -> str:
    if is_departure:
        return "Departed" if is_past else "Departing"
    return "Arrived" if is_past else "Arriving"


def format_date_display(
    port: str,
    date: str,
    is_departure: bool,
    now: Optional[pd.Timestamp] = None,
) -> DateLabel:
    """
    Build the tense-aware label for a departure (ETD) or arrival (ETA).

    A date at midnight today already counts as past, since it is compared
    against the current time rather than the current day.
    """
    city = resolve_port_name(port)
    raw = "" if date is None else str(date)
    parts = split_date_parts(raw)
    ship_date = parse_shipment_date(raw)

    if parts is None or ship_date is None:
        logger.warning("Unparseable date %r for port %s", raw, port)
        day, month, year = (parts or ["", "", ""])
        return DateLabel(
            verb=None,
            city=city,
            day=day,
            month=month,
            year=year,
            is_past=None,
            raw=raw,
        )

    current = now if now is not None else pd.Timestamp.now()
    is_past = bool(ship_date < current)
    day, month, year = parts
    return DateLabel(
        verb=_action(is_departure, is_past),
        city=city,
        day=day,
        month=month,
        year=year,
        is_past=is_past,
        raw=raw,
    )
