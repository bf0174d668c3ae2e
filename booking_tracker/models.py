"""
models.py

Value types shared by the aggregation, sorting and formatting steps.
All of them are frozen: derived views are recomputed, never patched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from .config import COLUMN_MAPPING


def _text(v: Any) -> str:
    if v is None:
        return ""
    return str(v)


@dataclass(frozen=True)
class RawShipmentRecord:
    """One container leg as delivered by the tracking feed."""

    booking_number: str
    container_number: str
    po_number: str
    status: str
    pol: str
    pod: str
    etd: str
    eta: str
    customer_code: str
    delivery_address: str
    manually_updated: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawShipmentRecord":
        """
        Build a record from either source headers ("Booking Number") or
        canonical keys ("booking_number").
        """
        values = {}
        for source_key, canonical in COLUMN_MAPPING.items():
            if canonical in row:
                values[canonical] = row[canonical]
            else:
                values[canonical] = row.get(source_key)

        marker = values.pop("manually_updated")
        return cls(
            **{k: _text(v) for k, v in values.items()},
            manually_updated=None if marker in (None, "") else str(marker),
        )


@dataclass(frozen=True)
class PortDate:
    port: str
    date: str


@dataclass(frozen=True)
class BookingSummary:
    booking: str
    status: str
    containers: int
    origin: PortDate
    destination: PortDate


@dataclass(frozen=True)
class BookingDetail:
    containers: Tuple[str, ...] = field(default_factory=tuple)
    po_number: str = ""
    delivery_address: str = ""


@dataclass(frozen=True)
class DateLabel:
    """
    Structured date label for a departure or arrival.

    verb is None (and is_past is None) when the date could not be parsed.
    """

    verb: Optional[str]
    city: str
    day: str
    month: str
    year: str
    is_past: Optional[bool]
    raw: str = ""

    @property
    def is_valid(self) -> bool:
        return self.verb is not None

    @property
    def date_text(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

    def as_text(self) -> str:
        if not self.is_valid:
            return f"{self.city}: date unavailable ({self.raw})"
        return f"{self.verb} {self.city} on {self.date_text}"
