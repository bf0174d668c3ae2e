"""
results.py

Memoized, read-only view over one snapshot of shipment records.

A ShipmentResults instance owns a single input snapshot. Derived views are
cached per customer filter and per (customer filter, sort spec); feeding new
records means building a new instance via with_records().
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from .aggregator import ShipmentAggregator, records_to_frame
from .dates import format_date_display
from .models import BookingDetail, BookingSummary, DateLabel
from .sorter import ShipmentSorter, SortSpec
from .status_labels import format_status
from .status_summary import summarize_statuses

logger = logging.getLogger("booking_tracker")


def _cache_key(customer_code: Optional[str]) -> str:
    return customer_code.upper() if customer_code else ""


def toggle_expanded_row(current: Optional[str], booking: str) -> Optional[str]:
    """Row click: collapse when the row is already expanded, otherwise expand it."""
    return None if current == booking else booking


class ShipmentResults:
    def __init__(self, records: Any, logger_: Optional[logging.Logger] = None) -> None:
        self.logger = logger_ or logger
        self.frame: pd.DataFrame = records_to_frame(records)
        self.aggregator = ShipmentAggregator(self.logger)
        self.sorter = ShipmentSorter(self.logger)

        self._summaries: Dict[str, List[BookingSummary]] = {}
        self._sorted: Dict[Tuple[str, str, str], List[BookingSummary]] = {}
        self._counts: Dict[str, Dict[str, int]] = {}
        self._details: Optional[Dict[str, BookingDetail]] = None

    def with_records(self, records: Any) -> "ShipmentResults":
        return ShipmentResults(records, self.logger)

    @property
    def is_empty(self) -> bool:
        return self.frame.empty

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------
    def summaries(self, customer_code: Optional[str] = None) -> List[BookingSummary]:
        key = _cache_key(customer_code)
        if key not in self._summaries:
            self._summaries[key] = self.aggregator.build_summaries(self.frame, customer_code)
        return list(self._summaries[key])

    def details(self) -> Dict[str, BookingDetail]:
        # Built from every record, independent of the customer filter.
        if self._details is None:
            self._details = self.aggregator.build_details(self.frame)
        return dict(self._details)

    def status_counts(self, customer_code: Optional[str] = None) -> Dict[str, int]:
        key = _cache_key(customer_code)
        if key not in self._counts:
            self._counts[key] = summarize_statuses(self.summaries(customer_code))
        return dict(self._counts[key])

    def total_shipments(self, customer_code: Optional[str] = None) -> int:
        return len(self.summaries(customer_code))

    def sorted_summaries(
        self, customer_code: Optional[str] = None, spec: Optional[SortSpec] = None
    ) -> List[BookingSummary]:
        spec = spec or SortSpec()
        key = (_cache_key(customer_code), spec.column, spec.direction)
        if key not in self._sorted:
            self._sorted[key] = self.sorter.sort(self.summaries(customer_code), spec)
        return list(self._sorted[key])

    def expanded_detail(self, booking: Optional[str]) -> Optional[BookingDetail]:
        if booking is None:
            return None
        return self.details().get(booking)

    # -------------------------------------------------------------------------
    # Row labels
    # -------------------------------------------------------------------------
    @staticmethod
    def row_labels(
        summary: BookingSummary, now: Optional[pd.Timestamp] = None
    ) -> Tuple[str, DateLabel, DateLabel]:
        """Status text plus departure and arrival labels for one table row."""
        return (
            format_status(summary.status, summary.containers),
            format_date_display(summary.origin.port, summary.origin.date, True, now=now),
            format_date_display(
                summary.destination.port, summary.destination.date, False, now=now
            ),
        )
