"""
sorter.py

Display ordering of booking summaries.

Every column is turned into a numeric key and ordered with numpy's stable
lexsort, so ties always keep their incoming order and rows whose key is
missing (unparseable date) land at the end in either direction.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .config import (DEFAULT_SORT_COLUMN, DEFAULT_SORT_DIRECTION,
                     DELIVERED_STATUS, SORT_COLUMNS, SORT_DIRECTIONS)
from .dates import parse_shipment_date
from .models import BookingSummary
from .status_summary import status_rank

logger = logging.getLogger("booking_tracker")


@dataclass(frozen=True)
class SortSpec:
    column: str = DEFAULT_SORT_COLUMN
    direction: str = DEFAULT_SORT_DIRECTION

    def __post_init__(self) -> None:
        if self.column not in SORT_COLUMNS:
            raise ValueError(
                f"Unknown sort column: {self.column}. Use one of: {list(SORT_COLUMNS)}"
            )
        if self.direction not in SORT_DIRECTIONS:
            raise ValueError(
                f"Unknown sort direction: {self.direction}. Use one of: {list(SORT_DIRECTIONS)}"
            )

    @property
    def sign(self) -> int:
        return 1 if self.direction == "asc" else -1

    def toggle(self, column: str) -> "SortSpec":
        """Header click: same column flips direction, a new column starts ascending."""
        if column == self.column:
            return SortSpec(column, "desc" if self.direction == "asc" else "asc")
        return SortSpec(column, "asc")


def _date_keys(dates: Sequence[str]) -> np.ndarray:
    keys = []
    for d in dates:
        ts = parse_shipment_date(d)
        keys.append(np.nan if ts is None else float(ts.toordinal()))
    return np.asarray(keys, dtype=float)


def _booking_keys(bookings: Sequence[str]) -> np.ndarray:
    codes, _ = pd.factorize(pd.Series(list(bookings), dtype="object"), sort=True)
    keys = codes.astype(float)
    keys[codes < 0] = np.nan
    return keys


def _status_keys(statuses: Sequence[str]) -> np.ndarray:
    return np.asarray([status_rank(s) for s in statuses], dtype=float)


class ShipmentSorter:
    def __init__(self, logger_: Optional[logging.Logger] = None) -> None:
        self.logger = logger_ or logger

    def sort(
        self, summaries: Sequence[BookingSummary], spec: Optional[SortSpec] = None
    ) -> List[BookingSummary]:
        spec = spec or SortSpec()
        items = list(summaries)
        if not items:
            return []

        if spec.column == "destination" and spec.direction == "asc":
            order = self._destination_ascending_order(items)
        else:
            keys = self._column_keys(items, spec.column) * spec.sign
            order = np.lexsort((keys,))

        self.logger.debug(
            "Sorted %d bookings by %s %s", len(items), spec.column, spec.direction
        )
        return [items[i] for i in order]

    @staticmethod
    def _column_keys(items: Sequence[BookingSummary], column: str) -> np.ndarray:
        if column == "booking":
            return _booking_keys([s.booking for s in items])
        if column == "status":
            return _status_keys([s.status for s in items])
        if column == "origin":
            return _date_keys([s.origin.date for s in items])
        return _date_keys([s.destination.date for s in items])

    @staticmethod
    def _destination_ascending_order(items: Sequence[BookingSummary]) -> np.ndarray:
        """
        Upcoming arrivals first (soonest ETA first), then delivered bookings
        with the most recent ETA first.
        """
        delivered = np.asarray([s.status == DELIVERED_STATUS for s in items])
        eta = _date_keys([s.destination.date for s in items])
        within_tier = np.where(delivered, -eta, eta)
        # lexsort: last key is the primary one
        return np.lexsort((within_tier, delivered.astype(int)))


def sort_summaries(
    summaries: Sequence[BookingSummary],
    column: str = DEFAULT_SORT_COLUMN,
    direction: str = DEFAULT_SORT_DIRECTION,
) -> List[BookingSummary]:
    return ShipmentSorter().sort(summaries, SortSpec(column, direction))
