"""
aggregator.py

Groups per-container shipment records into booking-level views.

Responsibilities:
1. Normalize the incoming records into a DataFrame of canonical string columns.
2. Optional customer-code filter.
3. Booking summaries (first record's status / ports / dates, record count).
4. Booking detail index (distinct containers, PO number, delivery address),
   built from the unfiltered records.
"""

import logging
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from .config import COLUMN_MAPPING
from .models import (BookingDetail, BookingSummary, PortDate,
                     RawShipmentRecord)

logger = logging.getLogger("booking_tracker")

CANONICAL_COLUMNS: List[str] = list(COLUMN_MAPPING.values())


def records_to_frame(records: Any) -> pd.DataFrame:
    """
    Accepts a DataFrame or a list/tuple of mappings / RawShipmentRecord and
    returns a DataFrame with canonical columns. Anything else (None, a string,
    a dict) yields an empty frame.
    """
    if isinstance(records, pd.DataFrame):
        df = records.rename(columns=COLUMN_MAPPING)
    elif isinstance(records, (list, tuple)):
        # Per-row normalization, so source-header and canonical rows can be mixed
        rows = [
            asdict(r) if is_dataclass(r) else asdict(RawShipmentRecord.from_mapping(r))
            for r in records
        ]
        df = pd.DataFrame(rows, columns=CANONICAL_COLUMNS)
    else:
        return pd.DataFrame(columns=CANONICAL_COLUMNS)

    for c in CANONICAL_COLUMNS:
        if c not in df.columns:
            df[c] = ""
    df[CANONICAL_COLUMNS] = df[CANONICAL_COLUMNS].fillna("")
    return df.reset_index(drop=True)


class ShipmentAggregator:
    """
    Builds BookingSummary and BookingDetail views from raw shipment records.
    The input frame is never mutated.
    """

    def __init__(self, logger_: Optional[logging.Logger] = None) -> None:
        self.logger = logger_ or logger

    # -------------------------------------------------------------------------
    # Public entrypoint
    # -------------------------------------------------------------------------
    def aggregate(
        self, records: Any, customer_code: Optional[str] = None
    ) -> Tuple[List[BookingSummary], Dict[str, BookingDetail]]:
        df = records_to_frame(records)
        if df.empty:
            self.logger.info("No shipment records to aggregate.")
            return [], {}

        summaries = self.build_summaries(df, customer_code)
        details = self.build_details(df)
        self.logger.info(
            "Aggregated %d records into %d bookings (%d detail entries).",
            len(df),
            len(summaries),
            len(details),
        )
        return summaries, details

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------
    @staticmethod
    def filter_by_customer(df: pd.DataFrame, customer_code: Optional[str]) -> pd.DataFrame:
        # The record side is compared as-is; only the filter is uppercased.
        if not customer_code:
            return df
        return df[df["customer_code"] == customer_code.upper()]

    # -------------------------------------------------------------------------
    # Summaries
    # -------------------------------------------------------------------------
    def build_summaries(
        self, records: Any, customer_code: Optional[str] = None
    ) -> List[BookingSummary]:
        df = self.filter_by_customer(records_to_frame(records), customer_code)
        if df.empty:
            return []

        conflicts = self.find_status_conflicts(df)
        if conflicts:
            self.logger.warning(
                "Bookings with inconsistent statuses (first record wins): %s",
                conflicts,
            )

        grouped = df.groupby("booking_number", sort=False, dropna=False)
        counts = grouped.size()
        firsts = grouped.head(1)

        summaries: List[BookingSummary] = []
        for row in firsts.itertuples(index=False):
            summaries.append(
                BookingSummary(
                    booking=row.booking_number,
                    status=row.status,
                    containers=int(counts[row.booking_number]),
                    origin=PortDate(port=row.pol, date=row.etd),
                    destination=PortDate(port=row.pod, date=row.eta),
                )
            )
        return summaries

    @staticmethod
    def find_status_conflicts(records: Any) -> List[str]:
        """Booking numbers whose records disagree on status, in first-seen order."""
        df = records_to_frame(records)
        if df.empty:
            return []
        distinct = df.groupby("booking_number", sort=False)["status"].nunique(dropna=False)
        return [str(b) for b in distinct[distinct > 1].index]

    # -------------------------------------------------------------------------
    # Detail index
    # -------------------------------------------------------------------------
    def build_details(self, records: Any) -> Dict[str, BookingDetail]:
        df = records_to_frame(records)
        details: Dict[str, BookingDetail] = {}
        if df.empty:
            return details

        for booking, group in df.groupby("booking_number", sort=False, dropna=False):
            first = group.iloc[0]
            details[booking] = BookingDetail(
                containers=tuple(group["container_number"].drop_duplicates().tolist()),
                po_number=first["po_number"],
                delivery_address=first["delivery_address"],
            )
        return details
