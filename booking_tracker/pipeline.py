import logging
import os
import sys
import time
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .config import (COLUMN_LABELS, DEFAULT_SORT_COLUMN,
                     DEFAULT_SORT_DIRECTION, ENV_VARS, OPTIONAL_ENV_VARS)
from .ingestor import ShipmentRecordReader
from .results import ShipmentResults
from .sorter import SortSpec
from .status_summary import iter_status_buckets


LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
FILE_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(module)s.%(funcName)s: %(message)s"
LOG_FILE_NAME = "booking_tracker.log"


def setup_logging(log_dir: str = "logs", level: int = logging.INFO) -> logging.Logger:
    """
    Attach console and file handlers to the package logger.
    Repeated calls are no-ops once handlers exist.
    """
    logger = logging.getLogger("booking_tracker")
    logger.setLevel(level)
    if logger.handlers:
        return logger

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT, LOG_DATE_FORMAT))
    logger.addHandler(console)

    try:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path / LOG_FILE_NAME, encoding="utf-8")
    except OSError as e:
        logger.warning(f"File logging disabled, cannot write to {log_dir}: {e}")
        return logger

    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, LOG_DATE_FORMAT))
    logger.addHandler(file_handler)
    return logger


logger = logging.getLogger("booking_tracker")


class BookingTrackingPipeline:
    def __init__(self):
        self.config = {}

    def load_configuration(self):
        logger.info("Loading configuration...")
        load_dotenv(find_dotenv(), override=True)

        missing = []
        for var in ENV_VARS:
            val = os.getenv(var)
            if not val:
                missing.append(var)
            self.config[var] = val

        if missing:
            logger.error(f"Missing required environment variables: {missing}")
            raise EnvironmentError(f"Missing required ENV variables: {missing}")

        for var in OPTIONAL_ENV_VARS:
            self.config[var] = os.getenv(var) or None

        logger.info("Configuration loaded successfully.")

    def sort_spec(self) -> SortSpec:
        return SortSpec(
            column=(self.config.get("TRACKING_SORT_COLUMN") or DEFAULT_SORT_COLUMN).lower(),
            direction=(self.config.get("TRACKING_SORT_DIRECTION") or DEFAULT_SORT_DIRECTION).lower(),
        )

    def build_report(self, results: ShipmentResults, customer_code: Optional[str], spec: SortSpec) -> List[str]:
        """Plain-text lines for the sorted booking table."""
        lines = [f"{results.total_shipments(customer_code)} Total Shipments"]
        for status, count in iter_status_buckets(results.status_counts(customer_code)):
            lines.append(f"  {status}: {count}")

        lines.append(f"Sorted by {COLUMN_LABELS[spec.column]} ({spec.direction})")
        lines.append(" | ".join(COLUMN_LABELS.values()))

        expanded = self.config.get("TRACKING_EXPANDED_BOOKING")
        for summary in results.sorted_summaries(customer_code, spec):
            status_text, departure, arrival = results.row_labels(summary)
            lines.append(
                f"{summary.booking} | {status_text} | {departure.as_text()} | {arrival.as_text()}"
            )
            if summary.booking == expanded:
                detail = results.expanded_detail(expanded)
                if detail is not None:
                    lines.append(f"    Containers: {', '.join(detail.containers)}")
                    lines.append(f"    PO Number: {detail.po_number}")
                    lines.append(f"    Delivery Address: {detail.delivery_address}")
        return lines

    def run(self):
        try:
            total_start = time.time()
            logger.info("Starting Booking Tracking Pipeline...")
            self.load_configuration()
            spec = self.sort_spec()
            customer_code = self.config.get("TRACKING_CUSTOMER_CODE")

            # 1. Read
            t0 = time.time()
            reader = ShipmentRecordReader()
            df = reader.read(self.config["TRACKING_INPUT_PATH"])
            t1 = time.time()
            logger.info(f"Step 1: Records loaded in {t1 - t0:.2f} seconds.")

            # 2. Aggregate, count, sort
            results = ShipmentResults(df)
            if results.is_empty:
                logger.warning("No shipments found")
                return []

            lines = self.build_report(results, customer_code, spec)
            t2 = time.time()
            logger.info(f"Step 2: Bookings aggregated and sorted in {t2 - t1:.2f} seconds.")

            # 3. Report
            for line in lines:
                logger.info(line)

            logger.info(
                f"Pipeline executed successfully in {time.time() - total_start:.2f} seconds."
            )
            return lines

        except Exception:
            logger.error("Pipeline execution failed.", exc_info=True)
            sys.exit(1)


if __name__ == "__main__":
    setup_logging()
    pipeline = BookingTrackingPipeline()
    pipeline.run()
