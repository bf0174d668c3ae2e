import json
import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .config import COLUMN_MAPPING, REQUIRED_COLUMNS

logger = logging.getLogger("booking_tracker")


class ShipmentRecordReader:
    """Loads raw shipment records from a local CSV or JSON export."""

    def __init__(self, logger_: Optional[logging.Logger] = None) -> None:
        self.logger = logger_ or logger

    def read(self, path: Union[str, Path]) -> pd.DataFrame:
        path = Path(path)
        if not path.exists():
            self.logger.error(f"Input file not found: {path}")
            raise FileNotFoundError(f"Input file not found: {path}")

        suffix = path.suffix.lower()
        if suffix == ".csv":
            df = self.read_csv(path)
        elif suffix == ".json":
            df = self.read_json(path)
        else:
            raise ValueError(f"Unsupported input format '{suffix}'. Use .csv or .json")

        return self.normalize_columns(df)

    def read_csv(self, csv_path: Path) -> pd.DataFrame:
        """
        Reads CSV with strict string types to preserve IDs and formatting.
        """
        self.logger.info(f"Reading CSV file: {csv_path}")
        try:
            # dtype=str keeps leading zeros in booking / PO numbers
            df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, encoding="utf-8-sig")
            self.logger.info(f"CSV loaded. Shape: {df.shape}")
            return df
        except UnicodeDecodeError:
            self.logger.warning("UTF-8 strict decoding failed. Retrying with 'iso-8859-1'...")
            try:
                df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, encoding="iso-8859-1")
                self.logger.info(f"CSV loaded with fallback encoding. Shape: {df.shape}")
                return df
            except Exception:
                self.logger.error("Failed to read CSV with fallback encoding.", exc_info=True)
                raise
        except Exception:
            self.logger.error(f"Failed to read CSV file: {csv_path}", exc_info=True)
            raise

    def read_json(self, json_path: Path) -> pd.DataFrame:
        """
        Reads a JSON array of record objects, as returned by the tracking API.
        """
        self.logger.info(f"Reading JSON file: {json_path}")
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError:
            self.logger.error(f"Invalid JSON in {json_path}", exc_info=True)
            raise

        if not isinstance(payload, list):
            self.logger.warning("JSON payload is not a list of records; treating as empty.")
            payload = []

        df = pd.DataFrame(payload).fillna("").astype(str)
        self.logger.info(f"JSON loaded. Shape: {df.shape}")
        return df

    def normalize_columns(self, df: pd.DataFrame) -> pd.DataFrame:
        out = df.copy()
        out.columns = (
            pd.Index(out.columns)
            .astype(str)
            .str.replace(r"[\n\r\t]+", " ", regex=True)
            .str.replace(r"\s+", " ", regex=True)
            .str.strip()
        )
        out = out.rename(columns=COLUMN_MAPPING)

        missing = [c for c in REQUIRED_COLUMNS if c not in out.columns]
        if missing and not out.empty:
            self.logger.warning(f"Missing columns filled with empty values: {missing}")
        for c in missing:
            out[c] = ""
        return out
