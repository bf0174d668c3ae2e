import json

import pandas as pd
import pytest

from booking_tracker.ingestor import ShipmentRecordReader


@pytest.fixture
def csv_export(tmp_path) -> str:
    path = tmp_path / "shipments.csv"
    path.write_text(
        "Booking Number,Container Number,PO Number,Status,POL,POD,ETD,ETA,Customer Code,Delivery  Address\n"
        "0012,C1,PO-7,Delivered,CNNBO,AUSYD,01/01/24,05/01/24,ACME,Dock 1\n"
        "0012,C2,PO-7,Delivered,CNNBO,AUSYD,01/01/24,05/01/24,ACME,\n",
        encoding="utf-8",
    )
    return str(path)


class TestShipmentRecordReader:
    """Unit tests for ShipmentRecordReader"""

    class TestCsv:
        """Tests for CSV exports"""

        def test_reads_and_renames_columns(self, csv_export) -> None:
            """Headers are whitespace-normalized and renamed to canonical names"""
            df = ShipmentRecordReader().read(csv_export)

            assert "delivery_address" in df.columns
            assert df["container_number"].tolist() == ["C1", "C2"]

        def test_keeps_ids_as_strings(self, csv_export) -> None:
            """Leading zeros survive and blanks stay empty strings"""
            df = ShipmentRecordReader().read(csv_export)

            assert df["booking_number"].tolist() == ["0012", "0012"]
            assert df["delivery_address"].tolist() == ["Dock 1", ""]

        def test_fills_missing_columns(self, csv_export, caplog) -> None:
            """Absent canonical columns are added as empty strings with a warning"""
            with caplog.at_level("WARNING", logger="booking_tracker"):
                df = ShipmentRecordReader().read(csv_export)

            assert "manually_updated" not in df.columns
            assert "Missing columns" not in caplog.text

            partial = pd.DataFrame([{"Booking Number": "B1"}])
            with caplog.at_level("WARNING", logger="booking_tracker"):
                out = ShipmentRecordReader().normalize_columns(partial)

            assert out["eta"].tolist() == [""]
            assert "Missing columns" in caplog.text

        def test_latin1_fallback(self, tmp_path) -> None:
            """Non UTF-8 files are retried as iso-8859-1"""
            path = tmp_path / "latin.csv"
            path.write_bytes("Booking Number,Delivery Address\nB1,Kärntner Straße\n".encode("iso-8859-1"))

            df = ShipmentRecordReader().read(str(path))

            assert df["delivery_address"].tolist() == ["Kärntner Straße"]

    class TestJson:
        """Tests for JSON exports"""

        def test_reads_record_array(self, tmp_path) -> None:
            """A JSON array of objects becomes one row per record"""
            path = tmp_path / "shipments.json"
            path.write_text(
                json.dumps(
                    [
                        {"Booking Number": "B1", "Container Number": "C1", "Status": "In transit"},
                        {"Booking Number": "B2", "Container Number": "C2", "Manually Updated": None},
                    ]
                ),
                encoding="utf-8",
            )

            df = ShipmentRecordReader().read(str(path))

            assert df["booking_number"].tolist() == ["B1", "B2"]
            assert df["status"].tolist() == ["In transit", ""]
            assert df["manually_updated"].tolist() == ["", ""]

        def test_non_list_payload_is_empty(self, tmp_path) -> None:
            """An object instead of an array yields no records"""
            path = tmp_path / "shipments.json"
            path.write_text(json.dumps({"error": "not found"}), encoding="utf-8")

            assert ShipmentRecordReader().read(str(path)).empty

        def test_invalid_json_raises(self, tmp_path) -> None:
            path = tmp_path / "broken.json"
            path.write_text("[{", encoding="utf-8")

            with pytest.raises(json.JSONDecodeError):
                ShipmentRecordReader().read(str(path))

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            ShipmentRecordReader().read(str(tmp_path / "nope.csv"))

    def test_unsupported_suffix_raises(self, tmp_path) -> None:
        path = tmp_path / "shipments.xlsx"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ValueError) as exc_info:
            ShipmentRecordReader().read(str(path))
        assert ".xlsx" in str(exc_info.value)
