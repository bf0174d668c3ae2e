import pytest

from booking_tracker.config import PORT_TRANSLATIONS
from booking_tracker.models import RawShipmentRecord
from booking_tracker.ports import resolve_port_name
from booking_tracker.status_labels import format_status


class TestFormatStatus:
    """Unit tests for format_status"""

    def test_single_container(self) -> None:
        assert format_status("Delivered", 1) == "1 container delivered"

    def test_multiple_containers(self) -> None:
        assert format_status("Delivered", 3) == "3 containers delivered"

    def test_status_is_lowercased(self) -> None:
        assert format_status("Arrived at POD", 2) == "2 containers arrived at pod"


class TestResolvePortName:
    """Unit tests for resolve_port_name"""

    @pytest.mark.parametrize("code,name", sorted(PORT_TRANSLATIONS.items()))
    def test_known_codes(self, code, name) -> None:
        assert resolve_port_name(code) == name

    def test_unknown_code_is_returned_verbatim(self) -> None:
        assert resolve_port_name("SGSIN") == "SGSIN"

    def test_lookup_is_case_sensitive(self) -> None:
        assert resolve_port_name("cnnbo") == "cnnbo"


class TestRawShipmentRecord:
    """Unit tests for RawShipmentRecord.from_mapping"""

    def test_from_source_headers(self) -> None:
        record = RawShipmentRecord.from_mapping(
            {
                "Booking Number": "B1",
                "Container Number": "C1",
                "Status": "Delivered",
                "Manually Updated": "Yes",
            }
        )

        assert record.booking_number == "B1"
        assert record.container_number == "C1"
        assert record.pol == ""
        assert record.manually_updated == "Yes"

    def test_from_canonical_keys(self) -> None:
        record = RawShipmentRecord.from_mapping({"booking_number": "B2", "eta": "01/01/24"})

        assert record.booking_number == "B2"
        assert record.eta == "01/01/24"
        assert record.manually_updated is None
