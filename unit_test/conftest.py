from typing import Any, Dict, List

import pytest


def make_record(
    booking: str,
    container: str,
    status: str = "In transit",
    pol: str = "CNNBO",
    pod: str = "AUSYD",
    etd: str = "01/01/24",
    eta: str = "05/01/24",
    customer: str = "ACME",
    po: str = "PO-1",
    address: str = "1 George St, Sydney",
) -> Dict[str, Any]:
    """Raw record keyed by the tracking feed's source headers."""
    return {
        "Booking Number": booking,
        "Container Number": container,
        "PO Number": po,
        "Status": status,
        "POL": pol,
        "POD": pod,
        "ETD": etd,
        "ETA": eta,
        "Customer Code": customer,
        "Delivery Address": address,
    }


@pytest.fixture
def example_records() -> List[Dict[str, Any]]:
    """Two bookings: B1 delivered with two containers, B2 ready to ship."""
    return [
        make_record("B1", "C1", status="Delivered", eta="05/01/24"),
        make_record("B1", "C2", status="Delivered", eta="05/01/24"),
        make_record("B2", "C3", status="Ready to ship", pod="AUMEL", eta="20/12/25"),
    ]


@pytest.fixture
def mixed_customer_records() -> List[Dict[str, Any]]:
    """Records for two customers, with a repeated container on B10."""
    return [
        make_record("B10", "C1", customer="ACME", po="PO-10", address="Dock 1"),
        make_record("B20", "C5", customer="GLOBEX", status="Delivered"),
        make_record("B10", "C2", customer="ACME", po="PO-99", address="Dock 9"),
        make_record("B10", "C1", customer="ACME"),
        make_record("B30", "C7", customer="GLOBEX", status="On board vessel"),
    ]
