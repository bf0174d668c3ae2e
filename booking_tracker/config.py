from typing import Dict, List, Tuple

# -------------------------------------------------------------------------
# Environment Variables
# -------------------------------------------------------------------------
# Required Environment Variables
ENV_VARS = [
    "TRACKING_INPUT_PATH",
]

# Optional Environment Variables
OPTIONAL_ENV_VARS = [
    "TRACKING_CUSTOMER_CODE",
    "TRACKING_SORT_COLUMN",
    "TRACKING_SORT_DIRECTION",
    "TRACKING_EXPANDED_BOOKING",
]

# -------------------------------------------------------------------------
# Column Mappings (Source Header -> Target Key)
# -------------------------------------------------------------------------
# Raw records are keyed by the source headers of the tracking feed.
COLUMN_MAPPING: Dict[str, str] = {
    "Booking Number": "booking_number",
    "Container Number": "container_number",
    "PO Number": "po_number",
    "Status": "status",
    "POL": "pol",
    "POD": "pod",
    "ETD": "etd",
    "ETA": "eta",
    "Customer Code": "customer_code",
    "Delivery Address": "delivery_address",
    "Manually Updated": "manually_updated",
}

# Every canonical column except the optional manual-update marker
REQUIRED_COLUMNS: List[str] = [
    v for v in COLUMN_MAPPING.values() if v != "manually_updated"
]

# -------------------------------------------------------------------------
# Shipment statuses
# -------------------------------------------------------------------------
# Drives both the status ranking and the order of the status summary.
STATUS_PRIORITY: Tuple[str, ...] = (
    "Not ready to ship",
    "Ready to ship",
    "On board vessel",
    "Arrived at POD",
    "In transit",
    "Delivered",
)

DELIVERED_STATUS = "Delivered"

# -------------------------------------------------------------------------
# Ports
# -------------------------------------------------------------------------
PORT_TRANSLATIONS: Dict[str, str] = {
    "CNNBO": "Ningbo",
    "AUSYD": "Sydney",
    "AUBNE": "Brisbane",
    "AUMEL": "Melbourne",
    "CNSHK": "Shanghai",
    "CNSZN": "Shenzhen",
    "CNXAM": "Xiamen",
    "AUFRE": "Fremantle",
}

# -------------------------------------------------------------------------
# Sorting
# -------------------------------------------------------------------------
SORT_COLUMNS: Tuple[str, ...] = ("booking", "status", "origin", "destination")

COLUMN_LABELS: Dict[str, str] = {
    "booking": "Booking",
    "status": "Status",
    "origin": "Origin",
    "destination": "Destination",
}

SORT_DIRECTIONS: Tuple[str, ...] = ("asc", "desc")

DEFAULT_SORT_COLUMN = "destination"
DEFAULT_SORT_DIRECTION = "asc"

# -------------------------------------------------------------------------
# Dates
# -------------------------------------------------------------------------
# Four-digit years collapsed to two digits before parsing DD/MM/YY dates.
# Any other four-digit year is left as-is and fails to parse.
NORMALIZED_FOUR_DIGIT_YEARS: Tuple[str, ...] = ("2024", "2025")

DATE_SEPARATOR = "/"
