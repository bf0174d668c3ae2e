from typing import Optional

from .config import PORT_TRANSLATIONS


def resolve_port_name(code: Optional[str]) -> str:
    """Display name for a UN/LOCODE port code; unknown codes come back verbatim."""
    if code is None:
        return ""
    return PORT_TRANSLATIONS.get(code, code)
