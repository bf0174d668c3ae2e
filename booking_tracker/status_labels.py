def format_status(status: str, containers: int) -> str:
    """e.g. format_status("Delivered", 3) -> "3 containers delivered"."""
    plural = "s" if containers > 1 else ""
    return f"{containers} container{plural} {status.lower()}"
