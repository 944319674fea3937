"""Human-readable rendering of byte counts and durations."""

BYTE_UNITS = ("B", "KB", "MB", "GB")


def format_bytes(num_bytes: float) -> str:
    """Format a byte count with 1024-based units and two decimals.

    The signed value is kept, so a shrinking counter renders as e.g. "-1.50 KB".
    Values past 1024 GB stay in GB.
    """
    size = abs(num_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(BYTE_UNITS) - 1:
        size /= 1024
        unit_index += 1
    sign = "-" if num_bytes < 0 else ""
    return f"{sign}{size:.2f} {BYTE_UNITS[unit_index]}"


def format_duration(duration_ms: float) -> str:
    return f"{duration_ms:.2f}ms"
