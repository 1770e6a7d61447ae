"""Human-readable byte sizes."""

_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB")


def human_file_size(size_bytes: int) -> str:
    """Format a byte count as a human-readable string.

    The value is divided by 1024 until it drops below 1024 or the
    largest unit is reached, then rounded to two decimals with
    trailing zeros dropped (e.g., "512 B", "1 KB", "12.34 MB").

    Args:
        size_bytes: Size in bytes.

    Returns:
        Formatted size string.
    """
    size = float(size_bytes)
    index = 0
    while size >= 1024 and index < len(_UNITS) - 1:
        size /= 1024
        index += 1

    number = f"{round(size, 2):.2f}".rstrip("0").rstrip(".")
    return f"{number} {_UNITS[index]}"
