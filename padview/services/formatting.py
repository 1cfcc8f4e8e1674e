from __future__ import annotations

UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]


def format_bytes(size: int) -> str:
    if size <= 0:
        return "0 B"
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{int(value)} {UNITS[unit]}"
    return f"{value:.1f} {UNITS[unit]}"


def crop_line(line: str, first_column: int, columns: int) -> str:
    """Return the *columns*-wide window of *line* starting at *first_column*, space padded."""
    if columns <= 0:
        return ""
    window = line[first_column : first_column + columns] if first_column >= 0 else line[:columns]
    return window.ljust(columns)
