from table_errors import InvalidIndexError, InvalidRangeError


def in_bounds(index: int, count: int) -> bool:
    return 1 <= index <= count


def validate_index(index: int, count: int, message: str) -> int:
    """Map a 1-based index onto 0-based storage, raising when out of range."""
    if not in_bounds(index, count):
        raise InvalidIndexError(message)
    return index - 1


def validate_range(start: int, end: int, total_rows: int) -> tuple[int, int]:
    """Return the 0-based half-open slice covering rows start..end inclusive."""
    if not in_bounds(start, total_rows) or not in_bounds(end, total_rows) or start > end:
        raise InvalidRangeError("Invalid pagination parameters")
    return start - 1, end
