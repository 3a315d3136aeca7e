"""Page size bounds applied to every paginated read."""

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 200


def clamp_limit(limit: int, upper: int = MAX_PAGE_SIZE) -> int:
    """Clamp a requested page size into [MIN_PAGE_SIZE, upper].

    Args:
        limit: Requested page size, any integer
        upper: Upper bound, never above MAX_PAGE_SIZE

    Returns:
        The clamped page size
    """
    upper = min(upper, MAX_PAGE_SIZE)
    return max(MIN_PAGE_SIZE, min(limit, upper))
