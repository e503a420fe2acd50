class InvalidParameterError(ValueError):
    """Raised when a cost, count or scheme cannot produce a meaningful witness size."""


def require_count(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidParameterError(f"{name} must be non-negative, got {value}")
    return value


def require_positive(name, value):
    require_count(name, value)
    if value == 0:
        raise InvalidParameterError(f"{name} must be positive, got 0")
    return value


def slot_byte_budget(bandwidth_mbps: int, block_time_seconds: int) -> int:
    """Maximum bytes transferable within one slot at the given bandwidth."""
    return (bandwidth_mbps * 1_000_000 * block_time_seconds) // 8


def format_bytes(num_bytes: int) -> str:
    """Format a byte count with decimal units (1 KB = 1000 bytes)."""
    if num_bytes >= 1_000_000:
        return f"{num_bytes / 1_000_000:.1f} MB"
    if num_bytes >= 1_000:
        return f"{num_bytes / 1_000:.1f} KB"
    return f"{num_bytes} bytes"
