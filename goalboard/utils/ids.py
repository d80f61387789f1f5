"""Identity helpers for newly created goals."""
import time
import uuid


def generate_goal_id() -> str:
    """
    Generate a random opaque goal id.

    Returns:
        32-character lowercase hex string

    Examples:
        >>> len(generate_goal_id())
        32
    """
    return uuid.uuid4().hex


def current_timestamp() -> int:
    """Current time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)
