# ==================================================
# salted_bloom/errors.py
# ==================================================

class BloomError(Exception):
    """Base class for everything the filter raises on purpose."""


class InvalidParameters(BloomError, ValueError):
    """Bad capacity / error rate / digest, or no feasible (m, k) pair."""


class CapacityExceeded(BloomError):
    """`add` on a filter that already holds `capacity` keys."""

    def __init__(self, capacity: int):
        super().__init__(f"filter is full ({capacity} keys)")
        self.capacity = capacity
