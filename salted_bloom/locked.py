# ==================================================
# salted_bloom/locked.py
# ==================================================
import threading

from .bloom import BloomFilter


class LockedBloomFilter:
    """
    BloomFilter guarded by one lock, for use across threads.
    `add` holds the lock across the capacity test, bit writes and counter
    bump; `check` holds it so it never sees half of a key's bits.
    """
    def __init__(self, capacity: int, *args, **kwargs):
        self._inner = BloomFilter(capacity, *args, **kwargs)
        self._lock  = threading.Lock()

    @property
    def inner(self) -> BloomFilter:
        return self._inner

    def add(self, key) -> None:
        with self._lock:
            self._inner.add(key)

    def check(self, key) -> bool:
        with self._lock:
            return self._inner.check(key)

    __contains__ = check

    def __len__(self) -> int:
        return self._inner.key_count

    # read-only accessors pass straight through
    capacity       = property(lambda self: self._inner.capacity)
    error_rate     = property(lambda self: self._inner.error_rate)
    key_count      = property(lambda self: self._inner.key_count)
    filter_length  = property(lambda self: self._inner.filter_length)
    num_hash_funcs = property(lambda self: self._inner.num_hash_funcs)
    salts          = property(lambda self: self._inner.salts)
