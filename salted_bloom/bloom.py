# ==================================================
# salted_bloom/bloom.py
# ==================================================
import logging

from .cells  import get_cells
from .const  import BLANK_VECTOR, DEFAULT_DIGEST, DEFAULT_ERROR_RATE
from .digest import get_digest
from .errors import CapacityExceeded, InvalidParameters
from .salts  import create_salts
from .sizing import calculate_filter_parameters, is_positive_int

logger = logging.getLogger(__name__)


class BloomFilter:
    """
    Insert-only Bloom filter sized for `capacity` keys at `error_rate`.

    m and k come from `calculate_filter_parameters`, one random salt per hash
    function from `create_salts`.  Bits are packed eight to a byte and are
    only ever set, so a key that was added always checks True.
    """
    def __init__(self, capacity: int, error_rate=DEFAULT_ERROR_RATE,
                 rng=None, digest: str = DEFAULT_DIGEST):
        if not is_positive_int(capacity):
            raise InvalidParameters(f"capacity must be a positive int, got {capacity!r}")
        self._hash = get_digest(digest)
        capacity = int(capacity)
        m, k = calculate_filter_parameters(capacity, error_rate)

        self._capacity     = capacity
        self._error_rate   = error_rate
        self._digest_name  = digest
        self._m            = m
        self._k            = k
        self._blank_vector = BLANK_VECTOR
        self._salts        = create_salts(k, rng)
        self._bits         = bytearray((m + 7) // 8)
        self._key_count    = 0
        logger.debug("bloom filter n=%d p=%r → m=%d bits, k=%d (%s)",
                     capacity, error_rate, m, k, digest)

    # -- read-only state ---------------------------------------------------
    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def error_rate(self):
        return self._error_rate

    @property
    def key_count(self) -> int:
        return self._key_count

    @property
    def filter_length(self) -> int:
        return self._m

    @property
    def num_hash_funcs(self) -> int:
        return self._k

    @property
    def salts(self) -> tuple[float, ...]:
        return self._salts

    @property
    def blank_vector(self) -> int:
        return self._blank_vector

    @property
    def digest_name(self) -> str:
        return self._digest_name

    @property
    def is_full(self) -> bool:
        return self._key_count >= self._capacity

    # -- hashing helpers ---------------------------------------------------
    def cells(self, key) -> list[int]:
        return get_cells(key, self._m, self._blank_vector, self._salts, self._hash)

    def _is_set(self, bit: int) -> bool:
        return bool(self._bits[bit // 8] & (1 << (bit & 7)))

    # ----------------------------------------------------------------------
    def add(self, key) -> None:
        """Set the key's bits; CapacityExceeded once `capacity` keys are in."""
        if self.is_full:
            logger.debug("rejecting add: filter full at %d keys", self._capacity)
            raise CapacityExceeded(self._capacity)
        positions = self.cells(key)       # may raise TypeError; nothing touched yet
        for bit in positions:
            self._bits[bit // 8] |= 1 << (bit & 7)
        self._key_count += 1

    def check(self, key) -> bool:
        """False → never added.  True → probably added."""
        return all(self._is_set(bit) for bit in self.cells(key))

    __contains__ = check

    def __len__(self) -> int:
        return self._key_count

    # -- diagnostics -------------------------------------------------------
    def bits_set(self) -> int:
        return int.from_bytes(self._bits, "little").bit_count()

    def fill_ratio(self) -> float:
        return self.bits_set() / self._m

    def estimated_error_rate(self) -> float:
        """False-positive probability implied by the bits set right now."""
        return self.fill_ratio() ** self._k

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(capacity={self._capacity}, "
                f"error_rate={self._error_rate!r}, key_count={self._key_count}, "
                f"filter_length={self._m}, num_hash_funcs={self._k})")
