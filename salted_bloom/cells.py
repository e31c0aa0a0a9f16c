# ==================================================
# salted_bloom/cells.py
# ==================================================
import struct
from typing import Callable, Sequence

from .const  import WORD_FMT
from .digest import DIGESTS, key_to_bytes


def _fold(digest: bytes, blank_vector: int) -> int:
    acc = blank_vector
    for (word,) in struct.iter_unpack(WORD_FMT, digest):
        acc ^= word
    return acc


def get_cells(key, filter_length: int, blank_vector: int,
              salts: Sequence[float],
              digest: Callable[[bytes], bytes] = DIGESTS["sha1"]) -> list[int]:
    """Bit positions of `key`, one per salt, in salt order (repeats allowed)."""
    raw = key_to_bytes(key)
    return [_fold(digest(raw + str(salt).encode("ascii")), blank_vector) % filter_length
            for salt in salts]
