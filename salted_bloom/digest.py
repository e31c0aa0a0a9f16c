# ==================================================
# salted_bloom/digest.py
# ==================================================
from hashlib import blake2b, sha1, sha256
from numbers import Integral
from typing import Callable

import xxhash                                # pip install xxhash

from .errors import InvalidParameters

# name → bytes-in / bytes-out; every output is a whole number of uint32 words
DIGESTS: dict[str, Callable[[bytes], bytes]] = {
    "sha1":    lambda b: sha1(b).digest(),                    # 20 bytes
    "sha256":  lambda b: sha256(b).digest(),                  # 32 bytes
    "blake2b": lambda b: blake2b(b, digest_size=16).digest(), # 16 bytes
    "xxh128":  lambda b: xxhash.xxh128(b).digest(),           # 16 bytes, fastest
}


def get_digest(name: str) -> Callable[[bytes], bytes]:
    try:
        return DIGESTS[name]
    except KeyError:
        raise InvalidParameters(
            f"unknown digest {name!r}, expected one of {sorted(DIGESTS)}") from None


def key_to_bytes(key) -> bytes:
    """
    The one place a key becomes bytes.
    • bytes-like → as-is          • str → UTF-8
    • int → decimal text, any size
    • float → repr text           • obj.__bloom_key__() → bytes or str
    """
    if isinstance(key, bytes):
        return key
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, Integral) and not isinstance(key, bool):
        return _decimal(int(key)).encode("ascii")
    if isinstance(key, float):
        return str(key).encode("ascii")
    hook = getattr(key, "__bloom_key__", None)
    if callable(hook):
        return key_to_bytes(_plain(hook(), key))
    raise TypeError(f"cannot use {type(key).__name__} as a bloom key")


def _plain(value, owner):
    if not isinstance(value, (bytes, bytearray, memoryview, str)):
        raise TypeError(
            f"{type(owner).__name__}.__bloom_key__ must return bytes or str, "
            f"got {type(value).__name__}")
    return value


_CHUNK_DIGITS = 500      # below the lowest allowed limit (640)
_CHUNK        = 10 ** _CHUNK_DIGITS


def _decimal(n: int) -> str:
    """str(n) without the interpreter's int→str digit limit."""
    try:
        return str(n)
    except ValueError:          # > sys.get_int_max_str_digits() digits
        pass
    sign, n = ("-", -n) if n < 0 else ("", n)
    chunks = []
    while n:
        n, low = divmod(n, _CHUNK)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    return sign + "".join(reversed(chunks)).lstrip("0")
