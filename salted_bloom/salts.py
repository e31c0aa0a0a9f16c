# ==================================================
# salted_bloom/salts.py
# ==================================================
from numbers import Integral

import numpy as np

from .errors import InvalidParameters
from .sizing import is_positive_int


def _source(rng):
    # None / int seed → numpy Generator; anything with .random() is used as-is
    if rng is None or (isinstance(rng, Integral) and not isinstance(rng, bool)):
        return np.random.default_rng(rng)
    if not callable(getattr(rng, "random", None)):
        raise InvalidParameters(f"rng must be None, an int seed or have .random(), got {rng!r}")
    return rng


def create_salts(count: int, rng=None) -> tuple[float, ...]:
    """`count` distinct uniform floats in [0, 1), in the order they were drawn."""
    if not is_positive_int(count):
        raise InvalidParameters(f"salt count must be a positive int, got {count!r}")
    src = _source(rng)

    seen: set[float] = set()
    salts: list[float] = []
    while len(salts) < count:
        s = float(src.random())
        if s in seen:          # collision → draw again
            continue
        seen.add(s)
        salts.append(s)
    return tuple(salts)
