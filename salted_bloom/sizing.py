# ==================================================
# salted_bloom/sizing.py
# ==================================================
import logging
from math import floor, isfinite, log
from numbers import Integral

from .const  import MAX_HASH_FUNCS
from .errors import InvalidParameters

logger = logging.getLogger(__name__)


def is_positive_int(value) -> bool:
    # numpy integers count, bools don't
    return isinstance(value, Integral) and not isinstance(value, bool) and value > 0


def _check_inputs(num_keys, error_rate) -> float:
    if not is_positive_int(num_keys):
        raise InvalidParameters(f"num_keys must be a positive int, got {num_keys!r}")
    try:
        p = float(error_rate)
    except (TypeError, ValueError):
        raise InvalidParameters(f"error_rate must be a number, got {error_rate!r}") from None
    if not 0.0 < p < 1.0:
        raise InvalidParameters(f"error_rate must be in (0, 1), got {error_rate!r}")
    return p


def _bits_for(k: int, num_keys: int, p: float) -> float | None:
    """m(k), or None when the float math breaks down for this k."""
    try:
        m = (-k * num_keys) / log(1.0 - p ** (1.0 / k))
    except (ValueError, ZeroDivisionError):
        # p^(1/k) rounded to 0.0 or 1.0
        logger.debug("k=%d infeasible for p=%r", k, p)
        return None
    if not isfinite(m) or m <= 0:
        logger.debug("k=%d gives unusable m=%r", k, m)
        return None
    return m


def calculate_filter_parameters(num_keys: int, error_rate) -> tuple[int, int]:
    """
    Smallest bit length m and its hash count k for `num_keys` at `error_rate`.

    Scans k = 1..MAX_HASH_FUNCS with m(k) = -k·n / ln(1 - p^(1/k)) and keeps
    the minimum; returns (floor(min_m) + 1, argmin_k).  If the minimum sits
    on the bound and m(MAX_HASH_FUNCS + 1) is smaller still, the optimum is
    out of reach and InvalidParameters is raised rather than a worse filter.
    """
    p = _check_inputs(num_keys, error_rate)
    num_keys = int(num_keys)

    best_m: float | None = None
    best_k = 0
    for k in range(1, MAX_HASH_FUNCS + 1):
        m = _bits_for(k, num_keys, p)
        if m is not None and (best_m is None or m < best_m):
            best_m, best_k = m, k

    if best_m is None:
        raise InvalidParameters(f"no feasible filter size for error_rate={error_rate!r}")
    if best_k == MAX_HASH_FUNCS:
        beyond = _bits_for(MAX_HASH_FUNCS + 1, num_keys, p)
        if beyond is not None and beyond < best_m:
            raise InvalidParameters(
                f"error_rate={error_rate!r} needs more than {MAX_HASH_FUNCS} hash functions")
    return floor(best_m) + 1, best_k
