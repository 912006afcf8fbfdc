"""Overflow-checked vertex and edge counts for fixed-width index types.

Every derived count (n1 + n2, n * (n - 1) / 2, 2^k - 1, prod(dims)) is first
computed exactly with Python integers, which are wider than any numpy integer
type, and only then narrowed to the target width. A count that does not fit
raises SizeOverflow instead of wrapping.
"""

import logging
import math
from typing import Any

import numpy as np

log = logging.getLogger(__name__)

DEFAULT_INDEX_DTYPE = np.dtype(np.int64)
EDGE_COUNT_DTYPE = np.dtype(np.int64)  # edge counts are always held at 64 bits


class SizeOverflow(OverflowError):
    """Raised when a required count cannot be represented in the index width."""


def index_dtype(*params: Any, dtype: Any = None) -> np.dtype:
    """Resolve the integer width used for vertex indices.

    An explicit ``dtype`` wins. Otherwise the first numpy integer scalar
    among ``params`` carries its own width; plain Python ints fall back
    to int64.

    Args:
        *params: Generation parameters as passed by the caller.
        dtype: Optional explicit numpy integer dtype (or its name).

    Returns:
        A numpy integer dtype.

    Raises:
        TypeError: If the resolved dtype is not an integer type.
    """
    if dtype is not None:
        resolved = np.dtype(dtype)
    else:
        resolved = next(
            (np.dtype(type(p)) for p in params if isinstance(p, np.integer)),
            DEFAULT_INDEX_DTYPE,
        )
    if not np.issubdtype(resolved, np.integer):
        raise TypeError(f"Index dtype must be an integer type, got {resolved}")
    return resolved


def narrow(value: int, dtype: Any, what: str = "vertex count") -> int:
    """Check that an exact count fits ``dtype`` and return it as an int.

    Args:
        value: Exact count, computed in arbitrary precision.
        dtype: Target numpy integer dtype.
        what: Description of the count, used in the error message.

    Returns:
        ``value`` as a Python int.

    Raises:
        SizeOverflow: If ``value`` lies outside the range of ``dtype``.
    """
    info = np.iinfo(np.dtype(dtype))
    value = int(value)
    if value < info.min or value > info.max:
        log.warning(
            "%s %d exceeds the range of %s [%d, %d]",
            what, value, info.dtype.name, info.min, info.max,
        )
        raise SizeOverflow(
            f"{what} {value} cannot be represented in {info.dtype.name} "
            f"(max {info.max})"
        )
    return value


def checked_sum(*terms: Any, dtype: Any, what: str = "vertex count") -> int:
    """Exact sum of ``terms`` narrowed to ``dtype``."""
    return narrow(sum(int(t) for t in terms), dtype, what)


def checked_product(*factors: Any, dtype: Any, what: str = "vertex count") -> int:
    """Exact product of ``factors`` narrowed to ``dtype``."""
    return narrow(math.prod(int(f) for f in factors), dtype, what)


def checked_pow(
    base: Any, exponent: Any, dtype: Any, offset: int = 0, what: str = "vertex count"
) -> int:
    """Exact ``base ** exponent + offset`` narrowed to ``dtype``.

    Exponents beyond the bit width of ``dtype`` cannot fit for ``|base| >= 2``
    and are rejected without materializing the power.
    """
    base, exponent = int(base), int(exponent)
    info = np.iinfo(np.dtype(dtype))
    if abs(base) >= 2 and exponent > info.bits:
        log.warning(
            "%s %d^%d%+d exceeds the range of %s",
            what, base, exponent, offset, info.dtype.name,
        )
        raise SizeOverflow(
            f"{what} {base}^{exponent}{offset:+d} cannot be represented in "
            f"{info.dtype.name} (max {info.max})"
        )
    return narrow(base**exponent + offset, dtype, what)


def checked_edge_count(value: Any) -> int:
    """Narrow an exact edge count to the 64-bit edge-count width."""
    return narrow(value, EDGE_COUNT_DTYPE, "edge count")
