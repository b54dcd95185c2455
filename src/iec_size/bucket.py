from operator import index

from .error import NegativeMagnitudeError, MagnitudeTooLargeError
from .size import IEC_PREFIXES

SENTINEL_BUCKET: int = len(IEC_PREFIXES)  # 7; past the end of the table
MAX_MAGNITUDE: int = 2 ** 64 - 1


def as_magnitude(value: int) -> int:
    """Validate ``value`` as an unsigned 64-bit magnitude and return it as a plain int.

    Raises TypeError for anything that isn't an integer (bools included),
    NegativeMagnitudeError for negatives and MagnitudeTooLargeError past 2**64 - 1.
    """
    if isinstance(value, bool):
        raise TypeError(f"expected an integer magnitude, got `{value!r}`")
    magnitude = index(value)
    if magnitude < 0:
        raise NegativeMagnitudeError(magnitude)
    if magnitude > MAX_MAGNITUDE:
        raise MagnitudeTooLargeError(magnitude, MAX_MAGNITUDE)
    return magnitude


def select_bucket(magnitude: int) -> int:
    """Find the power-of-1024 bucket ``magnitude`` falls into.

    Buckets are half-open, so exactly 1024 selects bucket 1. Returns
    SENTINEL_BUCKET for magnitudes at or above 1024 ** 6.
    """
    magnitude = as_magnitude(magnitude)
    # Scanning upward, the lower bound of each bucket already holds; 0 lands in bytes
    for item in range(len(IEC_PREFIXES) - 1):
        if magnitude < IEC_PREFIXES[item + 1]:
            return item
    return SENTINEL_BUCKET


def divisor_for_bucket(bucket: int) -> int:
    if bucket == SENTINEL_BUCKET:
        return IEC_PREFIXES[-1]
    if not 0 <= bucket < len(IEC_PREFIXES):
        raise IndexError(f"bucket `{bucket}` out of range [0, {SENTINEL_BUCKET}]")
    return IEC_PREFIXES[bucket]
