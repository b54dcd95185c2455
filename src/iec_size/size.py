from typing import Tuple

_iB: int = 1024

# Binary (IEC) prefixes only; ZiB and YiB are here for completeness,
#   the formatting table stops at EiB since a 64-bit magnitude never reaches ZiB

B: int = 1
KiB: int = _iB
MiB: int = _iB ** 2
GiB: int = _iB ** 3
TiB: int = _iB ** 4
PiB: int = _iB ** 5
EiB: int = _iB ** 6
ZiB: int = _iB ** 7
YiB: int = _iB ** 8

IEC_PREFIXES: Tuple[int, ...] = (B, KiB, MiB, GiB, TiB, PiB, EiB)
IEC_SUFFIXES: Tuple[str, ...] = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
