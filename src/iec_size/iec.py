"""
Human readable binary (IEC) sizes.

An ``IEC`` value holds the fractional portion of a magnitude scaled by a
power of 1024, tagged with the unit it was scaled for::

    >>> str(IEC.from_integer(5000))
    '4.88KiB'

Please note: these are not SI prefixes; they are powers of 1024, not 1000.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from .bucket import select_bucket, SENTINEL_BUCKET
from .size import IEC_PREFIXES, IEC_SUFFIXES

logger = logging.getLogger(__name__)


class IECUnit(IntEnum):
    B = 0
    KiB = 1
    MiB = 2
    GiB = 3
    TiB = 4
    PiB = 5
    EiB = 6

    @property
    def divisor(self) -> int:
        return IEC_PREFIXES[self]

    @property
    def suffix(self) -> str:
        return IEC_SUFFIXES[self]


@dataclass(frozen=True, order=True, repr=False)
class IEC:
    # Field order matters; ordering compares the unit first, then the value
    unit: IECUnit
    value: float

    @classmethod
    def from_integer(cls, x: int) -> IEC:
        index = select_bucket(x)
        if index == SENTINEL_BUCKET:
            # Past the table; clamp to the largest unit
            logger.debug("Magnitude `%s` exceeds the IEC table; clamping to EiB", x)
            index = IECUnit.EiB
        unit = IECUnit(index)
        return cls(unit, float(x) / float(unit.divisor))

    @classmethod
    def B(cls, value: float) -> IEC:
        return cls(IECUnit.B, value)

    @classmethod
    def KiB(cls, value: float) -> IEC:
        return cls(IECUnit.KiB, value)

    @classmethod
    def MiB(cls, value: float) -> IEC:
        return cls(IECUnit.MiB, value)

    @classmethod
    def GiB(cls, value: float) -> IEC:
        return cls(IECUnit.GiB, value)

    @classmethod
    def TiB(cls, value: float) -> IEC:
        return cls(IECUnit.TiB, value)

    @classmethod
    def PiB(cls, value: float) -> IEC:
        return cls(IECUnit.PiB, value)

    @classmethod
    def EiB(cls, value: float) -> IEC:
        return cls(IECUnit.EiB, value)

    @property
    def suffix(self) -> str:
        return self.unit.suffix

    @property
    def divisor(self) -> int:
        return self.unit.divisor

    def raw_value(self) -> float:
        return self.value

    def to_display_string(self) -> str:
        return f"{self.value:.2f}{self.unit.suffix}"

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.unit.name}({self.value!r})"


def format_iec(x: int) -> str:
    return IEC.from_integer(x).to_display_string()
