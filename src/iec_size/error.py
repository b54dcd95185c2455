import struct
from typing import Any, Protocol


class MagnitudeError(ValueError):
    def __init__(self, magnitude: int, *args: Any):
        super().__init__(magnitude, *args)
        self.magnitude = magnitude

    def __str__(self) -> str:
        return f"invalid magnitude `{self.magnitude}`"


class NegativeMagnitudeError(MagnitudeError):
    def __str__(self) -> str:
        return f"invalid negative magnitude `{self.magnitude}`"


class MagnitudeTooLargeError(MagnitudeError):
    def __init__(self, magnitude: int, limit: int):
        super().__init__(magnitude, limit)
        self.limit = limit

    def __str__(self) -> str:
        return f"magnitude too large `{self.magnitude}` (max `{self.limit}`)"


class Formatted(Protocol):
    format: str


def width_overflow_error(width: Formatted, value: int) -> struct.error:
    return struct.error(
        f"`{value}` does not fit integer width `{width.format}`"
    )
