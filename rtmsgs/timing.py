"""Time stamps and signed durations kept as second and nanosecond fields."""

from __future__ import annotations

import math
from dataclasses import dataclass

NSEC_PER_SEC = 1_000_000_000
_UINT32_MASK = 0xFFFFFFFF


def normalize_sec_nsec_signed(sec: int, nsec: int) -> tuple[int, int]:
    """Carry whole seconds out of ``nsec`` so that ``0 <= nsec <= 1e9``.

    The upper bound is inclusive: exactly one second of nanoseconds is left
    as it is.
    """
    if nsec > NSEC_PER_SEC:
        carry = -((NSEC_PER_SEC - nsec) // NSEC_PER_SEC)
        return sec + carry, nsec - carry * NSEC_PER_SEC
    if nsec < 0:
        carry = -(nsec // NSEC_PER_SEC)
        return sec - carry, nsec + carry * NSEC_PER_SEC
    return sec, nsec


def round_half_away(r: float) -> float:
    """Round to the nearest whole number, halves away from zero."""
    if r > 0.0:
        return float(math.floor(r + 0.5))
    return float(math.ceil(r - 0.5))


@dataclass(frozen=True)
class Duration:
    """A signed span of time."""

    sec: int = 0
    nsec: int = 0

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            *normalize_sec_nsec_signed(self.sec + other.sec, self.nsec + other.nsec)
        )

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            *normalize_sec_nsec_signed(self.sec - other.sec, self.nsec - other.nsec)
        )

    def __mul__(self, scale: float) -> Duration:
        if isinstance(scale, bool) or not isinstance(scale, (int, float)):
            return NotImplemented
        # Each field is scaled on its own and truncated toward zero.
        return Duration(
            *normalize_sec_nsec_signed(int(self.sec * scale), int(self.nsec * scale))
        )

    __rmul__ = __mul__

    def to_sec(self) -> float:
        """The duration in seconds."""
        return float(self.sec) + 1e-9 * float(self.nsec)


@dataclass(frozen=True)
class Time:
    """An unsigned time stamp."""

    sec: int = 0
    nsec: int = 0

    def to_sec(self) -> float:
        """The time stamp in seconds."""
        return float(self.sec) + 1e-9 * float(self.nsec)

    @classmethod
    def from_sec(cls, t: float) -> Time:
        """Build a time stamp from seconds; ``t`` must fit an unsigned 32-bit field."""
        if not 0 <= t < 2**32:
            raise ValueError(f"time {t!r} out of range for an unsigned stamp")
        sec = math.floor(t)
        nsec = int(round_half_away((t - sec) * 1e9))
        return cls(sec, nsec & _UINT32_MASK)

    def to_nsec(self) -> int:
        """Total nanoseconds, kept modulo 2**32."""
        return (self.sec * NSEC_PER_SEC + self.nsec) & _UINT32_MASK