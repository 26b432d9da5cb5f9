"""Geometry messages: points in space, optionally stamped."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

from rtmsgs.std_msgs import Header
from rtmsgs.wire import Message, Reader, Writer

_FLOAT32 = struct.Struct("<f")


def _to_float32(value: float) -> float:
    """Round ``value`` to single precision; values too large become infinite."""
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _write_avr_float64(writer: Writer, value: float) -> None:
    """Write a single-precision value as an eight-byte double."""
    writer.pack("d", _to_float32(float(value)))


def _read_avr_float64(reader: Reader) -> float:
    """Read an eight-byte double and keep it at single precision."""
    return _to_float32(reader.unpack("d"))


@dataclass
class Point(Message):
    """A position in free space."""

    TYPE = "geometry_msgs/Point"
    MD5 = "4a842b65f413084dc2b10fb484ea7f17"

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def encode(self, writer: Writer) -> None:
        for value in (self.x, self.y, self.z):
            _write_avr_float64(writer, value)

    @classmethod
    def decode(cls, reader: Reader) -> Point:
        x = _read_avr_float64(reader)
        y = _read_avr_float64(reader)
        z = _read_avr_float64(reader)
        return cls(x, y, z)


@dataclass
class PointStamped(Message):
    """A point with a reference frame and time stamp."""

    TYPE = "geometry_msgs/PointStamped"
    MD5 = "c63aecb41bfdfd6b7e1fac37c7cbe7bf"

    header: Header = field(default_factory=Header)
    point: Point = field(default_factory=Point)

    def encode(self, writer: Writer) -> None:
        self.header.encode(writer)
        self.point.encode(writer)

    @classmethod
    def decode(cls, reader: Reader) -> PointStamped:
        header = Header.decode(reader)
        point = Point.decode(reader)
        return cls(header, point)