"""Little-endian wire encoding shared by all messages."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterable, TypeVar

from rtmsgs.timing import Duration, Time

_UINT32_MASK = 0xFFFFFFFF
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

M = TypeVar("M", bound="Message")


class DecodeError(ValueError):
    """Raised when a buffer is too short or malformed for the message read."""


def _struct(fmt: str) -> struct.Struct:
    return struct.Struct("<" + fmt.lstrip("<"))


class Reader:
    """Reads fields from a byte buffer, advancing ``offset`` as it goes."""

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self.data = bytes(data)
        self.offset = offset

    def _take(self, size: int) -> bytes:
        end = self.offset + size
        if size < 0 or end > len(self.data):
            raise DecodeError(
                f"need {size} bytes at offset {self.offset}, "
                f"buffer holds {len(self.data)}"
            )
        chunk = self.data[self.offset:end]
        self.offset = end
        return chunk

    def unpack(self, fmt: str) -> Any:
        """Read one struct format; a single value is returned bare."""
        layout = _struct(fmt)
        values = layout.unpack(self._take(layout.size))
        return values[0] if len(values) == 1 else values

    def read_string(self) -> str:
        """Read a length-prefixed string; it ends at the first NUL byte."""
        raw = self._take(self.unpack("I"))
        return raw.split(b"\0", 1)[0].decode(_ENCODING, _ERRORS)

    def read_array(self, fmt: str) -> list:
        """Read a count followed by that many values of one struct format."""
        count = self.unpack("I")
        return [self.unpack(fmt) for _ in range(count)]

    def read_string_array(self) -> list[str]:
        """Read a count followed by that many strings."""
        count = self.unpack("I")
        return [self.read_string() for _ in range(count)]

    def read_messages(self, cls: type[M]) -> list[M]:
        """Read a count followed by that many messages of ``cls``."""
        count = self.unpack("I")
        return [cls.decode(self) for _ in range(count)]

    def read_duration(self) -> Duration:
        """Read a signed duration."""
        return Duration(*self.unpack("ii"))

    def read_time(self) -> Time:
        """Read an unsigned time stamp."""
        return Time(*self.unpack("II"))


class Writer:
    """Collects encoded fields into a byte string."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def pack(self, fmt: str, *args: Any) -> None:
        """Append values in one struct format."""
        try:
            self._buffer += _struct(fmt).pack(*args)
        except struct.error as exc:
            raise ValueError(f"cannot pack {args!r} as {fmt!r}: {exc}") from exc

    def write_string(self, text: str) -> None:
        """Append a length-prefixed string, cut at its first NUL."""
        raw = text.encode(_ENCODING, _ERRORS).split(b"\0", 1)[0]
        self.pack("I", len(raw))
        self._buffer += raw

    def write_array(self, fmt: str, values: Iterable[Any]) -> None:
        """Append a count followed by the values in one struct format."""
        items = list(values)
        self.pack("I", len(items))
        for item in items:
            self.pack(fmt, item)

    def write_string_array(self, values: Iterable[str]) -> None:
        """Append a count followed by the strings."""
        items = list(values)
        self.pack("I", len(items))
        for item in items:
            self.write_string(item)

    def write_messages(self, messages: Iterable[Message]) -> None:
        """Append a count followed by the encoded messages."""
        items = list(messages)
        self.pack("I", len(items))
        for item in items:
            item.encode(self)

    def write_duration(self, duration: Duration) -> None:
        """Append a signed duration as two 32-bit words."""
        self.pack("II", duration.sec & _UINT32_MASK, duration.nsec & _UINT32_MASK)

    def write_time(self, time: Time) -> None:
        """Append an unsigned time stamp."""
        self.pack("II", time.sec, time.nsec)

    def getvalue(self) -> bytes:
        """The bytes written so far."""
        return bytes(self._buffer)


class Message(ABC):
    """Base of every message: encodes to and decodes from the wire format."""

    TYPE: ClassVar[str] = ""
    MD5: ClassVar[str] = ""

    @abstractmethod
    def encode(self, writer: Writer) -> None:
        """Write this message's fields."""

    @classmethod
    @abstractmethod
    def decode(cls: type[M], reader: Reader) -> M:
        """Read a message of this type."""

    def serialize(self) -> bytes:
        """Encode this message to bytes."""
        writer = Writer()
        self.encode(writer)
        return writer.getvalue()

    @classmethod
    def deserialize(cls: type[M], data: bytes) -> M:
        """Decode a message of this type from the start of ``data``."""
        return cls.decode(Reader(data))