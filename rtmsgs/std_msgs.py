"""Standard scalar, string, header and duration messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from rtmsgs.timing import Duration, Time
from rtmsgs.wire import Message, Reader, Writer


@dataclass
class String(Message):
    """A single string."""

    TYPE = "std_msgs/String"
    MD5 = "992ce8a1687cec8c8bd883ec73ca41d1"

    data: str = ""

    def encode(self, writer: Writer) -> None:
        writer.write_string(self.data)

    @classmethod
    def decode(cls, reader: Reader) -> String:
        return cls(reader.read_string())


@dataclass
class UInt8(Message):
    """A single unsigned byte."""

    TYPE = "std_msgs/UInt8"
    MD5 = "7c8164229e7d2c17eb95e9231617fdee"

    data: int = 0

    def encode(self, writer: Writer) -> None:
        writer.pack("B", self.data)

    @classmethod
    def decode(cls, reader: Reader) -> UInt8:
        return cls(reader.unpack("B"))


@dataclass
class Float64(Message):
    """A single double-precision number."""

    TYPE = "std_msgs/Float64"
    MD5 = "fdb28210bfa9d7c91146260178d9a584"

    data: float = 0.0

    def encode(self, writer: Writer) -> None:
        writer.pack("d", self.data)

    @classmethod
    def decode(cls, reader: Reader) -> Float64:
        return cls(reader.unpack("d"))


@dataclass
class Header(Message):
    """Sequence number, time stamp and frame of a stamped message."""

    TYPE = "std_msgs/Header"
    MD5 = "2176decaecbce78abc3b96ef049fabed"

    seq: int = 0
    stamp: Time = field(default_factory=Time)
    frame_id: str = ""

    def encode(self, writer: Writer) -> None:
        writer.pack("I", self.seq)
        writer.write_time(self.stamp)
        writer.write_string(self.frame_id)

    @classmethod
    def decode(cls, reader: Reader) -> Header:
        seq = reader.unpack("I")
        stamp = reader.read_time()
        frame_id = reader.read_string()
        return cls(seq, stamp, frame_id)


@dataclass
class DurationMsg(Message):
    """A single signed duration."""

    TYPE = "std_msgs/Duration"
    MD5 = "3e286caf4241d664e55f3ad380e2ae46"

    data: Duration = field(default_factory=Duration)

    def encode(self, writer: Writer) -> None:
        writer.write_duration(self.data)

    @classmethod
    def decode(cls, reader: Reader) -> DurationMsg:
        return cls(reader.read_duration())