"""Transform lookup action messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from rtmsgs.timing import Duration, Time
from rtmsgs.wire import Message, Reader, Writer


@dataclass
class LookupTransformGoal(Message):
    """Asks for the transform between two frames at given times."""

    TYPE = "tf2_msgs/LookupTransformGoal"
    MD5 = "35e3720468131d675a18bb6f3e5f22f8"

    target_frame: str = ""
    source_frame: str = ""
    source_time: Time = field(default_factory=Time)
    timeout: Duration = field(default_factory=Duration)
    target_time: Time = field(default_factory=Time)
    fixed_frame: str = ""
    advanced: bool = False

    def encode(self, writer: Writer) -> None:
        writer.write_string(self.target_frame)
        writer.write_string(self.source_frame)
        writer.write_time(self.source_time)
        writer.write_duration(self.timeout)
        writer.write_time(self.target_time)
        writer.write_string(self.fixed_frame)
        writer.pack("B", 1 if self.advanced else 0)

    @classmethod
    def decode(cls, reader: Reader) -> LookupTransformGoal:
        target_frame = reader.read_string()
        source_frame = reader.read_string()
        source_time = reader.read_time()
        timeout = reader.read_duration()
        target_time = reader.read_time()
        fixed_frame = reader.read_string()
        advanced = reader.unpack("B") != 0
        return cls(
            target_frame,
            source_frame,
            source_time,
            timeout,
            target_time,
            fixed_frame,
            advanced,
        )