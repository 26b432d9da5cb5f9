"""Log record messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from rtmsgs.std_msgs import Header
from rtmsgs.wire import Message, Reader, Writer


@dataclass
class Log(Message):
    """A log record with its origin and the topics it concerns."""

    TYPE = "rosgraph_msgs/Log"
    MD5 = "acffd30cd6b6de30f120938c17c593fb"

    DEBUG = 1
    INFO = 2
    WARN = 4
    ERROR = 8
    FATAL = 16

    header: Header = field(default_factory=Header)
    level: int = 0
    name: str = ""
    msg: str = ""
    file: str = ""
    function: str = ""
    line: int = 0
    topics: list[str] = field(default_factory=list)

    def encode(self, writer: Writer) -> None:
        self.header.encode(writer)
        writer.pack("b", self.level)
        writer.write_string(self.name)
        writer.write_string(self.msg)
        writer.write_string(self.file)
        writer.write_string(self.function)
        writer.pack("I", self.line)
        writer.write_string_array(self.topics)

    @classmethod
    def decode(cls, reader: Reader) -> Log:
        header = Header.decode(reader)
        level = reader.unpack("b")
        name = reader.read_string()
        msg = reader.read_string()
        file = reader.read_string()
        function = reader.read_string()
        line = reader.unpack("I")
        topics = reader.read_string_array()
        return cls(header, level, name, msg, file, function, line, topics)