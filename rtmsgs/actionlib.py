"""Action library test messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from rtmsgs.timing import Duration
from rtmsgs.wire import Message, Reader, Writer


@dataclass
class TestRequestGoal(Message):
    """Goal of the test request action: how and when the server should finish."""

    __test__ = False

    TYPE = "actionlib/TestRequestGoal"
    MD5 = "db5d00ba98302d6c6dd3737e9a03ceea"

    TERMINATE_SUCCESS = 0
    TERMINATE_ABORTED = 1
    TERMINATE_REJECTED = 2
    TERMINATE_LOSE = 3
    TERMINATE_DROP = 4
    TERMINATE_EXCEPTION = 5

    terminate_status: int = 0
    ignore_cancel: bool = False
    result_text: str = ""
    the_result: int = 0
    is_simple_client: bool = False
    delay_accept: Duration = field(default_factory=Duration)
    delay_terminate: Duration = field(default_factory=Duration)
    pause_status: Duration = field(default_factory=Duration)

    def encode(self, writer: Writer) -> None:
        writer.pack("i", self.terminate_status)
        writer.pack("B", 1 if self.ignore_cancel else 0)
        writer.write_string(self.result_text)
        writer.pack("i", self.the_result)
        writer.pack("B", 1 if self.is_simple_client else 0)
        writer.write_duration(self.delay_accept)
        writer.write_duration(self.delay_terminate)
        writer.write_duration(self.pause_status)

    @classmethod
    def decode(cls, reader: Reader) -> TestRequestGoal:
        terminate_status = reader.unpack("i")
        ignore_cancel = reader.unpack("B") != 0
        result_text = reader.read_string()
        the_result = reader.unpack("i")
        is_simple_client = reader.unpack("B") != 0
        delay_accept = reader.read_duration()
        delay_terminate = reader.read_duration()
        pause_status = reader.read_duration()
        return cls(
            terminate_status,
            ignore_cancel,
            result_text,
            the_result,
            is_simple_client,
            delay_accept,
            delay_terminate,
            pause_status,
        )