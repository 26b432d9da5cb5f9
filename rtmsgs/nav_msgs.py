"""Navigation messages."""

from __future__ import annotations

from dataclasses import dataclass

from rtmsgs.wire import Message, Reader, Writer


@dataclass
class GetMapFeedback(Message):
    """Feedback of the map action; carries nothing."""

    TYPE = "nav_msgs/GetMapFeedback"
    MD5 = "d41d8cd98f00b204e9800998ecf8427e"

    def encode(self, writer: Writer) -> None:
        return None

    @classmethod
    def decode(cls, reader: Reader) -> GetMapFeedback:
        return cls()