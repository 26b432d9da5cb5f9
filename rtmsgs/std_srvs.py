"""Standard services with empty or trigger payloads."""

from __future__ import annotations

from dataclasses import dataclass

from rtmsgs.wire import Message, Reader, Writer

_EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"


@dataclass
class EmptyRequest(Message):
    """Request of the empty service; carries nothing."""

    TYPE = "std_srvs/Empty"
    MD5 = _EMPTY_MD5

    def encode(self, writer: Writer) -> None:
        return None

    @classmethod
    def decode(cls, reader: Reader) -> EmptyRequest:
        return cls()


@dataclass
class EmptyResponse(Message):
    """Response of the empty service; carries nothing."""

    TYPE = "std_srvs/Empty"
    MD5 = _EMPTY_MD5

    def encode(self, writer: Writer) -> None:
        return None

    @classmethod
    def decode(cls, reader: Reader) -> EmptyResponse:
        return cls()


@dataclass
class TriggerRequest(Message):
    """Request of the trigger service; carries nothing."""

    TYPE = "std_srvs/Trigger"
    MD5 = _EMPTY_MD5

    def encode(self, writer: Writer) -> None:
        return None

    @classmethod
    def decode(cls, reader: Reader) -> TriggerRequest:
        return cls()


@dataclass
class TriggerResponse(Message):
    """Outcome of a trigger: success flag and a message."""

    TYPE = "std_srvs/Trigger"
    MD5 = "937c9679a518e3a18d831e57125ea522"

    success: bool = False
    message: str = ""

    def encode(self, writer: Writer) -> None:
        writer.pack("B", 1 if self.success else 0)
        writer.write_string(self.message)

    @classmethod
    def decode(cls, reader: Reader) -> TriggerResponse:
        success = reader.unpack("B") != 0
        return cls(success, reader.read_string())