"""Parameter request service and the string test service."""

from __future__ import annotations

from dataclasses import dataclass, field

from rtmsgs.wire import Message, Reader, Writer

_REQUEST_PARAM = "rosserial_msgs/RequestParam"
_TEST = "rosserial_arduino/Test"


@dataclass
class RequestParamRequest(Message):
    """Asks for the value of a named parameter."""

    TYPE = _REQUEST_PARAM
    MD5 = "c1f3d28f1b044c871e6eff2e9fc3c667"

    name: str = ""

    def encode(self, writer: Writer) -> None:
        writer.write_string(self.name)

    @classmethod
    def decode(cls, reader: Reader) -> RequestParamRequest:
        return cls(reader.read_string())


@dataclass
class RequestParamResponse(Message):
    """A parameter value as lists of integers, floats and strings."""

    TYPE = _REQUEST_PARAM
    MD5 = "9f0e98bda65981986ddf53afa7a40e49"

    ints: list[int] = field(default_factory=list)
    floats: list[float] = field(default_factory=list)
    strings: list[str] = field(default_factory=list)

    def encode(self, writer: Writer) -> None:
        writer.write_array("i", self.ints)
        writer.write_array("f", self.floats)
        writer.write_string_array(self.strings)

    @classmethod
    def decode(cls, reader: Reader) -> RequestParamResponse:
        ints = reader.read_array("i")
        floats = reader.read_array("f")
        strings = reader.read_string_array()
        return cls(ints, floats, strings)


@dataclass
class TestRequest(Message):
    """Input string of the test service."""

    __test__ = False

    TYPE = _TEST
    MD5 = "39e92f1778057359c64c7b8a7d7b19de"

    input: str = ""

    def encode(self, writer: Writer) -> None:
        writer.write_string(self.input)

    @classmethod
    def decode(cls, reader: Reader) -> TestRequest:
        return cls(reader.read_string())


@dataclass
class TestResponse(Message):
    """Output string of the test service."""

    __test__ = False

    TYPE = _TEST
    MD5 = "0825d95fdfa2c8f4bbb4e9c74bccd3fd"

    output: str = ""

    def encode(self, writer: Writer) -> None:
        writer.write_string(self.output)

    @classmethod
    def decode(cls, reader: Reader) -> TestResponse:
        return cls(reader.read_string())