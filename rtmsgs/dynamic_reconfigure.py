"""Dynamic reconfiguration messages: integer parameters and parameter descriptions."""

from __future__ import annotations

from dataclasses import dataclass

from rtmsgs.wire import Message, Reader, Writer


@dataclass
class IntParameter(Message):
    """A named signed 32-bit parameter value."""

    TYPE = "dynamic_reconfigure/IntParameter"
    MD5 = "65fedc7a0cbfb8db035e46194a350bf1"

    name: str = ""
    value: int = 0

    def encode(self, writer: Writer) -> None:
        writer.write_string(self.name)
        writer.pack("i", self.value)

    @classmethod
    def decode(cls, reader: Reader) -> IntParameter:
        name = reader.read_string()
        return cls(name, reader.unpack("i"))


@dataclass
class ParamDescription(Message):
    """Describes one reconfigurable parameter."""

    TYPE = "dynamic_reconfigure/ParamDescription"
    MD5 = "7434fcb9348c13054e0c3b267c8cb34d"

    name: str = ""
    type: str = ""
    level: int = 0
    description: str = ""
    edit_method: str = ""

    def encode(self, writer: Writer) -> None:
        writer.write_string(self.name)
        writer.write_string(self.type)
        writer.pack("I", self.level)
        writer.write_string(self.description)
        writer.write_string(self.edit_method)

    @classmethod
    def decode(cls, reader: Reader) -> ParamDescription:
        name = reader.read_string()
        param_type = reader.read_string()
        level = reader.unpack("I")
        description = reader.read_string()
        edit_method = reader.read_string()
        return cls(name, param_type, level, description, edit_method)