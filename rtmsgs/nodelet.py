"""Nodelet loading service messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from rtmsgs.wire import Message, Reader, Writer

_SERVICE = "nodelet/NodeletLoad"


@dataclass
class NodeletLoadRequest(Message):
    """Asks a manager to load a nodelet with remappings and arguments."""

    TYPE = _SERVICE
    MD5 = "c6e28cc4d2e259249d96cfb50658fbec"

    name: str = ""
    type: str = ""
    remap_source_args: list[str] = field(default_factory=list)
    remap_target_args: list[str] = field(default_factory=list)
    my_argv: list[str] = field(default_factory=list)
    bond_id: str = ""

    def encode(self, writer: Writer) -> None:
        writer.write_string(self.name)
        writer.write_string(self.type)
        writer.write_string_array(self.remap_source_args)
        writer.write_string_array(self.remap_target_args)
        writer.write_string_array(self.my_argv)
        writer.write_string(self.bond_id)

    @classmethod
    def decode(cls, reader: Reader) -> NodeletLoadRequest:
        name = reader.read_string()
        nodelet_type = reader.read_string()
        remap_source_args = reader.read_string_array()
        remap_target_args = reader.read_string_array()
        my_argv = reader.read_string_array()
        bond_id = reader.read_string()
        return cls(
            name, nodelet_type, remap_source_args, remap_target_args, my_argv, bond_id
        )


@dataclass
class NodeletLoadResponse(Message):
    """Whether the nodelet was loaded."""

    TYPE = _SERVICE
    MD5 = "358e233cde0c8a8bcfea4ce193f8fc15"

    success: bool = False

    def encode(self, writer: Writer) -> None:
        writer.pack("B", 1 if self.success else 0)

    @classmethod
    def decode(cls, reader: Reader) -> NodeletLoadResponse:
        return cls(reader.unpack("B") != 0)