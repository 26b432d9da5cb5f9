"""Sensor messages: float channels, compressed images, joysticks, temperatures."""

from __future__ import annotations

from dataclasses import dataclass, field

from rtmsgs.geometry_msgs import _read_avr_float64, _write_avr_float64
from rtmsgs.std_msgs import Header
from rtmsgs.wire import Message, Reader, Writer


@dataclass
class ChannelFloat32(Message):
    """A named channel of single-precision values."""

    TYPE = "sensor_msgs/ChannelFloat32"
    MD5 = "3d40139cdd33dfedcb71ffeeeb42ae7f"

    name: str = ""
    values: list[float] = field(default_factory=list)

    def encode(self, writer: Writer) -> None:
        writer.write_string(self.name)
        writer.write_array("f", self.values)

    @classmethod
    def decode(cls, reader: Reader) -> ChannelFloat32:
        name = reader.read_string()
        return cls(name, reader.read_array("f"))


@dataclass
class CompressedImage(Message):
    """An image in a compressed format such as jpeg or png."""

    TYPE = "sensor_msgs/CompressedImage"
    MD5 = "8f7a12909da2c9d3332d540a0977563f"

    header: Header = field(default_factory=Header)
    format: str = ""
    data: bytes = b""

    def encode(self, writer: Writer) -> None:
        self.header.encode(writer)
        writer.write_string(self.format)
        payload = bytes(self.data)
        writer.pack("I", len(payload))
        writer.pack(f"{len(payload)}s", payload)

    @classmethod
    def decode(cls, reader: Reader) -> CompressedImage:
        header = Header.decode(reader)
        image_format = reader.read_string()
        count = reader.unpack("I")
        return cls(header, image_format, reader.unpack(f"{count}s"))


@dataclass
class Joy(Message):
    """Joystick axes and button states."""

    TYPE = "sensor_msgs/Joy"
    MD5 = "5a9ea5f83505693b71e785041e67a8bb"

    header: Header = field(default_factory=Header)
    axes: list[float] = field(default_factory=list)
    buttons: list[int] = field(default_factory=list)

    def encode(self, writer: Writer) -> None:
        self.header.encode(writer)
        writer.write_array("f", self.axes)
        writer.write_array("i", self.buttons)

    @classmethod
    def decode(cls, reader: Reader) -> Joy:
        header = Header.decode(reader)
        axes = reader.read_array("f")
        buttons = reader.read_array("i")
        return cls(header, axes, buttons)


@dataclass
class Temperature(Message):
    """A temperature reading with its variance."""

    TYPE = "sensor_msgs/Temperature"
    MD5 = "ff71b307acdbe7c871a5a6d7ed359100"

    header: Header = field(default_factory=Header)
    temperature: float = 0.0
    variance: float = 0.0

    def encode(self, writer: Writer) -> None:
        self.header.encode(writer)
        _write_avr_float64(writer, self.temperature)
        _write_avr_float64(writer, self.variance)

    @classmethod
    def decode(cls, reader: Reader) -> Temperature:
        header = Header.decode(reader)
        temperature = _read_avr_float64(reader)
        variance = _read_avr_float64(reader)
        return cls(header, temperature, variance)