import struct

import pytest

from rtmsgs.sensor_msgs import ChannelFloat32, CompressedImage, Joy, Temperature
from rtmsgs.std_msgs import Header
from rtmsgs.timing import Time
from rtmsgs.wire import DecodeError


def test_channel_wire_bytes():
    data = ChannelFloat32(name="ab", values=[1.0]).serialize()
    assert data == b"\x02\x00\x00\x00ab\x01\x00\x00\x00\x00\x00\x80\x3f"


def test_channel_round_trip():
    msg = ChannelFloat32("intensity", [0.5, -2.0, 3.25])
    assert ChannelFloat32.deserialize(msg.serialize()) == msg


def test_channel_values_lose_precision():
    decoded = ChannelFloat32.deserialize(ChannelFloat32("c", [0.1]).serialize())
    assert decoded.values == [struct.unpack("<f", struct.pack("<f", 0.1))[0]]


def test_channel_empty_round_trip():
    decoded = ChannelFloat32.deserialize(ChannelFloat32().serialize())
    assert decoded.name == ""
    assert decoded.values == []


def test_compressed_image_round_trip():
    msg = CompressedImage(Header(1, Time(5, 6), "cam"), "jpeg", b"\xff\xd8\x00\x10")
    assert CompressedImage.deserialize(msg.serialize()) == msg


def test_compressed_image_layout():
    header = Header(2, Time(0, 0), "c")
    data = CompressedImage(header, "png", b"xyz").serialize()
    tail = b"\x03\x00\x00\x00png\x03\x00\x00\x00xyz"
    assert data == header.serialize() + tail


def test_compressed_image_short_payload_raises():
    data = CompressedImage(format="png", data=b"abcdef").serialize()
    with pytest.raises(DecodeError):
        CompressedImage.deserialize(data[:-2])


def test_joy_round_trip():
    msg = Joy(Header(4, Time(9, 1), "joy"), [0.5, -1.0], [1, 0, -3])
    assert Joy.deserialize(msg.serialize()) == msg


def test_joy_buttons_are_signed():
    decoded = Joy.deserialize(Joy(buttons=[-1]).serialize())
    assert decoded.buttons == [-1]
    assert decoded.serialize().endswith(b"\xff\xff\xff\xff")


def test_temperature_round_trip():
    msg = Temperature(Header(8, Time(3, 4), "t"), 21.5, 0.25)
    assert Temperature.deserialize(msg.serialize()) == msg


def test_temperature_fields_are_doubles_on_wire():
    header = Header()
    data = Temperature(header, 20.0, 0.5).serialize()
    assert data[len(header.serialize()):] == struct.pack("<2d", 20.0, 0.5)


def test_temperature_truncated_raises():
    data = Temperature(temperature=1.0).serialize()
    with pytest.raises(DecodeError):
        Temperature.deserialize(data[:-1])