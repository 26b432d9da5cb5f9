import pytest

from rtmsgs.dynamic_reconfigure import IntParameter, ParamDescription
from rtmsgs.wire import DecodeError, Reader


def test_int_parameter_wire_bytes():
    data = IntParameter("ab", -1).serialize()
    assert data == b"\x02\x00\x00\x00ab\xff\xff\xff\xff"


@pytest.mark.parametrize("value", [0, 1, -1, 2**31 - 1, -(2**31)])
def test_int_parameter_round_trip(value):
    msg = IntParameter("gain", value)
    assert IntParameter.deserialize(msg.serialize()) == msg


def test_int_parameter_out_of_range():
    with pytest.raises(ValueError):
        IntParameter("x", 2**31).serialize()


def test_int_parameter_truncated():
    data = IntParameter("abc", 5).serialize()
    with pytest.raises(DecodeError):
        IntParameter.deserialize(data[:-1])


def test_int_parameter_defaults_round_trip():
    msg = IntParameter()
    assert IntParameter.deserialize(msg.serialize()) == IntParameter("", 0)


def test_param_description_round_trip():
    msg = ParamDescription("rate", "int", 7, "update rate", "")
    assert ParamDescription.deserialize(msg.serialize()) == msg


def test_param_description_length_and_offset():
    msg = ParamDescription("a", "bb", 3, "ccc", "dddd")
    data = msg.serialize()
    assert len(data) == 4 * 4 + 4 + len("a" + "bb" + "ccc" + "dddd")
    reader = Reader(data + b"\x99")
    assert ParamDescription.decode(reader) == msg
    assert reader.offset == len(data)


def test_param_description_level_unsigned():
    msg = ParamDescription(level=2**32 - 1)
    assert ParamDescription.deserialize(msg.serialize()).level == 2**32 - 1
    with pytest.raises(ValueError):
        ParamDescription(level=-1).serialize()


def test_param_description_truncated():
    data = ParamDescription("n", "t", 1, "d", "e").serialize()
    with pytest.raises(DecodeError):
        ParamDescription.deserialize(data[:10])