import pytest

from rtmsgs.std_srvs import EmptyRequest, EmptyResponse, TriggerRequest, TriggerResponse
from rtmsgs.wire import DecodeError, Writer


@pytest.mark.parametrize("cls", [EmptyRequest, EmptyResponse, TriggerRequest])
def test_empty_payloads_encode_to_nothing(cls):
    assert cls().serialize() == b""


@pytest.mark.parametrize("cls", [EmptyRequest, EmptyResponse, TriggerRequest])
def test_empty_payloads_decode_from_nothing(cls):
    assert cls.deserialize(b"") == cls()


def test_trigger_response_round_trip():
    msg = TriggerResponse(True, "done")
    assert TriggerResponse.deserialize(msg.serialize()) == msg


def test_trigger_response_success_byte():
    assert TriggerResponse(True, "ok").serialize()[0] == 1
    assert TriggerResponse(False, "ok").serialize()[0] == 0


def test_trigger_response_nonzero_byte_is_success():
    writer = Writer()
    writer.pack("B", 2)
    writer.write_string("fine")
    assert TriggerResponse.deserialize(writer.getvalue()) == TriggerResponse(True, "fine")


def test_trigger_response_truncated():
    with pytest.raises(DecodeError):
        TriggerResponse.deserialize(b"\x01")