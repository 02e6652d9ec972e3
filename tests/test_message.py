import logging

import pytest

from oscsend import message
from oscsend.data import ArgumentType
from oscsend.errors import ArgumentEncodingError, ConstructionError
from oscsend.message import OSCMessage, assemble

from .utils import decode_float32, decode_int32

SCENARIO_VOLUME = bytes.fromhex("2F 76 6F 6C 75 6D 65 00" "2C 66 00 00" "3F 40 00 00")
SCENARIO_TEST = b"/test\x00\x00\x00" + b",ii\x00" + b"\x00\x00\x00\x01" + b"\x00\x00\x00\x02"


def test_float_message():
    datagram = assemble("/volume", [0.75])
    assert datagram == SCENARIO_VOLUME
    assert len(datagram) == 16


def test_int_message():
    datagram = assemble("/test", [1, 2])
    assert datagram == SCENARIO_TEST
    assert len(datagram) == 20
    assert decode_int32(datagram[12:16]) == 1
    assert decode_int32(datagram[16:20]) == 2


def test_mixed_message():
    datagram = assemble("/mix", ["abcd", -7, 1.5, ""])
    # address (8) + ",sifs" (8) + "abcd" (8) + int (4) + float (4) + "" (4)
    assert len(datagram) == 36
    assert datagram[:8] == b"/mix\x00\x00\x00\x00"
    assert datagram[8:16] == b",sifs\x00\x00\x00"
    assert datagram[16:24] == b"abcd\x00\x00\x00\x00"
    assert decode_int32(datagram[24:28]) == -7
    assert decode_float32(datagram[28:32]) == 1.5
    assert datagram[32:36] == b"\x00\x00\x00\x00"


def test_no_arguments():
    assert assemble("/ping", []) == b"/ping\x00\x00\x00,\x00\x00\x00"


def test_osc_message():
    msg = OSCMessage("/volume", [0.75])
    assert msg.type_tags == ",f"
    assert msg.arguments[0].type == ArgumentType.FLOAT32
    assert msg.encode() == SCENARIO_VOLUME

    # arguments are stored as a tuple, so the message is hashable and immutable
    assert isinstance(msg.arguments, tuple)
    assert OSCMessage("/volume", (0.75,)) == msg


@pytest.mark.parametrize("arguments", [[True], [1, None], [object()]])
def test_unsupported_arguments(arguments):
    with pytest.raises(ArgumentEncodingError):
        OSCMessage("/test", arguments)
    with pytest.raises(ArgumentEncodingError):
        assemble("/test", arguments)


def test_invalid_address():
    with pytest.raises(ArgumentEncodingError):
        OSCMessage("/vølume", [])
    with pytest.raises(ArgumentEncodingError):
        OSCMessage(None, [])
    # a string is not a list of arguments
    with pytest.raises(ArgumentEncodingError):
        OSCMessage("/test", "abc")


def test_address_without_slash(caplog):
    with caplog.at_level(logging.WARNING, logger="oscsend.message"):
        OSCMessage("volume", [1])
    assert "does not start with '/'" in caplog.text


def test_trace_stages():
    stages = []
    datagram = assemble("/test", [1, "x"], trace=lambda stage, data: stages.append((stage, data)))

    names = [name for name, _ in stages]
    assert names == ["address", "type tag (raw)", "type tag", "argument 0 (i)", "argument 1 (s)", "message"]
    assert stages[1][1] == b",is"
    assert stages[2][1] == b",is\x00"
    assert stages[-1][1] == datagram
    # tracing is purely observational
    assert datagram == assemble("/test", [1, "x"])


def test_misaligned_segment(monkeypatch):
    monkeypatch.setattr(message, "encode_argument", lambda arg: b"\x00\x00\x01")
    with pytest.raises(ConstructionError):
        assemble("/test", [1])


def test_oversized_message(caplog):
    with caplog.at_level(logging.WARNING, logger="oscsend.message"):
        datagram = assemble("/big", ["x" * 70000])
    assert len(datagram) % 4 == 0
    assert "exceeds the UDP payload limit" in caplog.text
