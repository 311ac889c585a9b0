"""Tests for command frame building and reply frame validation."""

import pytest

from sequences.sds011_monitor.libs.sds011_protocol import (
    Frame,
    FrameBuilder,
    FrameParser,
    ReplyFrame,
    TooLongWorkTime,
    EmptyDataFrame,
    BadChecksum,
    FrameError,
    Command,
)
from sequences.sds011_monitor.libs.sds011_protocol.constants import COMMAND_FRAME_LEN

from conftest import make_reply


def test_every_command_frame_is_19_bytes():
    frames = [
        FrameBuilder.build_set_report_mode(),
        FrameBuilder.build_query(),
        FrameBuilder.build_set_work_period(0),
        FrameBuilder.build_set_work_period(30),
    ]
    for frame in frames:
        assert len(frame) == COMMAND_FRAME_LEN


def test_frame_header_ids_and_tail():
    frame = FrameBuilder.build_query()
    assert frame[0] == 0xAA
    assert frame[1] == 0xB4
    assert frame[15:17] == b"\xff\xff"
    assert frame[18] == 0xAB


def test_query_frame_payload_region():
    """Query carries opcode 0x04 and twelve zero bytes before the ID bytes."""
    frame = FrameBuilder.build_query()
    assert frame[2:15] == bytes([0x04]) + bytes(12)
    assert frame[15:17] == b"\xff\xff"


def test_query_frame_exact_bytes():
    # 0x04 + 0xFF + 0xFF = 0x202 -> 0x02
    expected = bytes.fromhex("aab4" "04" + "00" * 12 + "ffff" "02" "ab")
    assert FrameBuilder.build_query() == expected


def test_report_mode_frame_exact_bytes():
    """Write (0x01), passive (0x01): checksum 0x02+0x01+0x01+0xFF+0xFF = 0x202 -> 0x02."""
    expected = bytes.fromhex("aab4" "020101" + "00" * 10 + "ffff" "02" "ab")
    assert FrameBuilder.build_set_report_mode() == expected


def test_report_mode_frame_active():
    frame = FrameBuilder.build_set_report_mode(0x00)
    assert frame[2:5] == b"\x02\x01\x00"
    assert frame[17] == 0x01


@pytest.mark.parametrize("minutes", range(0, 31))
def test_work_period_frame_checksum(minutes):
    frame = FrameBuilder.build_set_work_period(minutes)
    assert frame[2:5] == bytes([Command.WORK_PERIOD, 0x01, minutes])
    assert frame[5:15] == bytes(10)
    assert frame[17] == (0x08 + 0x01 + minutes + 0 + 0xFF + 0xFF) % 256


def test_checksum_covers_opcode_through_ids():
    for frame in (FrameBuilder.build_query(), FrameBuilder.build_set_work_period(7)):
        assert frame[17] == sum(frame[2:17]) % 256


def test_work_period_above_limit_rejected():
    with pytest.raises(TooLongWorkTime) as exc_info:
        FrameBuilder.build_set_work_period(31)
    assert exc_info.value.minutes == 31


def test_too_long_work_time_is_value_error():
    with pytest.raises(ValueError):
        FrameBuilder.build_set_work_period(255)


def test_negative_work_period_rejected():
    with pytest.raises(ValueError):
        FrameBuilder.build_set_work_period(-1)


def test_frame_params_too_long():
    with pytest.raises(ValueError):
        Frame(Command.QUERY, bytes(13))


def test_frame_accepts_list_params():
    frame = Frame(Command.WORK_PERIOD, [1, 5])
    assert frame.params == b"\x01\x05"
    assert len(frame.data) == 13


def test_parse_valid_reply():
    raw = make_reply([0x64, 0x00, 0xC8, 0x00, 0xA1, 0x60], cmd=0xC0)
    reply = FrameParser.parse(raw)
    assert isinstance(reply, ReplyFrame)
    assert reply.raw == raw
    assert reply.cmd == 0xC0
    assert reply.payload == bytes([0x64, 0x00, 0xC8, 0x00, 0xA1, 0x60])
    assert reply.head == 0xAA
    assert reply.tail == 0xAB


def test_parse_bad_checksum():
    raw = bytearray(make_reply([0x64, 0x00, 0xC8, 0x00, 0xA1, 0x60]))
    raw[8] ^= 0x01
    with pytest.raises(BadChecksum) as exc_info:
        FrameParser.parse(bytes(raw))
    assert exc_info.value.received == raw[8]
    assert exc_info.value.expected == (0x64 + 0xC8 + 0xA1 + 0x60) & 0xFF


def test_parse_ignores_head_and_tail():
    """Only the data checksum decides validity."""
    raw = bytearray(make_reply([1, 2, 3, 4, 5, 6]))
    raw[0] = 0x00
    raw[9] = 0x00
    assert FrameParser.parse(bytes(raw)).payload == bytes([1, 2, 3, 4, 5, 6])


def test_parse_empty_data_region():
    with pytest.raises(EmptyDataFrame):
        FrameParser.parse(b"\xaa\xc0")


def test_parse_wrong_length():
    with pytest.raises(FrameError):
        FrameParser.parse(b"\xaa\xc0\x01\x02\x03")


def test_reply_repr():
    reply = FrameParser.parse(make_reply([1, 2, 3, 4, 5, 6], cmd=0xC0))
    assert repr(reply) == "ReplyFrame(cmd=0xC0, payload=01 02 03 04 05 06)"
