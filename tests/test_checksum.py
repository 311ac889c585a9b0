"""Tests for the 8-bit additive checksum."""

from sequences.sds011_monitor.libs.sds011_protocol import Checksum


def test_checksum_empty():
    assert Checksum.calculate(b"") == 0


def test_checksum_simple_sum():
    assert Checksum.calculate(b"\x01\x02\x03") == 6


def test_checksum_truncates_to_low_byte():
    """0xFF + 0xFF = 0x1FE, low byte 0xFE."""
    assert Checksum.calculate(b"\xff\xff") == 0xFE


def test_checksum_accepts_int_list():
    assert Checksum.calculate([0x64, 0x00, 0xC8, 0x00, 0xA1, 0x60]) == (0x64 + 0xC8 + 0xA1 + 0x60) % 256


def test_modulo_and_mask_agree():
    """Command frames use % 256, replies & 255; both are the same truncation."""
    data = bytes(range(256)) * 3
    assert Checksum.calculate(data) == sum(data) % 256 == sum(data) & 255

