from hypothesis import given
from hypothesis import strategies as st

from iqpacket.crc import CRC_SEED, array_update_crc, byte_update_crc, make_crc


def test_empty_data_gives_seed():
    assert make_crc(b"") == 0xFFFF
    assert CRC_SEED == 0xFFFF


def test_standard_check_value():
    assert make_crc(b"123456789") == 0x29B1


def test_array_update_matches_byte_updates():
    data = b"\x55\x03\x10abc"
    crc = CRC_SEED
    for byte in data:
        crc = byte_update_crc(crc, byte)
    assert array_update_crc(CRC_SEED, data) == crc


@given(st.binary(), st.binary())
def test_crc_can_be_accumulated_in_pieces(first, second):
    assert make_crc(first + second) == array_update_crc(make_crc(first), second)


@given(st.binary())
def test_crc_fits_sixteen_bits(data):
    assert 0 <= make_crc(data) <= 0xFFFF


@given(st.binary())
def test_appending_crc_big_endian_gives_zero_residue(data):
    crc = make_crc(data)
    assert make_crc(data + crc.to_bytes(2, "big")) == 0


@given(st.binary(min_size=1))
def test_single_bit_flip_changes_crc(data):
    flipped = bytes([data[0] ^ 0x01]) + data[1:]
    assert make_crc(flipped) != make_crc(data)
    assert make_crc(data) == make_crc(bytes(data))