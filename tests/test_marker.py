import pytest

from jfifreader.binary.codecs.bytecursor import ByteCursor
from jfifreader.binary.codecs.marker import (
    DESCRIPTIONS, decode_length, decode_marker, describe_marker,
    is_valid_marker, marker_id_string,
)

def test_marker_and_length_layout():
    cur = ByteCursor(b"\xFF\xDB\x00\x43" + b"\x00" * 0x41)
    assert decode_marker(cur) == 0xFFDB
    assert decode_length(cur) == 0x43
    assert cur.remaining() == 0x41

def test_short_reads_return_none():
    cur = ByteCursor(b"\xFF")
    assert decode_marker(cur) is None
    assert decode_length(ByteCursor(b"")) is None

@pytest.mark.parametrize("code, ok", [
    (0xFF00, False), (0xFF01, True), (0xFFD8, True), (0xFFFE, True), (0xFFFF, False), (0x0000, False),
])
def test_marker_range(code, ok):
    assert is_valid_marker(code) is ok

@pytest.mark.parametrize("code, text", [
    (0xFFC0, "Baseline DCT; Huffman"),
    (0xFFC4, "Huffman table"),
    (0xFFD0, "Restart"),
    (0xFFD7, "Restart"),
    (0xFFD8, "Start of Image (SOI)"),
    (0xFFD9, "End of Image (EOI)"),
    (0xFFDA, "Start of Scan (SOS)"),
    (0xFFDB, "Quantisation table"),
    (0xFFE0, "JFIF Header"),
    (0xFFE1, "[Reserved: application extension]"),
    (0xFFEF, "[Reserved: application extension]"),
    (0xFFF0, "[Reserved: JPEG extension]"),
    (0xFFFD, "[Reserved: JPEG extension]"),
    (0xFFFE, "Comment"),
    (0xFFFF, "[Invalid]"),
])
def test_descriptions(code, text):
    assert describe_marker(code) == text

@pytest.mark.parametrize("code", [0xFF01, 0xFF02, 0xFFBF])
def test_unmapped_codes_have_no_description(code):
    assert describe_marker(code) is None

def test_description_table_is_immutable():
    assert len(DESCRIPTIONS) == 0x40
    with pytest.raises(TypeError):
        DESCRIPTIONS[0x00] = "x"  # type: ignore[index]

def test_id_string_is_uppercase_hex():
    assert marker_id_string(0xFFDA) == "0xFFDA"
    assert marker_id_string(0xFFE0) == "0xFFE0"
