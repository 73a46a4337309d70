import pytest

from tinytarget.simpleserial import Frame, SimpleSerial, decode, encode

AES_KEY_LINE = "k2B7E151628AED2A6ABF7158809CF4F3C"
TEA_KEY_LINE = "k000102030405060708090A0B0C0D0E0F"
TEA_PT_LINE = "p0102030405060708"


def make_link(text, uppercase_only=False):
    chars = iter(text)
    sent = []
    link = SimpleSerial(lambda: next(chars, ""), sent.append, uppercase_only)
    return link, sent


def test_encode_pins_wire_format():
    assert encode(b"\x00\xff") == "r00FF\n"


def test_encode_empty_payload():
    assert encode(b"") == "r\n"


@pytest.mark.parametrize("data", [b"", b"\x01", bytes(range(16)), bytes(range(240, 256))])
def test_encode_decode_round_trip(data):
    line = encode(data)
    assert line[0] == "r" and line[-1] == "\n"
    assert decode(line[1:-1]) == data


def test_decode_accepts_either_case():
    assert decode("abcdef") == decode("ABCDEF") == bytes.fromhex("ABCDEF")


@pytest.mark.parametrize("text", ["0", "zz", "0 1", "12g4"])
def test_decode_rejects_bad_text(text):
    with pytest.raises(ValueError):
        decode(text)


def test_get_plaintext_frame_with_carriage_return():
    link, _ = make_link(TEA_PT_LINE + "\r")
    frame = link.get(8, 16)
    assert frame == Frame("p", bytes.fromhex(TEA_PT_LINE[1:]))
    assert frame.is_plaintext and not frame.is_key


def test_get_key_frame_with_newline():
    link, _ = make_link(AES_KEY_LINE + "\n")
    frame = link.get(16, 16)
    assert frame.is_key
    assert frame.data == bytes.fromhex(AES_KEY_LINE[1:])


def test_get_key_then_plaintext_sequence():
    link, _ = make_link(TEA_KEY_LINE + "\r" + TEA_PT_LINE + "\r")
    key = link.get(8, 16)
    pt = link.get(8, 16)
    assert key.data == bytes.fromhex(TEA_KEY_LINE[1:])
    assert pt.data == bytes.fromhex(TEA_PT_LINE[1:])


def test_lowercase_digits_accepted_by_default():
    link, _ = make_link("p0a0b\n")
    assert link.get(2, 2).data == bytes.fromhex("0a0b")


def test_uppercase_only_rejects_lowercase():
    link, _ = make_link("p0a0b\n", uppercase_only=True)
    assert link.get(2, 2) is None


def test_unknown_command_consumes_one_character():
    link, _ = make_link("x" + TEA_PT_LINE + "\n")
    assert link.get(8, 16) is None
    assert link.get(8, 16).data == bytes.fromhex(TEA_PT_LINE[1:])


def test_bad_digit_in_body_returns_none():
    link, _ = make_link("p01G3\n")
    assert link.get(2, 2) is None


def test_trailing_spaces_break_the_frame():
    link, _ = make_link(TEA_KEY_LINE + "  \r")
    assert link.get(8, 16) is None
    assert link.get(8, 16) is None
    assert link.get(8, 16) is None
    with pytest.raises(EOFError):
        link.get(8, 16)


def test_too_long_body_returns_none():
    link, _ = make_link("p010203\n")
    assert link.get(2, 2) is None


def test_bytes_reader_is_accepted():
    chars = iter([bytes([c]) for c in b"p0102\n"])
    link = SimpleSerial(lambda: next(chars, b""), lambda text: None)
    assert link.get(2, 2).data == b"\x01\x02"


def test_exhausted_input_raises_eof():
    link, _ = make_link("p01")
    with pytest.raises(EOFError):
        link.get(2, 2)


@pytest.mark.parametrize("sizes", [(17, 16), (16, 17), (-1, 4)])
def test_get_rejects_oversized_payloads(sizes):
    link, _ = make_link("p00\n")
    with pytest.raises(ValueError):
        link.get(*sizes)


def test_get_address_reads_two_bytes():
    link, _ = make_link("a1234\n")
    assert link.get_address() == bytes.fromhex("1234")


def test_get_address_ignores_other_commands():
    link, _ = make_link("p1234\n")
    assert link.get_address(2) is None


def test_put_writes_encoded_line():
    link, sent = make_link("")
    payload = bytes.fromhex("B1A1AB198C45FA5B")
    link.put(payload)
    assert "".join(sent) == "rB1A1AB198C45FA5B\n"


def test_put_rejects_oversized_payload():
    link, sent = make_link("")
    with pytest.raises(ValueError):
        link.put(bytes(17))
    assert sent == []