import pytest

from lf2_parse import codec


def test_decode_reverses_encode():
    text = b'<bmp_begin>\nname: Frozen\n<bmp_end>\n' * 5
    encoded = codec.encode(text)
    assert len(encoded) == codec.PREAMBLE_LEN + len(text)
    assert encoded[codec.PREAMBLE_LEN:] != text
    assert codec.decode(encoded) == text


def test_key_is_added_per_byte():
    encoded = codec.encode(bytes([0, 0, 255]))
    assert encoded[codec.PREAMBLE_LEN:] == bytes([ord('o'), ord('d'), (255 + ord('B')) % 256])


def test_decodes_known_cipher_text():
    phrase = b'SiuHungIsAGoodBearBecauseHeIsVeryGood'
    key = phrase[12:] + phrase[:12]
    text = b'<bmp_begin>\nname: Frozen\nhead: sprite\\sys\\frozen_f.bmp\n<bmp_end>\n'
    body = bytes((byte + key[i % len(key)]) % 256 for i, byte in enumerate(text))
    assert codec.decode(bytes(codec.PREAMBLE_LEN) + body) == text


def test_key_wraps_after_37_bytes():
    assert len(codec.KEY) == 37
    body = codec.encode(bytes(40))[codec.PREAMBLE_LEN:]
    assert body[:37] == codec.KEY
    assert body[37:] == b'odB'


def test_preamble_is_ignored():
    encoded = codec.encode(b'abc', preamble=bytes(range(codec.PREAMBLE_LEN)))
    assert codec.decode(encoded) == b'abc'


def test_empty_body():
    assert codec.decode(bytes(codec.PREAMBLE_LEN)) == b''
    assert codec.encode(b'') == bytes(codec.PREAMBLE_LEN)


def test_short_input():
    with pytest.raises(codec.CodecError):
        codec.decode(b'too short')


def test_bad_preamble():
    with pytest.raises(codec.CodecError):
        codec.encode(b'abc', preamble=b'xyz')
