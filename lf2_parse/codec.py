"""
Codec for LF2's obfuscated `.dat` files.

An encoded file is a 123 byte preamble followed by the text, where each
byte has a repeating key byte added to it (mod 256).
"""
import numpy as np

KEY = b'odBearBecauseHeIsVeryGoodSiuHungIsAGo'
PREAMBLE_LEN = 123


class CodecError(ValueError):
    pass


def _key_stream(length: int) -> np.ndarray:
    key = np.frombuffer(KEY, dtype=np.uint8)
    return np.resize(key, length)


def decode(data: bytes) -> bytes:
    """Reverses the `.dat` obfuscation."""
    if len(data) < PREAMBLE_LEN:
        raise CodecError(
            f'Encoded data is {len(data)} bytes, shorter than the {PREAMBLE_LEN} byte preamble')
    body = data[PREAMBLE_LEN:]
    if not body:
        return b''
    body = np.frombuffer(body, dtype=np.uint8)
    return (body - _key_stream(len(body))).tobytes()


def encode(data: bytes, preamble: bytes = bytes(PREAMBLE_LEN)) -> bytes:
    """Obfuscates text into `.dat` form. `preamble` is ignored by `decode`."""
    if len(preamble) != PREAMBLE_LEN:
        raise CodecError(f'Preamble must be {PREAMBLE_LEN} bytes, got {len(preamble)}')
    if not data:
        return bytes(preamble)
    body = np.frombuffer(data, dtype=np.uint8)
    return bytes(preamble) + (body + _key_stream(len(body))).tobytes()
