"""
Byte <-> Babel text transcription.

Each byte ``b`` becomes two lowercase letters: ``b // 26`` followed by
``b % 26``, both offset from ``'a'``. The first letter therefore only spans
``a``..``j``. Output length is always twice the input length.
"""

from typing import Optional, Tuple

from babelfile import config
from babelfile.errors import InvalidAlphabetError
from babelfile.lib.pool import parallel_map, resolve_workers, split_evenly
from babelfile.log import get_logger, log

logger = get_logger(__name__)

_ALPHABET = config.TEXT_ALPHABET
_BASE = config.TEXT_BASE

# Lookup tables for all 256 byte values
BYTE_TO_PAIR = tuple(_ALPHABET[b // _BASE] + _ALPHABET[b % _BASE] for b in range(256))
PAIR_TO_BYTE = {pair: b for b, pair in enumerate(BYTE_TO_PAIR)}


def encode_byte(value: int) -> str:
    """Encode a single byte value (0-255) as its two-letter code."""
    if not 0 <= value <= 255:
        raise ValueError(f"Byte value must be 0-255, got {value}")
    return BYTE_TO_PAIR[value]


def decode_pair(pair: str, position: int = 0) -> int:
    """Decode a two-letter code back to its byte value."""
    value = PAIR_TO_BYTE.get(pair)
    if value is not None:
        return value

    for offset, char in enumerate(pair):
        if char not in _ALPHABET:
            raise InvalidAlphabetError(
                f"Invalid character {char!r} at position {position + offset}"
            )
    if len(pair) != 2:
        raise InvalidAlphabetError(f"Pair must be 2 characters, got {len(pair)}")
    raise InvalidAlphabetError(
        f"Pair {pair!r} at position {position} does not encode a byte"
    )


def _encode_slice(data: bytes) -> str:
    return "".join(BYTE_TO_PAIR[b] for b in data)


def _decode_slice(item: Tuple[int, str]) -> bytes:
    start, text = item
    return bytes(
        decode_pair(text[i : i + 2], start + i) for i in range(0, len(text) - 1, 2)
    )


def encode(data: bytes, workers: Optional[int] = None) -> str:
    """Transcribe raw bytes into Babel text."""
    if len(data) <= config.PARALLEL_BYTES_THRESHOLD:
        return _encode_slice(data)

    workers = resolve_workers(workers)
    slices = [data[r.start : r.stop] for r in split_evenly(len(data), workers)]
    log(logger, "debug", "Encoding bytes in parallel", size=len(data), slices=len(slices))
    return "".join(parallel_map(_encode_slice, slices, workers))


def decode(text: str, workers: Optional[int] = None) -> bytes:
    """
    Transcribe Babel text back into bytes.

    Callers strip page padding before calling this. A dangling last character
    (odd length) does not form a pair and is ignored.

    Raises:
        InvalidAlphabetError: a character is outside ``a``..``z`` or a pair
            does not encode a value in 0-255.
    """
    if len(text) % 2:
        log(logger, "debug", "Ignoring dangling character", length=len(text))
        text = text[:-1]

    if len(text) <= config.PARALLEL_CHARS_THRESHOLD:
        return _decode_slice((0, text))

    workers = resolve_workers(workers)
    slices = [
        (r.start, text[r.start : r.stop])
        for r in split_evenly(len(text), workers, align=2)
    ]
    log(logger, "debug", "Decoding text in parallel", size=len(text), slices=len(slices))
    return b"".join(parallel_map(_decode_slice, slices, workers))
