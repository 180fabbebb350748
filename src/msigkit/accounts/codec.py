"""Decode steps shared by the account decoders."""

from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Union

from solders.pubkey import Pubkey

DEFAULT_PUBKEY = Pubkey.default()

# Milliseconds since epoch fit in 13 digits until the year 2286
MAX_EPOCH_MS_DIGITS = 13

ByteBuffer = Union[bytes, bytearray, Iterable[int]]


def to_pubkey(value: Any) -> Pubkey:
    """Coerce a base58 string, 32 raw bytes or a Pubkey into a Pubkey."""
    if isinstance(value, Pubkey):
        return value
    if isinstance(value, str):
        return Pubkey.from_string(value)
    return Pubkey(bytes(value))


def to_bytes(buf: Optional[ByteBuffer]) -> bytes:
    if buf is None:
        return b""
    return bytes(buf)


def decode_text(buf: Optional[ByteBuffer]) -> str:
    """
    Decode a fixed-size text buffer.

    Every zero byte is dropped, not only the trailing padding, and the
    remainder is decoded as UTF-8.
    """
    if not buf:
        return ""
    return bytes(b for b in to_bytes(buf) if b != 0).decode("utf-8", errors="replace")


def epoch_to_datetime(seconds: Any) -> datetime:
    """Seconds since epoch to an aware UTC datetime."""
    return datetime.fromtimestamp(int(seconds), tz=timezone.utc)


def normalize_expiration_ms(ms: int) -> int:
    """
    Undo a double millisecond scaling.

    Some expiration dates reach the client already in milliseconds and get
    scaled once more; a value longer than 13 digits is divided by 1000.
    """
    if len(str(int(ms))) > MAX_EPOCH_MS_DIGITS:
        return int(ms / 1000)
    return int(ms)


def expiration_to_datetime(seconds: Any) -> datetime:
    """Expiration seconds to datetime, tolerating values stored in ms."""
    ms = normalize_expiration_ms(int(seconds) * 1000)
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def datetime_to_ms(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def to_hex_pairs(data: Optional[ByteBuffer]) -> str:
    """Render bytes as space separated two-digit hex tokens: '0a ff 01'."""
    return to_bytes(data).hex(" ")
