"""
Base58 with a leading version byte and a trailing 4-byte checksum
(first bytes of double-SHA256 of version + payload).
"""
from typing import Tuple

from embit import base58, hashes

from .errors import AlphabetError, ChecksumError, EmptyError

CHECKSUM_SIZE = 4


def checksum(data: bytes) -> bytes:
    return hashes.double_sha256(data)[:CHECKSUM_SIZE]


def encode(payload: bytes, version: int) -> str:
    data = bytes([version]) + payload
    return base58.encode(data + checksum(data))


def decode(s: str) -> Tuple[bytes, int]:
    """Returns (payload, version)"""
    if not s:
        raise EmptyError("Empty base58 string")
    try:
        raw = base58.decode(s)
    except ValueError as e:
        raise AlphabetError("Invalid base58 character in %r" % s) from e
    # at least the version byte and the checksum
    if len(raw) < CHECKSUM_SIZE + 1:
        raise ChecksumError("Too short to carry a checksum")
    data, check = raw[:-CHECKSUM_SIZE], raw[-CHECKSUM_SIZE:]
    if checksum(data) != check:
        raise ChecksumError("Checksum mismatch")
    return data[1:], data[0]
