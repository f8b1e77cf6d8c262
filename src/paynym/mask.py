"""
HMAC-SHA512 keystream used to blind the payment code key material.

The mask is keyed with the decimal rendering of the shared point's
x-coordinate and computed over the 36-byte outpoint. The first half masks
the `pubkey` field, the second half the `chaincode` field.
"""
import hashlib
import hmac
from typing import Tuple

from .errors import InvalidInputLength

MASK_SIZE = 64
HALF_SIZE = 32
OUTPOINT_SIZE = 36


def shared_secret_key(x: int) -> bytes:
    """Masking key for a shared point x-coordinate, i.e. b"1234..." """
    return str(x).encode()


def derive_mask(shared_secret: bytes, outpoint: bytes) -> bytes:
    if len(outpoint) != OUTPOINT_SIZE:
        raise InvalidInputLength(
            "Outpoint should be %d bytes, got %d" % (OUTPOINT_SIZE, len(outpoint))
        )
    return hmac.new(shared_secret, outpoint, hashlib.sha512).digest()


def split_mask(mask: bytes) -> Tuple[bytes, bytes]:
    if len(mask) != MASK_SIZE:
        raise InvalidInputLength("Mask should be %d bytes" % MASK_SIZE)
    return mask[:HALF_SIZE], mask[HALF_SIZE:]


def xor_bytes(data: bytes, half_mask: bytes) -> bytes:
    """XOR 32 bytes with a half mask. Applying it twice gives the input back."""
    if len(data) != HALF_SIZE or len(half_mask) != HALF_SIZE:
        raise InvalidInputLength("Masked fields are %d bytes long" % HALF_SIZE)
    return bytes(a ^ b for a, b in zip(data, half_mask))


def mask_chain_code(chain_code: bytes, mask: bytes) -> Tuple[bytes, bytes]:
    """
    Returns the (pubkey, chaincode) payload fields.
    Both are derived from the chain code, one with each half of the mask.
    """
    pubkey_mask, chaincode_mask = split_mask(mask)
    return xor_bytes(chain_code, pubkey_mask), xor_bytes(chain_code, chaincode_mask)


unmask = xor_bytes
