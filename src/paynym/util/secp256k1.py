"""
Curve primitives used to derive the payment code shared point.

`scalar_multiply` is the derivation payment codes are generated with:
the sender scalar and the recipient key are taken as the affine
coordinates of the point and the multiplier is a zeroed 33-byte buffer.
`ecdh_multiply` is the conventional ECDH shape (scalar times the decoded
recipient key) and can be passed to the generator instead.

Both return affine (x, y), the point at infinity being (0, 0).
Points are never checked to be on the curve, so any coordinates in range
give a result.
"""
from typing import Optional, Tuple

from embit.util import secp256k1

from ..errors import InvalidKeyMaterial

# field size and group order
P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

INFINITY = (0, 0)

# multiplier buffer of the generation call, always zero
MULTIPLIER = bytes(33)


def _inv(a: int) -> int:
    return pow(a, P - 2, P)


def _add(p1: Optional[Tuple[int, int]], p2: Optional[Tuple[int, int]]):
    # None is the point at infinity
    if p1 is None:
        return p2
    if p2 is None:
        return p1
    x1, y1 = p1
    x2, y2 = p2
    if x1 == x2:
        if (y1 + y2) % P == 0:
            return None
        # doubling, y1 == y2 != 0 here
        lam = 3 * x1 * x1 * _inv(2 * y1) % P
    else:
        lam = (y2 - y1) * _inv(x2 - x1) % P
    x3 = (lam * lam - x1 - x2) % P
    return x3, (lam * (x1 - x3) - y1) % P


def point_multiply(k: int, x: int, y: int) -> Tuple[int, int]:
    """Double-and-add k * (x, y) on y^2 = x^3 + 7 over the secp256k1 field"""
    result = None
    addend = (x % P, y % P)
    while k > 0:
        if k & 1:
            result = _add(result, addend)
        addend = _add(addend, addend)
        if addend is None:
            break
        k >>= 1
    return INFINITY if result is None else result


def scalar_multiply(scalar: bytes, point: bytes) -> Tuple[int, int]:
    """
    Payment code shared point: `scalar` and `point` are read as big-endian
    integers and used as the X and Y inputs, MULTIPLIER as the multiplier.
    """
    return point_multiply(
        int.from_bytes(MULTIPLIER, "big") % N,
        int.from_bytes(scalar, "big"),
        int.from_bytes(point, "big"),
    )


def ecdh_multiply(scalar: bytes, point: bytes) -> Tuple[int, int]:
    """
    Multiplies the SEC encoded `point` by the 32-byte big-endian `scalar`.
    The point is decoded by embit, a key that does not decode raises InvalidKeyMaterial.
    """
    try:
        pub = secp256k1.ec_pubkey_parse(point)
    except ValueError as e:
        raise InvalidKeyMaterial("Recipient point is not a valid public key") from e
    sec = secp256k1.ec_pubkey_serialize(pub, secp256k1.EC_UNCOMPRESSED)
    return point_multiply(
        int.from_bytes(scalar, "big") % N,
        int.from_bytes(sec[1:33], "big"),
        int.from_bytes(sec[33:65], "big"),
    )
