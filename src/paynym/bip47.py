"""
Payment codes: reusable payment notification addresses in the spirit of BIP-47
see: https://github.com/bitcoin/bips/blob/master/bip-0047.mediawiki

An address is the base58check encoding (version byte 0x47, "P") of an
80-byte payload, see `paynym.payload`.
"""
import logging

from embit.networks import NETWORKS

from . import base58check, mask
from .errors import InvalidInputLength, InvalidPaymentCode, PaymentCodeError
from .keys import is_for_network, parse_compressed_pubkey
from .payload import PAYLOAD_SIZE, RESERVED_SIZE, VERSION_TAG, PaymentCodePayload
from .util.secp256k1 import scalar_multiply

logger = logging.getLogger(__name__)

SCALAR_SIZE = 32
CHAIN_CODE_SIZE = 32
OUTPOINT_SIZE = mask.OUTPOINT_SIZE
POINT_SIZES = (33, 65)

PAYLOAD_VERSIONS = (0x01, 0x02)
SIGNS = (0x02, 0x03)


def _check_length(name: str, value: bytes, *sizes: int):
    if len(value) not in sizes:
        raise InvalidInputLength(
            "%s should be %s bytes, got %d"
            % (name, " or ".join(str(s) for s in sizes), len(value))
        )


def generate_payment_code_address(
    sender_private_scalar: bytes,
    recipient_public_point: bytes,
    chain_code: bytes,
    outpoint: bytes,
    multiply=scalar_multiply,
) -> str:
    """
    Derives the payment code address for:
        * the sender's 32-byte private scalar
        * the recipient's SEC encoded public key
        * a 32-byte chain code
        * a 36-byte outpoint (txid + output index)

    `multiply` derives the shared point from the scalar and the point,
    see `paynym.util.secp256k1` (pass `ecdh_multiply` for conventional ECDH).
    Its x-coordinate keys an HMAC-SHA512 over the outpoint,
    both halves of the result blind the chain code into the payload.
    """
    _check_length("Sender scalar", sender_private_scalar, SCALAR_SIZE)
    _check_length("Recipient point", recipient_public_point, *POINT_SIZES)
    _check_length("Chain code", chain_code, CHAIN_CODE_SIZE)
    _check_length("Outpoint", outpoint, OUTPOINT_SIZE)

    x, y = multiply(sender_private_scalar, recipient_public_point)
    keystream = mask.derive_mask(mask.shared_secret_key(x), outpoint)
    pubkey, chaincode = mask.mask_chain_code(chain_code, keystream)

    payload = PaymentCodePayload(
        version=0x01,
        sign=0x03 if y & 1 else 0x02,
        pubkey=pubkey,
        chaincode=chaincode,
    )
    return payload.to_base58()


def decode_payment_code_address(
    address: str,
    network: dict = NETWORKS["main"],
    parse_pubkey=parse_compressed_pubkey,
    for_network=is_for_network,
) -> PaymentCodePayload:
    """
    Decodes and fully validates a payment code address.
    Raises a PaymentCodeError subclass describing the first failed check.
    """
    data, tag = base58check.decode(address)
    if tag != VERSION_TAG:
        raise InvalidPaymentCode("Invalid version tag 0x%02x" % tag)
    if len(data) != PAYLOAD_SIZE:
        raise InvalidPaymentCode(
            "Payload should be %d bytes, got %d" % (PAYLOAD_SIZE, len(data))
        )
    payload = PaymentCodePayload.parse(data)

    if payload.version not in PAYLOAD_VERSIONS:
        raise InvalidPaymentCode("Unsupported payload version %d" % payload.version)
    if payload.bitfield != 0:
        raise InvalidPaymentCode("Bitfield should be zero")
    if payload.sign not in SIGNS:
        raise InvalidPaymentCode("Invalid sign byte 0x%02x" % payload.sign)

    pub = parse_pubkey(payload.notification_key, network)
    if not for_network(pub, network):
        raise InvalidPaymentCode("Public key is not valid for %s" % network.get("name"))

    if payload.reserved != bytes(RESERVED_SIZE):
        raise InvalidPaymentCode("Reserved bytes should be zero")
    return payload


def is_payment_code_address(
    address: str,
    network: dict = NETWORKS["main"],
    parse_pubkey=parse_compressed_pubkey,
    for_network=is_for_network,
) -> bool:
    """Never raises: any malformed address is just not a payment code"""
    try:
        decode_payment_code_address(address, network, parse_pubkey, for_network)
    except PaymentCodeError as e:
        logger.debug("Rejected payment code %r: %s", address, e)
        return False
    except Exception as e:
        # injected parsers or non-string input
        logger.debug("Rejected payment code %r: %r", address, e)
        return False
    return True
