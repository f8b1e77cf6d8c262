"""
Public key capabilities used by payment code validation,
backed by embit's key parsing and network definitions.
"""
from embit import ec
from embit.networks import NETWORKS

from .errors import InvalidKeyMaterial

COMPRESSED_KEY_SIZE = 33


def is_known_network(network: dict) -> bool:
    return any(network is net or network == net for net in NETWORKS.values())


def parse_compressed_pubkey(data: bytes, network: dict = NETWORKS["main"]) -> ec.PublicKey:
    """Parses a 33-byte compressed public key, raises InvalidKeyMaterial otherwise"""
    if not is_known_network(network):
        raise InvalidKeyMaterial("Unknown network %r" % network.get("name"))
    if len(data) != COMPRESSED_KEY_SIZE or data[0] not in (0x02, 0x03):
        raise InvalidKeyMaterial("Not a compressed public key")
    try:
        return ec.PublicKey.parse(data)
    except ValueError as e:
        raise InvalidKeyMaterial("Point is not on the curve") from e


def is_for_network(pub: ec.PublicKey, network: dict = NETWORKS["main"]) -> bool:
    """
    A compressed key carries no network marker,
    so any parsed key is valid on every known network.
    """
    return is_known_network(network)
