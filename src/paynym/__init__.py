from embit.networks import NETWORKS

from .bip47 import (
    decode_payment_code_address,
    generate_payment_code_address,
    is_payment_code_address,
)
from .errors import PaymentCodeError
from .payload import PaymentCodePayload
from .util.secp256k1 import ecdh_multiply, scalar_multiply

__version__ = "0.1.0"

__all__ = [
    "NETWORKS",
    "PaymentCodeError",
    "PaymentCodePayload",
    "decode_payment_code_address",
    "ecdh_multiply",
    "generate_payment_code_address",
    "is_payment_code_address",
    "scalar_multiply",
]
