"""
Fixed 80-byte payment code payload:

    version (1) | bitfield (1) | sign (1) | pubkey (32) | chaincode (32) | reserved (13)

Parsing only slices the fields, checking values is left to `bip47`.
"""
from io import BytesIO

from . import base58check
from .errors import InvalidPaymentCode, LengthError

PAYLOAD_SIZE = 80
RESERVED_SIZE = 13
KEY_SIZE = 32

# base58check version byte, "P" once encoded
VERSION_TAG = 0x47


class PaymentCodePayload:
    def __init__(
        self,
        pubkey: bytes,
        chaincode: bytes,
        sign: int = 0x02,
        version: int = 0x01,
        bitfield: int = 0x00,
        reserved: bytes = bytes(RESERVED_SIZE),
    ):
        if len(pubkey) != KEY_SIZE:
            raise LengthError("Pubkey field should be %d bytes" % KEY_SIZE)
        if len(chaincode) != KEY_SIZE:
            raise LengthError("Chaincode field should be %d bytes" % KEY_SIZE)
        if len(reserved) != RESERVED_SIZE:
            raise LengthError("Reserved field should be %d bytes" % RESERVED_SIZE)
        for name, value in [("version", version), ("bitfield", bitfield), ("sign", sign)]:
            if not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise LengthError("%s should fit in one byte" % name)
        self._version = version
        self._bitfield = bitfield
        self._sign = sign
        self._pubkey = bytes(pubkey)
        self._chaincode = bytes(chaincode)
        self._reserved = bytes(reserved)

    @property
    def version(self) -> int:
        return self._version

    @property
    def bitfield(self) -> int:
        return self._bitfield

    @property
    def sign(self) -> int:
        return self._sign

    @property
    def pubkey(self) -> bytes:
        return self._pubkey

    @property
    def chaincode(self) -> bytes:
        return self._chaincode

    @property
    def reserved(self) -> bytes:
        return self._reserved

    def replace(self, **fields):
        """Copy of the payload with some fields changed"""
        values = dict(
            version=self.version,
            bitfield=self.bitfield,
            sign=self.sign,
            pubkey=self.pubkey,
            chaincode=self.chaincode,
            reserved=self.reserved,
        )
        values.update(fields)
        return type(self)(**values)

    @property
    def notification_key(self) -> bytes:
        """Sign byte and pubkey field, laid out as a compressed public key"""
        return bytes([self.sign]) + self.pubkey

    def write_to(self, stream) -> int:
        res = stream.write(bytes([self.version, self.bitfield, self.sign]))
        res += stream.write(self.pubkey)
        res += stream.write(self.chaincode)
        res += stream.write(self.reserved)
        return res

    def serialize(self) -> bytes:
        stream = BytesIO()
        self.write_to(stream)
        return stream.getvalue()

    @classmethod
    def read_from(cls, stream):
        data = stream.read(PAYLOAD_SIZE)
        if len(data) != PAYLOAD_SIZE:
            raise LengthError(
                "Payload should be %d bytes, got %d" % (PAYLOAD_SIZE, len(data))
            )
        return cls(
            version=data[0],
            bitfield=data[1],
            sign=data[2],
            pubkey=data[3:35],
            chaincode=data[35:67],
            reserved=data[67:80],
        )

    @classmethod
    def parse(cls, data: bytes):
        if len(data) != PAYLOAD_SIZE:
            raise LengthError(
                "Payload should be %d bytes, got %d" % (PAYLOAD_SIZE, len(data))
            )
        return cls.read_from(BytesIO(data))

    def to_base58(self) -> str:
        return base58check.encode(self.serialize(), VERSION_TAG)

    @classmethod
    def from_base58(cls, s: str):
        data, tag = base58check.decode(s)
        if tag != VERSION_TAG:
            raise InvalidPaymentCode("Invalid version tag 0x%02x" % tag)
        return cls.parse(data)

    def __eq__(self, other):
        if not isinstance(other, PaymentCodePayload):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __hash__(self):
        return hash(self.serialize())

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, self.serialize().hex())
