import hashlib
import hmac
from binascii import unhexlify
from unittest import TestCase

from paynym import mask
from paynym.errors import InvalidInputLength

SHARED_X = 81484465183900537849784047699646205603407853066414928303931254647391457569072
OUTPOINT = unhexlify(
    "40fa3fdc048a1d776997f71b72527205e9d2b80f7135a862b6b44ee87328c79502000000"
)
MASK = unhexlify(
    "0ada550f94e191b179bb57079caf2f79781b03de0da5863ac7eb517341160d7e"
    "358ca30a49985d20ef4d197cd550842d0828c6a862f1e9d78b3ee6ae2c162256"
)
CHAIN_CODE = unhexlify("00f5c9941949a966eb9150558149c5c556ddc210fef51dee6207da07635d5a62")


class MaskTest(TestCase):
    def test_shared_secret_key(self):
        self.assertEqual(mask.shared_secret_key(0), b"0")
        self.assertEqual(mask.shared_secret_key(1234), b"1234")
        self.assertEqual(mask.shared_secret_key(SHARED_X), str(SHARED_X).encode())

    def test_derive_mask(self):
        key = mask.shared_secret_key(SHARED_X)
        res = mask.derive_mask(key, OUTPOINT)
        self.assertEqual(res, MASK)
        self.assertEqual(res, hmac.new(key, OUTPOINT, hashlib.sha512).digest())
        # deterministic
        self.assertEqual(mask.derive_mask(key, OUTPOINT), res)

    def test_outpoint_length(self):
        key = mask.shared_secret_key(SHARED_X)
        for outpoint in [OUTPOINT[:-1], OUTPOINT + b"\x00", b""]:
            with self.assertRaises(InvalidInputLength):
                mask.derive_mask(key, outpoint)

    def test_mask_chain_code(self):
        pubkey, chaincode = mask.mask_chain_code(CHAIN_CODE, MASK)
        self.assertEqual(
            pubkey.hex(),
            "0a2f9c9b8da838d7922a07521de6eabc2ec6c1cef3509bd4a5ec8b74224b571c",
        )
        self.assertEqual(
            chaincode.hex(),
            "35796a9e50d1f44604dc4929541941e85ef504b89c04f439e9393ca94f4b7834",
        )

    def test_unmask(self):
        pubkey_mask, chaincode_mask = mask.split_mask(MASK)
        pubkey, chaincode = mask.mask_chain_code(CHAIN_CODE, MASK)
        self.assertEqual(mask.unmask(pubkey, pubkey_mask), CHAIN_CODE)
        self.assertEqual(mask.unmask(chaincode, chaincode_mask), CHAIN_CODE)

    def test_lengths(self):
        with self.assertRaises(InvalidInputLength):
            mask.split_mask(MASK[:-1])
        with self.assertRaises(InvalidInputLength):
            mask.xor_bytes(CHAIN_CODE[:-1], MASK[:32])
        with self.assertRaises(InvalidInputLength):
            mask.mask_chain_code(CHAIN_CODE + b"\x00", MASK)
