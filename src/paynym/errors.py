class PaymentCodeError(Exception):
    """Base class for all payment code errors"""

    pass


class InvalidInputLength(PaymentCodeError, ValueError):
    pass


class LengthError(PaymentCodeError):
    pass


class InvalidKeyMaterial(PaymentCodeError):
    pass


class InvalidPaymentCode(PaymentCodeError):
    pass


class Base58Error(PaymentCodeError):
    pass


class EmptyError(Base58Error):
    pass


class AlphabetError(Base58Error):
    pass


class ChecksumError(Base58Error):
    pass
