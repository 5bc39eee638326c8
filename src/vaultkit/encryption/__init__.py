"""
Vaultkit Encryption

Key material validation for symmetric (AES) encryption.
"""

from vaultkit.encryption.key import (
    AES_KEY_SIZES,
    AesKey,
    CryptoKeyFactory,
    InvalidKeyLengthError,
)

__all__ = [
    'AES_KEY_SIZES',
    'AesKey',
    'CryptoKeyFactory',
    'InvalidKeyLengthError',
]
