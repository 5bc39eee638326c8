"""
AES Key Factory

Validates raw key material before it is handed to a symmetric cipher.
Only 128, 192 and 256 bit keys are accepted.
"""
import base64
import binascii
import logging

from cryptography.hazmat.primitives.ciphers import algorithms

logger = logging.getLogger(__name__)

AES_KEY_SIZES = frozenset({128, 192, 256})

_FACTORY_TOKEN = object()


class InvalidKeyLengthError(ValueError):
    """Raised when key material does not have a supported AES length."""
    pass


class AesKey:
    """
    Opaque handle over validated AES key bytes.

    Instances are produced by CryptoKeyFactory only. The key material is
    never included in repr() output.
    """

    __slots__ = ("_material",)

    def __init__(self, material: bytes, _token: object = None):
        if _token is not _FACTORY_TOKEN:
            raise TypeError("AesKey instances are created by CryptoKeyFactory")
        object.__setattr__(self, "_material", bytes(material))

    def __setattr__(self, name, value):
        raise AttributeError("AesKey is immutable")

    def __delattr__(self, name):
        raise AttributeError("AesKey is immutable")

    def __len__(self) -> int:
        return len(self._material)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AesKey):
            return NotImplemented
        return self._material == other._material

    def __hash__(self) -> int:
        return hash(self._material)

    def __repr__(self) -> str:
        return f"AesKey(bits={self.size})"

    @property
    def size(self) -> int:
        """Key size in bits."""
        return len(self._material) * 8

    def get_bytes(self) -> bytes:
        """Return the raw key bytes."""
        return self._material

    def to_base64(self) -> str:
        return base64.b64encode(self._material).decode("ascii")

    def algorithm(self) -> algorithms.AES:
        """Hand the key to the cryptography AES algorithm for cipher construction."""
        return algorithms.AES(self._material)


class CryptoKeyFactory:
    """
    Builds AesKey handles from raw or base64 encoded key material.

    Example:
        >>> factory = CryptoKeyFactory()
        >>> key = factory.from_bytes(os.urandom(32))
        >>> key.size
        256
    """

    def from_bytes(self, raw: bytes) -> AesKey:
        """
        Validate raw key bytes and wrap them in an AesKey.

        Args:
            raw: Key material. Used unchanged (no padding or truncation).

        Returns:
            AesKey wrapping the bytes

        Raises:
            TypeError: If raw is not bytes-like
            InvalidKeyLengthError: If len(raw) * 8 is not 128, 192 or 256
        """
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise TypeError(f"Key material must be bytes, got {type(raw).__name__}")
        raw = bytes(raw)
        bit_length = len(raw) * 8
        if bit_length not in AES_KEY_SIZES:
            raise InvalidKeyLengthError(
                f"Invalid AES key length: {bit_length} bits "
                f"(expected one of {sorted(AES_KEY_SIZES)})"
            )
        return AesKey(raw, _FACTORY_TOKEN)

    def from_base64(self, encoded: str) -> AesKey:
        """
        Decode base64 key material and validate it.

        Raises:
            ValueError: If the text is not valid base64
            InvalidKeyLengthError: If the decoded key has an unsupported length
        """
        try:
            raw = base64.b64decode(encoded, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Key material is not valid base64: {e}") from e
        return self.from_bytes(raw)
