"""
Unit tests for the AES key factory.
"""

import base64
import os

import pytest
from cryptography.hazmat.primitives.ciphers import algorithms

from vaultkit.encryption import AesKey, CryptoKeyFactory, InvalidKeyLengthError


@pytest.fixture
def factory():
    return CryptoKeyFactory()


class TestFromBytes:
    """Tests for CryptoKeyFactory.from_bytes."""

    @pytest.mark.parametrize("bit_length", [32, 64, 512, 1024, 2048, 4096])
    def test_rejects_invalid_aes_key_length(self, factory, bit_length):
        """Test unsupported key lengths raise InvalidKeyLengthError."""
        with pytest.raises(InvalidKeyLengthError):
            factory.from_bytes(bytes(bit_length // 8))

    @pytest.mark.parametrize("bit_length", [128, 192, 256])
    def test_accepts_valid_aes_key_length(self, factory, bit_length):
        """Test AES-128/192/256 keys are accepted unchanged."""
        raw = os.urandom(bit_length // 8)

        key = factory.from_bytes(raw)

        assert isinstance(key, AesKey)
        assert key.size == bit_length
        assert len(key) == bit_length // 8
        assert key.get_bytes() == raw

    def test_rejects_empty_key(self, factory):
        with pytest.raises(InvalidKeyLengthError):
            factory.from_bytes(b"")

    @pytest.mark.parametrize("raw", ["a" * 16, 16, None, [0] * 16])
    def test_rejects_non_bytes_material(self, factory, raw):
        """Test only bytes-like key material is accepted."""
        with pytest.raises(TypeError):
            factory.from_bytes(raw)

    def test_accepts_bytes_like_material(self, factory):
        raw = os.urandom(24)

        assert factory.from_bytes(bytearray(raw)).get_bytes() == raw
        assert factory.from_bytes(memoryview(raw)).get_bytes() == raw

    def test_invalid_length_is_value_error(self, factory):
        with pytest.raises(ValueError):
            factory.from_bytes(bytes(17))


class TestFromBase64:
    """Tests for CryptoKeyFactory.from_base64."""

    def test_decodes_and_validates(self, factory):
        raw = os.urandom(32)

        key = factory.from_base64(base64.b64encode(raw).decode("ascii"))

        assert key.get_bytes() == raw
        assert key.to_base64() == base64.b64encode(raw).decode("ascii")

    def test_rejects_invalid_base64(self, factory):
        with pytest.raises(ValueError):
            factory.from_base64("not base64!!")

    def test_rejects_wrong_length_after_decoding(self, factory):
        with pytest.raises(InvalidKeyLengthError):
            factory.from_base64(base64.b64encode(bytes(8)).decode("ascii"))


class TestAesKey:
    """Tests for the AesKey handle."""

    @pytest.mark.parametrize("raw", [b"x", bytes(16)])
    def test_cannot_be_built_outside_factory(self, raw):
        """Test handles can only come from CryptoKeyFactory."""
        with pytest.raises(TypeError):
            AesKey(raw)

    def test_is_immutable(self, factory):
        key = factory.from_bytes(bytes(16))

        with pytest.raises(AttributeError):
            key._material = bytes(32)

    def test_repr_hides_material(self, factory):
        raw = b"\x01" * 16
        key = factory.from_bytes(raw)

        assert repr(key) == "AesKey(bits=128)"
        assert raw.hex() not in repr(key)

    def test_equality(self, factory):
        assert factory.from_bytes(bytes(16)) == factory.from_bytes(bytes(16))
        assert factory.from_bytes(bytes(16)) != factory.from_bytes(bytes(24))

    def test_algorithm_handoff(self, factory):
        key = factory.from_bytes(bytes(32))

        algorithm = key.algorithm()

        assert isinstance(algorithm, algorithms.AES)
        assert algorithm.key_size == 256
