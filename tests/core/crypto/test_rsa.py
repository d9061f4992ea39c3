import pytest

from dms3ns.crypto.exceptions import (
    CryptographyError,
)
from dms3ns.crypto.rsa import (
    MAX_RSA_KEY_SIZE,
    RSAPrivateKey,
    RSAPublicKey,
    validate_rsa_key_size,
)
from dms3ns.crypto.serialization import (
    deserialize_private_key,
    deserialize_public_key,
)


def test_validate_rsa_key_size():
    # Test valid key size
    key = RSAPrivateKey.new(2048)
    validate_rsa_key_size(key.impl)

    # Test key size too large
    with pytest.raises(
        CryptographyError, match=f".*exceeds maximum allowed size {MAX_RSA_KEY_SIZE}"
    ):
        RSAPrivateKey.new(MAX_RSA_KEY_SIZE + 1)

    # Test negative key size (this would be caught when creating the key)
    with pytest.raises(CryptographyError, match="RSA key size must be positive"):
        RSAPrivateKey.new(-1)

    # Test zero key size
    with pytest.raises(CryptographyError, match="RSA key size must be positive"):
        RSAPrivateKey.new(0)


def test_sign_and_verify(rsa_key_pair, other_rsa_key_pair):
    data = b"value" + b"2030-01-01T00:00:00.000000000Z" + b"EOL"

    signature = rsa_key_pair.private_key.sign(data)

    assert rsa_key_pair.public_key.verify(data, signature)
    assert not rsa_key_pair.public_key.verify(data + b"x", signature)
    assert not other_rsa_key_pair.public_key.verify(data, signature)
    assert not rsa_key_pair.public_key.verify(data, b"garbage")


def test_public_key_round_trip(rsa_key_pair):
    public_key = deserialize_public_key(rsa_key_pair.public_key.serialize())

    assert isinstance(public_key, RSAPublicKey)
    assert public_key == rsa_key_pair.public_key


def test_private_key_round_trip(rsa_key_pair):
    private_key = deserialize_private_key(rsa_key_pair.private_key.serialize())

    assert private_key == rsa_key_pair.private_key


def test_public_key_from_private_key_bytes(rsa_key_pair):
    with pytest.raises(CryptographyError, match="expected an RSA public key"):
        RSAPublicKey.from_bytes(rsa_key_pair.private_key.to_bytes())
