import pytest

from dms3ns.crypto.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
    create_new_key_pair,
)
from dms3ns.crypto.keys import (
    KeyType,
)
from dms3ns.crypto.serialization import (
    deserialize_private_key,
    deserialize_public_key,
)


def test_public_key_serialize_deserialize_round_trip():
    key_pair = create_new_key_pair()
    public_key = key_pair.public_key

    public_key_bytes = public_key.serialize()
    another_public_key = deserialize_public_key(public_key_bytes)

    assert public_key == another_public_key
    assert isinstance(another_public_key, Ed25519PublicKey)


def test_private_key_serialize_deserialize_round_trip():
    key_pair = create_new_key_pair()
    private_key = key_pair.private_key

    private_key_bytes = private_key.serialize()
    another_private_key = deserialize_private_key(private_key_bytes)

    assert private_key == another_private_key
    assert isinstance(another_private_key, Ed25519PrivateKey)


def test_sign_and_verify():
    key_pair = create_new_key_pair()
    data = b"test_data_for_signing"

    signature = key_pair.private_key.sign(data)

    assert len(signature) == 64
    assert key_pair.public_key.verify(data, signature)
    assert not key_pair.public_key.verify(b"wrong_data", signature)
    assert not key_pair.public_key.verify(data, b"0" * 64)


def test_verify_rejects_short_signature():
    key_pair = create_new_key_pair()

    assert not key_pair.public_key.verify(b"data", b"short")


def test_seeded_key_pair_is_deterministic():
    seed = b"\x01" * 32

    first = create_new_key_pair(seed)
    second = create_new_key_pair(seed)

    assert first.private_key == second.private_key
    assert first.public_key == second.public_key
    assert first.public_key.get_type() == KeyType.Ed25519


def test_serialized_public_key_size():
    # 2 bytes of key type, 2 bytes of length prefix, 32 bytes of key
    assert len(create_new_key_pair().public_key.serialize()) == 36


@pytest.mark.parametrize("key_bytes", [b"", b"\x00" * 31])
def test_from_bytes_rejects_bad_length(key_bytes):
    with pytest.raises(ValueError):
        Ed25519PublicKey.from_bytes(key_bytes)
