import hashlib
import random

import base58
import multihash
import pytest

from dms3ns.crypto.rsa import (
    create_new_key_pair,
)
from dms3ns.peer.id import (
    IDENTITY_MULTIHASH_CODE,
    MAX_INLINE_KEY_LENGTH,
    ID,
)

ALPHABETS = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def random_id_bytes(length=10):
    return "".join(random.choice(ALPHABETS) for _ in range(length)).encode()


def test_eq_impl_for_bytes():
    id_bytes = random_id_bytes()
    peer_id = ID(id_bytes)
    assert peer_id == id_bytes


def test_str_is_base58():
    id_bytes = random_id_bytes(5)
    expected = base58.b58encode(id_bytes).decode()

    assert str(ID(id_bytes)) == expected
    assert ID(id_bytes).to_base58() == expected


def test_eq_true():
    id_bytes = random_id_bytes()
    peer_id = ID(id_bytes)

    assert peer_id == base58.b58encode(id_bytes).decode()
    assert peer_id == id_bytes
    assert peer_id == ID(id_bytes)
    assert hash(peer_id) == hash(ID(id_bytes))


def test_eq_false():
    peer_id = ID(b"efgh")
    other = ID(b"abcd")

    assert peer_id != other


def test_id_from_base58():
    b58 = base58.b58encode(random_id_bytes()).decode()
    expected = ID(base58.b58decode(b58))
    actual = ID.from_base58(b58)

    assert actual == expected


def test_hex_round_trip(rsa_key_pair):
    peer_id = ID.from_pubkey(rsa_key_pair.public_key)

    assert peer_id.to_hex() == peer_id.to_bytes().hex()
    assert ID.from_hex(peer_id.to_hex()) == peer_id


@pytest.mark.parametrize("text", ["", "zz", "bad key", "00"])
def test_from_hex_rejects_non_multihash(text):
    with pytest.raises(ValueError):
        ID.from_hex(text)


def test_id_from_rsa_public_key_is_hashed(rsa_key_pair):
    public_key = rsa_key_pair.public_key

    key_bin = public_key.serialize()
    assert len(key_bin) > MAX_INLINE_KEY_LENGTH
    digest = hashlib.sha256(key_bin).digest()
    mh_bytes = multihash.encode(digest, "sha2-256")
    expected = ID(mh_bytes)

    actual = ID.from_pubkey(public_key)

    assert actual == expected
    assert actual.extract_public_key() is None


def test_id_from_public_key_default_rsa_size():
    key_pair = create_new_key_pair()
    peer_id = ID.from_pubkey(key_pair.public_key)

    assert multihash.decode(peer_id.to_bytes()).func == multihash.Func.sha2_256


@pytest.mark.parametrize("key_pair_fixture", ["ed25519_key_pair", "secp256k1_key_pair"])
def test_small_keys_are_inlined(request, key_pair_fixture):
    key_pair = request.getfixturevalue(key_pair_fixture)
    public_key = key_pair.public_key

    peer_id = ID.from_pubkey(public_key)
    mh = multihash.decode(peer_id.to_bytes())

    assert mh.func == IDENTITY_MULTIHASH_CODE
    assert mh.digest == public_key.serialize()
    assert peer_id.extract_public_key() == public_key


def test_extract_public_key_from_non_multihash():
    with pytest.raises(ValueError):
        ID(b"\xff").extract_public_key()


def test_only_base58_string_form():
    peer_id = ID(random_id_bytes())

    assert str(peer_id) == peer_id.to_base58()
    assert not hasattr(peer_id, "pretty")
    assert not hasattr(peer_id, "to_string")
