import pytest

from dms3ns.peer.id import (
    ID,
)
from dms3ns.peer.keybook import (
    KeyBook,
    PeerStoreError,
)


def test_pubkey_not_found():
    with pytest.raises(PeerStoreError):
        KeyBook().pubkey(ID(b"peer"))


def test_add_and_get_pubkey(any_key_pair):
    keybook = KeyBook()
    peer_id = ID.from_pubkey(any_key_pair.public_key)

    keybook.add_pubkey(peer_id, any_key_pair.public_key)

    assert keybook.pubkey(peer_id) == any_key_pair.public_key
    assert keybook.peer_with_keys() == [peer_id]


def test_add_pubkey_mismatch(rsa_key_pair, other_rsa_key_pair):
    keybook = KeyBook()
    peer_id = ID.from_pubkey(rsa_key_pair.public_key)

    with pytest.raises(PeerStoreError):
        keybook.add_pubkey(peer_id, other_rsa_key_pair.public_key)
    assert keybook.peer_with_keys() == []


def test_clear_keydata(ed25519_key_pair):
    keybook = KeyBook()
    peer_id = ID.from_pubkey(ed25519_key_pair.public_key)
    keybook.add_pubkey(peer_id, ed25519_key_pair.public_key)

    keybook.clear_keydata(peer_id)
    keybook.clear_keydata(peer_id)

    with pytest.raises(PeerStoreError):
        keybook.pubkey(peer_id)


def test_peer_store_error_is_key_error():
    assert issubclass(PeerStoreError, KeyError)
