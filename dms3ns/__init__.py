"""Signed, mutable name records for the dms3 naming system."""

from importlib.metadata import version as __version

from dms3ns.crypto.keys import (
    KeyPair,
)
from dms3ns.crypto.ed25519 import (
    create_new_key_pair as create_new_ed25519_key_pair,
)
from dms3ns.peer.id import (
    ID,
)
from dms3ns.utils.logging import (
    setup_logging,
)

# Initialize logging configuration
setup_logging()


def generate_new_ed25519_identity() -> KeyPair:
    return create_new_ed25519_key_pair()


def generate_peer_id_from(key_pair: KeyPair) -> ID:
    public_key = key_pair.public_key
    return ID.from_pubkey(public_key)


__version__ = __version("dms3ns")
