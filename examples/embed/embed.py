import argparse
from datetime import (
    datetime,
    timedelta,
    timezone,
)
import logging

from dms3ns.crypto.ed25519 import (
    create_new_key_pair as create_ed25519_key_pair,
)
from dms3ns.crypto.keys import (
    PrivateKey,
    PublicKey,
)
from dms3ns.crypto.rsa import (
    create_new_key_pair as create_rsa_key_pair,
)
from dms3ns.crypto.secp256k1 import (
    create_new_key_pair as create_secp256k1_key_pair,
)
from dms3ns.peer.id import (
    ID,
)
from dms3ns.records import (
    Dms3NsValidator,
    Record,
    create_record,
    embed_public_key,
    record_key,
)

logging.basicConfig(level=logging.WARNING)

logger = logging.getLogger(__name__)

KEY_PAIR_FACTORIES = {
    "ed25519": create_ed25519_key_pair,
    "rsa": create_rsa_key_pair,
    "secp256k1": create_secp256k1_key_pair,
}

RECORD_LIFETIME = timedelta(hours=48)


def create_entry_with_embed(
    dms3fs_path: str, public_key: PublicKey, private_key: PrivateKey
) -> Record:
    """
    Create a record for ``dms3fs_path`` valid for 48 hours and embed
    ``public_key`` in it.

    Ed25519 keys are recoverable from the peer ID, so for them nothing is
    actually embedded.
    """
    eol = datetime.now(timezone.utc) + RECORD_LIFETIME
    record = create_record(private_key, dms3fs_path.encode(), 1, eol)
    return embed_public_key(public_key, record)


def main() -> None:
    description = """
    Create a signed dms3ns record, embed its public key when the peer ID
    cannot carry it, and validate the result the way a DHT node would.
    """
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--key-type",
        choices=sorted(KEY_PAIR_FACTORIES),
        default="rsa",
        help="type of key to sign the record with",
    )
    parser.add_argument(
        "--path",
        default="/dms3fs/Qme1knMqwt1hKZbc1BmQFmnm9f36nyQGwXxPGVpVJ9rMK5",
        help="value the record points to",
    )
    args = parser.parse_args()

    key_pair = KEY_PAIR_FACTORIES[args.key_type]()
    peer_id = ID.from_pubkey(key_pair.public_key)
    key = record_key(peer_id)

    record = create_entry_with_embed(
        args.path, key_pair.public_key, key_pair.private_key
    )
    value = record.marshal()

    Dms3NsValidator().validate(key, value)
    logger.debug("record for %s validated", peer_id)

    print(f"Peer ID:      {peer_id}")
    print(f"Record key:   {key}")
    print(f"Record:       {record!r}")
    print(f"Embedded key: {record.public_key is not None}")
    print(f"Encoded:      {value.hex()}")


if __name__ == "__main__":
    main()
