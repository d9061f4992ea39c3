"""
Creation and validation of individual records.

A record's signature covers ``value || validity || name(validity_type)``
with no framing between the parts. Every implementation must reproduce
these bytes exactly or existing signatures stop verifying.
"""

from __future__ import annotations

from dataclasses import (
    replace,
)
from datetime import (
    datetime,
)
from typing import (
    TYPE_CHECKING,
)

from google.protobuf.message import (
    DecodeError,
)

from dms3ns.crypto.exceptions import (
    CryptographyError,
)
from dms3ns.crypto.serialization import (
    deserialize_public_key,
)
from dms3ns.peer.id import (
    ID,
)
from dms3ns.records.codec import (
    VALIDITY_TYPE_EOL,
    Record,
    validity_type_name,
)
from dms3ns.records.exceptions import (
    ExpiredRecord,
    MalformedRecord,
    PublicKeyMismatch,
    SignatureInvalid,
    UnrecognizedValidityType,
)
from dms3ns.records.timestamp import (
    format_rfc3339,
    now_ns,
    parse_rfc3339,
)

if TYPE_CHECKING:
    from dms3ns.crypto.keys import PrivateKey, PublicKey

MAX_SEQUENCE = 2**64 - 1


def data_for_sig(record: Record) -> bytes:
    """Return the exact bytes a record's signature covers."""
    return b"".join(
        [
            record.value,
            record.validity,
            validity_type_name(record.validity_type).encode("ascii"),
        ]
    )


def create_record(
    private_key: PrivateKey, value: bytes, sequence: int, eol: datetime
) -> Record:
    """
    Create a new record pointing at ``value`` and sign it with ``private_key``.

    The record is valid until ``eol``. No public key is embedded; use
    :func:`embed_public_key` for that.
    """
    if not 0 <= sequence <= MAX_SEQUENCE:
        raise ValueError(f"sequence {sequence} is not an unsigned 64-bit integer")

    unsigned = Record(
        value=value,
        validity_type=VALIDITY_TYPE_EOL,
        validity=format_rfc3339(eol).encode("ascii"),
        sequence=sequence,
        signature=b"",
    )
    return replace(unsigned, signature=private_key.sign(data_for_sig(unsigned)))


def get_eol(record: Record) -> int:
    """
    Return the end of life of ``record`` in nanoseconds since the Unix epoch.

    :raise UnrecognizedValidityType: if the validity type is not EOL
    :raise MalformedRecord: if the validity cannot be parsed
    """
    if record.validity_type != VALIDITY_TYPE_EOL:
        raise UnrecognizedValidityType(
            f"unrecognized validity type {validity_type_name(record.validity_type)}"
        )
    return parse_validity(record)


def parse_validity(record: Record) -> int:
    """
    Parse the validity of ``record`` as a timestamp, whatever its type.

    :raise MalformedRecord: if the validity cannot be parsed
    """
    try:
        return parse_rfc3339(record.validity)
    except ValueError as e:
        raise MalformedRecord(f"invalid validity timestamp: {e}") from e


def validate_record(public_key: PublicKey, record: Record) -> None:
    """
    Check the signature of ``record`` against ``public_key``, then its expiry.

    :raise SignatureInvalid: if the signature does not verify
    :raise UnrecognizedValidityType: if the validity type is not EOL
    :raise MalformedRecord: if the validity cannot be parsed
    :raise ExpiredRecord: if the record's end of life has passed
    """
    try:
        ok = public_key.verify(data_for_sig(record), record.signature)
    except (CryptographyError, TypeError, ValueError) as e:
        raise SignatureInvalid(f"record signature verification failed: {e}") from e
    if not ok:
        raise SignatureInvalid("record signature verification failed")

    eol = get_eol(record)
    if eol <= now_ns():
        raise ExpiredRecord(f"record expired at {record.validity.decode()}")


def embed_public_key(public_key: PublicKey, record: Record) -> Record:
    """
    Return ``record`` with ``public_key`` embedded in it.

    Keys that can be recovered from their ID (e.g. Ed25519) are not embedded
    and ``record`` is returned unchanged. Some nodes (e.g. DHT servers) may
    reject records whose key they cannot find, so embedding is recommended
    for every other key type.
    """
    peer_id = ID.from_pubkey(public_key)
    if peer_id.extract_public_key() is not None:
        return record

    return replace(record, public_key=public_key.serialize())


def extract_public_key(peer_id: ID, record: Record) -> PublicKey | None:
    """
    Find the public key matching ``peer_id``, from the record or from the ID.

    Returns ``None`` when no key can be determined and nothing is malformed.

    :raise MalformedRecord: if the embedded key cannot be decoded
    :raise PublicKeyMismatch: if the embedded key does not hash to ``peer_id``
    """
    if record.public_key is not None:
        try:
            public_key = deserialize_public_key(record.public_key)
        except (CryptographyError, DecodeError, ValueError) as e:
            raise MalformedRecord(f"unmarshaling pubkey in record: {e}") from e

        if ID.from_pubkey(public_key) != peer_id:
            raise PublicKeyMismatch(
                "public key in record did not match expected pubkey"
            )
        return public_key

    try:
        return peer_id.extract_public_key()
    except (CryptographyError, DecodeError, ValueError) as e:
        raise MalformedRecord(f"could not extract pubkey from peer ID: {e}") from e
