from __future__ import annotations

import logging
from typing import (
    TYPE_CHECKING,
)

from google.protobuf.message import (
    DecodeError,
)

from dms3ns.crypto.exceptions import (
    CryptographyError,
)
from dms3ns.peer.id import (
    ID,
)
from dms3ns.peer.keybook import (
    IKeyBook,
    PeerStoreError,
)
from dms3ns.records.codec import (
    Record,
)
from dms3ns.records.entry import (
    extract_public_key,
    validate_record,
)
from dms3ns.records.exceptions import (
    InvalidPath,
    KeyFormatError,
    NoUsableRecords,
    PublicKeyNotFound,
)
from dms3ns.records.selection import (
    select_record,
)
from dms3ns.records.utils import (
    split_key,
)

if TYPE_CHECKING:
    from dms3ns.crypto.keys import PublicKey

logger = logging.getLogger(__name__)

NAMESPACE = "dms3ns"


def record_key(peer_id: ID) -> str:
    """Return the record key under which ``peer_id`` publishes its record."""
    return f"/{NAMESPACE}/{peer_id.to_hex()}"


class Validator:
    """Base class for all validators"""

    def validate(self, key: str, value: bytes) -> None:
        raise NotImplementedError

    def select(self, key: str, values: list[bytes]) -> int:
        raise NotImplementedError


class NamespacedValidator(Validator):
    """
    Manages a collection of validators, each associated with a specific namespace.
    """

    def __init__(self, validators: dict[str, Validator]):
        self._validators = validators

    def validator_by_key(self, key: str) -> Validator | None:
        """
        Retrieve the validator responsible for the given key's namespace.

        Args:
            key (str): A namespaced key in the form "/namespace/value".

        Returns:
            Optional[Validator]: The matching validator, or None if not found.

        """
        try:
            ns, _ = split_key(key)
        except InvalidPath:
            return None
        return self._validators.get(ns)

    def validate(self, key: str, value: bytes) -> None:
        """
        Validate a key-value pair using the appropriate namespaced validator.

        Raises:
            InvalidPath: If no matching validator is found.
            RecordError: Propagates any error raised by the sub-validator.

        """
        validator = self.validator_by_key(key)
        if validator is None:
            raise InvalidPath("Invalid record keytype")
        validator.validate(key, value)

    def select(self, key: str, values: list[bytes]) -> int:
        """
        Choose the best value from a list using the namespaced validator.

        Returns:
            int: Index of the selected best value in the input list.

        Raises:
            NoUsableRecords: If the values list is empty.
            InvalidPath: If no matching validator is found.

        """
        if not values:
            raise NoUsableRecords("Can't select from empty value list")
        validator = self.validator_by_key(key)
        if validator is None:
            raise InvalidPath("Invalid record keytype")
        return validator.select(key, values)


class Dms3NsValidator(Validator):
    """
    Validator for records stored under ``/dms3ns/<hex peer ID>``.

    The public key a record is checked against comes, in order, from the
    record itself, from the peer ID when the key is inlined in it, and from
    ``keybook`` when one is given.
    """

    def __init__(self, keybook: IKeyBook | None = None) -> None:
        self.keybook = keybook

    def validate(self, key: str, value: bytes) -> None:
        """
        Raises:
            InvalidPath: If the key is not ``/dms3ns/<identifier>``.
            KeyFormatError: If the identifier is not a peer ID.
            MalformedRecord: If the value is not a record.
            PublicKeyNotFound: If no public key can be found for the peer ID.
            PublicKeyMismatch: If the embedded key does not match the peer ID.
            SignatureInvalid, UnrecognizedValidityType, ExpiredRecord:
                As raised by `validate_record`.

        """
        peer_id = self._peer_id_from_key(key)
        record = Record.unmarshal(value)
        public_key = self._get_public_key(peer_id, record)
        validate_record(public_key, record)

        logger.debug("dms3ns record validated: %s", key)

    def select(self, key: str, values: list[bytes]) -> int:
        """
        Select the best record by checking which has the highest sequence
        number and latest EOL.

        Records must be validated first: this fails if any of them does not
        parse, and signatures are not checked again.
        """
        records = [Record.unmarshal(value) for value in values]
        return select_record(records, values)

    def _peer_id_from_key(self, key: str) -> ID:
        ns, id_string = split_key(key)
        if ns != NAMESPACE:
            raise InvalidPath(f"namespace not '{NAMESPACE}'")
        if not id_string or "/" in id_string:
            raise InvalidPath("record key must have exactly one path segment")

        try:
            peer_id = ID.from_hex(id_string)
            # IDs that inline a key must inline a decodable one
            peer_id.extract_public_key()
        except (CryptographyError, DecodeError, ValueError) as e:
            logger.debug(
                "failed to parse dms3ns record key %s into peer ID", id_string
            )
            raise KeyFormatError(
                "record key could not be parsed into peer ID"
            ) from e

        # upper case or whitespace would give one ID many keys
        if peer_id.to_hex() != id_string:
            raise KeyFormatError("record key is not the canonical hex of a peer ID")
        return peer_id

    def _get_public_key(self, peer_id: ID, record: Record) -> PublicKey:
        public_key = extract_public_key(peer_id, record)
        if public_key is not None:
            return public_key

        if self.keybook is None:
            logger.debug(
                "public key with hash %s not found in record and no key book "
                "provided",
                peer_id,
            )
            raise PublicKeyNotFound("public key not found in key book")

        try:
            return self.keybook.pubkey(peer_id)
        except PeerStoreError as e:
            logger.debug("public key with hash %s not found in key book", peer_id)
            raise PublicKeyNotFound("public key not found in key book") from e
