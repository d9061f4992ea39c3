from __future__ import annotations

from dataclasses import (
    dataclass,
)

from google.protobuf.message import (
    DecodeError,
)

from dms3ns.records.exceptions import (
    MalformedRecord,
)
from dms3ns.records.pb.dms3ns_pb2 import (
    Dms3NsEntry,
)

VALIDITY_TYPE_EOL = Dms3NsEntry.ValidityType.EOL

REQUIRED_FIELDS = ("value", "signature")


def validity_type_name(validity_type: int) -> str:
    """
    Textual name of a validity type, as it appears in the signed bytes.

    Values this version does not know are rendered as their decimal number.
    """
    try:
        return Dms3NsEntry.ValidityType.Name(validity_type)
    except ValueError:
        return str(validity_type)


@dataclass(frozen=True)
class Record:
    """
    A signed, versioned pointer from an ID to ``value``.

    Records are immutable: any change to a signed field invalidates
    ``signature``. ``public_key`` is ``None`` when no key is embedded, which
    is distinct from an embedded empty byte string.
    """

    value: bytes
    validity_type: int
    validity: bytes
    sequence: int
    signature: bytes
    public_key: bytes | None = None

    def to_protobuf(self) -> Dms3NsEntry:
        entry = Dms3NsEntry(
            value=self.value,
            signature=self.signature,
            validityType=self.validity_type,
            validity=self.validity,
            sequence=self.sequence,
        )
        if self.public_key is not None:
            entry.pubKey = self.public_key
        return entry

    @classmethod
    def from_protobuf(cls, entry: Dms3NsEntry) -> Record:
        return cls(
            value=entry.value,
            validity_type=entry.validityType,
            validity=entry.validity,
            sequence=entry.sequence,
            signature=entry.signature,
            public_key=entry.pubKey if entry.HasField("pubKey") else None,
        )

    def marshal(self) -> bytes:
        """
        Serialize the record to its wire form.

        :raise MalformedRecord: if a field is out of range for the wire format
        """
        try:
            return self.to_protobuf().SerializeToString()
        except (TypeError, ValueError) as e:
            raise MalformedRecord(f"record could not be marshalled: {e}") from e

    @classmethod
    def unmarshal(cls, data: bytes) -> Record:
        """
        Deserialize a record from its wire form.

        Unknown validity types are kept as-is; rejecting them is up to
        validation.

        :raise MalformedRecord: if ``data`` is not a valid encoding or lacks
            a value or a signature
        """
        entry = Dms3NsEntry()
        try:
            entry.ParseFromString(data)
        except DecodeError as e:
            raise MalformedRecord(f"record could not be unmarshalled: {e}") from e
        for field in REQUIRED_FIELDS:
            if not entry.HasField(field):
                raise MalformedRecord(f"record is missing required field {field}")
        return cls.from_protobuf(entry)

    def __repr__(self) -> str:
        return (
            f"<Record value={self.value!r} "
            f"validity_type={validity_type_name(self.validity_type)} "
            f"validity={self.validity!r} sequence={self.sequence} "
            f"embedded_key={self.public_key is not None}>"
        )
