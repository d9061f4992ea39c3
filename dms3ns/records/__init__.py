"""Signed, versioned name records and their validation."""

from dms3ns.records.codec import (
    VALIDITY_TYPE_EOL,
    Record,
)
from dms3ns.records.entry import (
    create_record,
    embed_public_key,
    extract_public_key,
    get_eol,
    validate_record,
)
from dms3ns.records.exceptions import (
    ExpiredRecord,
    InvalidPath,
    KeyFormatError,
    MalformedRecord,
    NoUsableRecords,
    PublicKeyMismatch,
    PublicKeyNotFound,
    RecordError,
    SignatureInvalid,
    UnrecognizedValidityType,
)
from dms3ns.records.selection import (
    Ordering,
    compare,
    select_record,
)
from dms3ns.records.validator import (
    NAMESPACE,
    Dms3NsValidator,
    NamespacedValidator,
    Validator,
    record_key,
)

__all__ = [
    "NAMESPACE",
    "VALIDITY_TYPE_EOL",
    "Dms3NsValidator",
    "ExpiredRecord",
    "InvalidPath",
    "KeyFormatError",
    "MalformedRecord",
    "NamespacedValidator",
    "NoUsableRecords",
    "Ordering",
    "PublicKeyMismatch",
    "PublicKeyNotFound",
    "Record",
    "RecordError",
    "SignatureInvalid",
    "UnrecognizedValidityType",
    "Validator",
    "compare",
    "create_record",
    "embed_public_key",
    "extract_public_key",
    "get_eol",
    "record_key",
    "select_record",
    "validate_record",
]
