from dms3ns.exceptions import (
    ValidationError,
)


class RecordError(ValidationError):
    """Base class for every record validation and selection failure."""


class MalformedRecord(RecordError):
    """The record could not be decoded, or its validity could not be parsed."""


class UnrecognizedValidityType(RecordError):
    """The record's validity type is not understood by this version."""


class SignatureInvalid(RecordError):
    """The record signature failed verification."""


class ExpiredRecord(RecordError):
    """The record's end of life is at or before the current time."""


class InvalidPath(RecordError):
    """The record key is not of the form ``/<namespace>/<identifier>``."""


class KeyFormatError(RecordError):
    """The identifier segment of the record key could not be parsed into an ID."""


class PublicKeyNotFound(RecordError):
    """No public key could be found for the record's identifier."""


class PublicKeyMismatch(RecordError):
    """The public key embedded in the record does not match the identifier."""


class NoUsableRecords(RecordError):
    """Selection was asked to choose from an empty set of records."""
