from dms3ns.exceptions import (
    BaseDms3NsError,
)


class CryptographyError(BaseDms3NsError):
    pass


class MissingDeserializerError(CryptographyError):
    """
    Raise if the requested deserialization routine is missing for some type
    of cryptographic key.
    """
