class BaseDms3NsError(Exception):
    pass


class ValidationError(BaseDms3NsError):
    """Raised when something does not pass a validation check."""

