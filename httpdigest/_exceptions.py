"""Exceptions raised for invalid authentication arguments."""


class AuthError(ValueError):
    """Base class for all errors raised by httpdigest."""

    pass


class InvalidAuthArgumentError(AuthError):
    """Raised when a caller passes an invalid combination of auth parameters.

    Malformed header values coming from the network never raise; they are
    reported through the logger and a ``None`` result instead.
    """

    pass
