class DealServiceError(Exception):
    """Base class for deal service failures."""


class InvalidArgument(DealServiceError, ValueError):
    """Caller supplied a value the store cannot accept (e.g. a blank key)."""


class Unavailable(DealServiceError):
    """The deal service could not be reached or answered with an error."""
