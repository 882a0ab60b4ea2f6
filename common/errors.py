"""
Exceptions raised while talking to the sports-data API.

Every error carries a user-facing (Spanish) message in `args[0]`, so the
sections can show `str(err)` directly inside an alert.
"""


class SportsDataError(Exception):
    """Transport failure, non-2xx status or an undecodable body."""


class MissingFieldError(SportsDataError):
    """The response body lacks the expected top-level field."""


class NotFoundError(SportsDataError):
    """A single-record lookup returned no record."""
