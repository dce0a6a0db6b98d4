"""
Authentication failure kinds.

Every kind maps to the same 401 challenge on the wire. The classes only exist
so the parser can say what went wrong to the server log and to tests.
"""


class AuthenticationError(Exception):
    """Base class for all Basic authentication failures."""


class MissingHeader(AuthenticationError):
    """The Authorization header is absent or empty."""


class MalformedHeader(AuthenticationError):
    """The header is not `<scheme> <token>` or names another scheme."""


class BadEncoding(AuthenticationError):
    """The token is not standard base64 (bad character or bad padding)."""


class MalformedCredentials(AuthenticationError):
    """The decoded payload is not exactly `username:password`."""


class RejectedCredentials(AuthenticationError):
    """The verification predicate refused the pair."""
