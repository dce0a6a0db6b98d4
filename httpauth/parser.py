"""
Authorization header parsing for HTTP Basic authentication.

Responsibilities:
    - Split `Authorization: Basic <token>` into scheme and token
    - Decode the base64 token (standard alphabet, strict padding)
    - Read the payload as UTF-8, falling back to ISO-8859-1
    - Split the decoded text into exactly one username and one password
    - Format the `WWW-Authenticate` challenge value

Design notes:
    - Pure functions, no framework imports; the ASGI and WSGI middlewares
      share this module.
    - Each failure raises a distinct `AuthenticationError` subclass. Callers
      map all of them to the same 401 challenge.
    - The header must hold exactly two tokens separated by a single space and
      the payload exactly one colon. A password containing ':' is rejected.
"""

import base64
import binascii
from typing import Optional, Tuple

from .errors import BadEncoding, MalformedCredentials, MalformedHeader, MissingHeader

BASIC = "Basic"


def parse_authorization(value: Optional[str], scheme: str = BASIC) -> Tuple[str, str]:
    """
    Extract the (username, password) pair from an Authorization header value.

    Args:
        value (Optional[str]): Raw header value, None when the header is absent.
        scheme (str): Expected scheme token, compared case-sensitively.

    Returns:
        Tuple[str, str]: The username and password, verbatim.

    Raises:
        MissingHeader: Header absent or empty.
        MalformedHeader: Not exactly two tokens, or the scheme does not match.
        BadEncoding: Token is not valid standard base64 (alphabet or padding).
        MalformedCredentials: Decoded text has no colon or more than one.
    """
    if not value:
        raise MissingHeader("no Authorization header")

    parts = value.split(" ")
    if len(parts) != 2:
        raise MalformedHeader(f"expected 2 tokens, got {len(parts)}")
    if parts[0] != scheme:
        raise MalformedHeader(f"unexpected scheme {parts[0]!r}")

    # b64decode ignores surplus padding after a complete quantum
    if len(parts[1]) % 4:
        raise BadEncoding(f"token length {len(parts[1])} is not a multiple of 4")
    try:
        raw = base64.b64decode(parts[1], validate=True)
    except (binascii.Error, ValueError) as exc:
        raise BadEncoding(str(exc)) from exc
    try:
        decoded = raw.decode("utf-8")
    except UnicodeDecodeError:
        # Legacy clients send ISO-8859-1; every byte maps to one character.
        decoded = raw.decode("latin-1")

    creds = decoded.split(":")
    if len(creds) != 2:
        raise MalformedCredentials(f"expected 2 fields, got {len(creds)}")
    return creds[0], creds[1]


def challenge(scheme: str, realm: str) -> str:
    """Return the WWW-Authenticate value. The realm is not escaped."""
    return f'{scheme} realm="{realm}"'


def encode_credentials(username: str, password: str, scheme: str = BASIC) -> str:
    """
    Build an Authorization header value for the given pair.

    Used by clients and tests; `parse_authorization` returns the same pair.
    """
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"{scheme} {token}"
