"""
httpauth package initializer.

Exposes the ASGI Basic authentication middleware and its factory. The WSGI
variant lives in `httpauth.wsgi`.
"""

from .middleware import BasicAuthMiddleware, basic
from .parser import challenge, encode_credentials, parse_authorization
from .verifiers import Verifier, static_users

__all__ = [
    "BasicAuthMiddleware",
    "basic",
    "challenge",
    "encode_credentials",
    "parse_authorization",
    "Verifier",
    "static_users",
]
