"""
WSGI flavour of the Basic authentication middleware.

Same decision pipeline as `httpauth.middleware`, for synchronous hosts
(Flask, gunicorn sync workers). The predicate must be a plain function.
"""

import logging
from typing import Any, Callable, Dict, Iterable

from .errors import AuthenticationError, RejectedCredentials
from .parser import BASIC, challenge, parse_authorization

log = logging.getLogger("httpauth")

WSGIApp = Callable[[Dict[str, Any], Callable[..., Any]], Iterable[bytes]]


class BasicAuthWSGIMiddleware:
    """
    Wrap a WSGI app behind HTTP Basic authentication.

    Args:
        app (WSGIApp): Downstream app, called only after successful authentication.
        realm (str): Realm echoed verbatim in the WWW-Authenticate challenge.
        auth_func (Callable[[str, str], bool]): Verification predicate. Must be
            safe to call from several worker threads at once.

    Notes:
        - No validation is done on the arguments.
        - A rejection answers 401 with an empty body; the wrapped app never runs.
    """

    def __init__(self, app: WSGIApp, realm: str, auth_func: Callable[[str, str], bool]):
        self.app = app
        self.method = BASIC
        self.realm = realm
        self.auth_func = auth_func

    def __call__(self, environ: Dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        """Authenticate from `HTTP_AUTHORIZATION`, then forward or challenge."""
        try:
            username, password = parse_authorization(environ.get("HTTP_AUTHORIZATION"), self.method)
            if not self.auth_func(username, password):
                raise RejectedCredentials("predicate refused credentials")
        except AuthenticationError as exc:
            log.debug("basic auth rejected for %s: %s", environ.get("PATH_INFO", ""), type(exc).__name__)
            return self.fail(start_response)
        return self.app(environ, start_response)

    def fail(self, start_response: Callable[..., Any]) -> Iterable[bytes]:
        start_response(
            "401 Unauthorized",
            [("WWW-Authenticate", challenge(self.method, self.realm)), ("Content-Length", "0")],
        )
        return []


def basic(realm: str, on_success: WSGIApp, auth_func: Callable[[str, str], bool]) -> BasicAuthWSGIMiddleware:
    """WSGI counterpart of `httpauth.basic`."""
    return BasicAuthWSGIMiddleware(on_success, realm=realm, auth_func=auth_func)
