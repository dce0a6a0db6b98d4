"""
ASGI middleware for HTTP Basic authentication.

Responsibilities:
    - Read the Authorization header of every http request (and websocket handshake)
    - Delegate the accept/reject decision to an injected predicate
    - Forward accepted requests untouched, answer everything else with a 401 challenge

Architecture:
    - The middleware is itself an ASGI app, so it can wrap a FastAPI app, a
      mounted sub-app, a single route, or another middleware.
    - Configuration (scheme, realm, app, predicate) is set in __init__ and
      only read afterwards; one instance serves concurrent requests without locks.
    - The predicate is a plain callable `(username, password) -> bool`. A
      coroutine function is awaited; a plain function runs in the threadpool
      so a blocking user lookup does not stall the event loop.

Usage:
    app.mount("/private", basic("private area", private_app, check_user))
    app.add_middleware(BasicAuthMiddleware, realm="admin", auth_func=check_user)
"""

import inspect
import logging
from typing import Awaitable, Callable, Union

from starlette import status
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import Headers
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.websockets import WebSocketClose

from .errors import AuthenticationError, RejectedCredentials
from .parser import BASIC, challenge, parse_authorization

log = logging.getLogger("httpauth")

AuthFunc = Callable[[str, str], Union[bool, Awaitable[bool]]]


class BasicAuthMiddleware:
    """
    Wrap an ASGI app behind HTTP Basic authentication.

    Args:
        app (ASGIApp): Downstream app, called only after successful authentication.
        realm (str): Realm echoed verbatim in the WWW-Authenticate challenge.
        auth_func (AuthFunc): Verification predicate. Must be safe to call
            concurrently; the middleware keeps no state between calls.

    Notes:
        - No validation is done on the arguments.
        - Lifespan and other non-request scopes pass straight through.
        - Rejected websocket handshakes get the same 401 challenge when the
          server supports the `websocket.http.response` extension, otherwise
          they are closed with 1008 before accept.
    """

    def __init__(self, app: ASGIApp, realm: str, auth_func: AuthFunc):
        self.app = app
        self.method = BASIC
        self.realm = realm
        self.auth_func = auth_func
        self._async_auth = inspect.iscoroutinefunction(auth_func) or inspect.iscoroutinefunction(
            getattr(auth_func, "__call__", None)
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        try:
            await self.authenticate(Headers(scope=scope))
        except AuthenticationError as exc:
            # The reason stays in the server log; the client only sees the challenge.
            log.debug("basic auth rejected for %s: %s", scope.get("path", ""), type(exc).__name__)
            await self.fail(scope, receive, send)
            return

        await self.app(scope, receive, send)

    async def authenticate(self, headers: Headers) -> None:
        """
        Run the header through the parser and the predicate.

        Raises:
            AuthenticationError: Any parse failure, or RejectedCredentials
                when the predicate returns a falsy value.
        """
        username, password = parse_authorization(headers.get("authorization"), self.method)
        if self._async_auth:
            ok = await self.auth_func(username, password)
        else:
            ok = await run_in_threadpool(self.auth_func, username, password)
        if inspect.isawaitable(ok):
            ok = await ok
        if not ok:
            raise RejectedCredentials("predicate refused credentials")

    async def fail(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "websocket" and "websocket.http.response" not in (scope.get("extensions") or {}):
            # Closing before accept makes the server deny the handshake.
            await WebSocketClose(code=status.WS_1008_POLICY_VIOLATION)(scope, receive, send)
            return
        response = Response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": challenge(self.method, self.realm)},
        )
        await response(scope, receive, send)


def basic(realm: str, on_success: ASGIApp, auth_func: AuthFunc) -> BasicAuthMiddleware:
    """
    Protect `on_success` with Basic authentication.

    Clients that do not authenticate get a 401 naming `realm`. `auth_func` is
    called with the user name and password; when it returns True the request
    reaches `on_success` unchanged.
    """
    return BasicAuthMiddleware(on_success, realm=realm, auth_func=auth_func)
