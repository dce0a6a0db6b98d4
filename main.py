"""
Demo API module for httpauth.

Responsibilities:
    - Expose a public health endpoint
    - Mount a private sub-application behind HTTP Basic authentication

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - The realm and the verification predicate are injectable; by default they
      come from `httpauth.config.settings`.
    - The middleware wraps the mounted sub-app, so the rest of the app stays public.

Run:
    uvicorn main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel

from httpauth import basic, static_users
from httpauth.config import settings
from httpauth.middleware import AuthFunc


class Welcome(BaseModel):
    """Response body of the protected index."""
    realm: str
    message: str


def create_app(realm: Optional[str] = None, auth_func: Optional[AuthFunc] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        realm (Optional[str]): Realm of the protected mount. Defaults to settings.REALM.
        auth_func (Optional[AuthFunc]): Verification predicate. Defaults to a
            static user table built from settings.USERS.

    Returns:
        FastAPI: App with a public `/health` route and a protected `/private` mount.
    """
    realm = settings.REALM if realm is None else realm
    if auth_func is None:
        auth_func = static_users(settings.USERS)

    app = FastAPI(
        title="httpauth demo",
        description="HTTP Basic authentication middleware protecting a mounted sub-app",
        docs_url="/docs",
    )
    log = logging.getLogger("httpauth")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)
    log.info("Protecting /private with realm %r", realm)

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}

    private = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

    @private.get("/", response_model=Welcome)
    def private_index() -> Welcome:
        return Welcome(realm=realm, message="welcome")

    app.mount("/private", basic(realm, private, auth_func))
    return app


# `uvicorn main:app` and `from main import app` keep working.
app = create_app()
