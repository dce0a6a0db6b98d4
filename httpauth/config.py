"""
Runtime configuration for the httpauth demo application
=======================================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
The middleware itself never reads configuration; it takes everything through
its constructor. Only `main.create_app` consumes these values.

Environment
-----------
- HTTPAUTH_REALM     : realm for the protected mount (default "private area")
- HTTPAUTH_USERS     : comma-separated "user:password" pairs (default "test:nothing");
                       entries without a colon are skipped
- HTTPAUTH_LOG_LEVEL : logging level name for basicConfig (default "INFO";
                       unknown names fall back to the default)
"""

import logging
import os
from typing import Dict


def _get_level(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    if isinstance(logging.getLevelName(raw), int):
        return raw
    return default


def _parse_users(raw: str) -> Dict[str, str]:
    users: Dict[str, str] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if ":" not in entry:
            continue
        name, password = entry.split(":", 1)
        if name:
            users[name] = password
    return users


class _Settings:
    REALM: str = os.getenv("HTTPAUTH_REALM", "private area")
    USERS: Dict[str, str] = _parse_users(os.getenv("HTTPAUTH_USERS", "test:nothing"))
    LOG_LEVEL: str = _get_level("HTTPAUTH_LOG_LEVEL", "INFO")


settings = _Settings()
