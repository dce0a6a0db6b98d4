"""
Ready-made verification predicates.

The middleware accepts any `(username, password) -> bool` callable; this
module provides the common case of a fixed user table. Applications with a
real user store should write their own predicate against it.
"""

import hashlib
import hmac
from typing import Callable, Dict, Mapping

Verifier = Callable[[str, str], bool]  # (username, password) -> accepted


def hash_password(password: str) -> str:
    """
    Return a SHA256 hex digest of the given password.

    Note:
        Good enough for demo user tables. Real deployments should store
        salted hashes from a dedicated library (e.g. passlib[bcrypt]).
    """
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def static_users(users: Mapping[str, str]) -> Verifier:
    """
    Build a predicate over a fixed username → password table.

    Args:
        users (Mapping[str, str]): Stored passwords, plain text or SHA256 hex
            digests (see `hash_password`). Copied, later changes are ignored.

    Returns:
        Verifier: Accepts a pair when the user exists and the password, or its
        digest, matches the stored value. Comparisons are constant-time.
    """
    table: Dict[str, str] = dict(users)

    def verify(username: str, password: str) -> bool:
        stored = table.get(username)
        if stored is None:
            return False
        candidate = password.encode("utf-8")
        expected = stored.encode("utf-8")
        if hmac.compare_digest(candidate, expected):
            return True
        return hmac.compare_digest(hash_password(password).encode("ascii"), expected)

    return verify
