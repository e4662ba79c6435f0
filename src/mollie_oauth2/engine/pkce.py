"""PKCE (RFC 7636) verifier and challenge helpers."""

from __future__ import annotations

import base64
import hashlib
import secrets

METHOD_S256 = "S256"
METHOD_PLAIN = "plain"

SUPPORTED_METHODS = (METHOD_S256, METHOD_PLAIN)

VERIFIER_LENGTH = 64


def generate_code_verifier(length: int = VERIFIER_LENGTH) -> str:
    """Random URL-safe verifier of exactly ``length`` characters."""
    return secrets.token_urlsafe(length)[:length]


def code_challenge(verifier: str, method: str) -> str:
    if method == METHOD_S256:
        digest = hashlib.sha256(verifier.encode("ascii")).digest()
        return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
    if method == METHOD_PLAIN:
        return verifier
    raise ValueError(f"Unknown PKCE method {method!r}; expected one of {SUPPORTED_METHODS}")


__all__ = [
    "METHOD_PLAIN",
    "METHOD_S256",
    "SUPPORTED_METHODS",
    "code_challenge",
    "generate_code_verifier",
]
