"""
Bearer tokens for the fixture application's filter endpoint.

The sign-in view issues an HS256 token that the browser sends as
``Authorization: Bearer <token>`` with every ``/filter`` request.
Verification mirrors what a real API would do: signature, expiry and
required claims.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Any

import jwt
from flask import Response, current_app, g, jsonify, request

REQUIRED_TOKEN_CLAIMS = ["username", "iat", "exp"]


def create_token(username: str) -> str:
    """
    Create a signed token for ``username``.

    Raises:
        ValueError: If ``username`` is blank.
    """
    if not isinstance(username, str) or not username.strip():
        raise ValueError("username must be a non-empty string")

    now = datetime.now(timezone.utc)
    expires_at = now + timedelta(hours=int(current_app.config["JWT_EXPIRY_HOURS"]))
    payload: dict[str, Any] = {
        "username": username,
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(
        payload,
        current_app.config["SECRET_KEY"],
        algorithm=current_app.config["JWT_ALGORITHM"],
    )


def verify_token(token: str) -> dict[str, Any] | None:
    """Decode and validate a token, returning the payload or None."""
    try:
        decoded = jwt.decode(
            token,
            current_app.config["SECRET_KEY"],
            algorithms=[current_app.config["JWT_ALGORITHM"]],
            options={"require": REQUIRED_TOKEN_CLAIMS},
        )
    except jwt.InvalidTokenError:
        return None

    username = decoded.get("username")
    if not isinstance(username, str) or not username.strip():
        return None
    return decoded


def require_bearer(view_func: Callable[..., tuple[Response, int] | Response]):
    """
    Decorator that enforces Bearer-token authentication on API endpoints.

    On success the username is stored on ``g.username``.
    """

    @wraps(view_func)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not token:
            return jsonify({"error": "Missing or invalid Authorization header"}), 401

        payload = verify_token(token.strip())
        if payload is None:
            return jsonify({"error": "Invalid or expired token"}), 401

        g.username = payload["username"]
        return view_func(*args, **kwargs)

    return wrapper
