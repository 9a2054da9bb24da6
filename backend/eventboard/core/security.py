# eventboard/core/security.py
"""
Security module for authentication.
Handles password hashing and JWT access token issuance/verification.
"""
import datetime as dt
import logging

import jwt  # PyJWT
from passlib.context import CryptContext

from eventboard.core.errors import (
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)

logger = logging.getLogger("uvicorn.error")

# Password hashing context
# Argon2 is a modern, salted, adaptive password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)
ACCESS_TOKEN_LIFETIME = dt.timedelta(hours=1)  # Fixed policy: tokens live one hour


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Returns:
        True if password matches, False otherwise (including unparseable hashes)
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # Stored value is not a hash this context recognises
        return False


def dummy_verify() -> None:
    """Spend one verification's worth of work when there is no hash to check."""
    pwd_context.dummy_verify()


class TokenManager:
    """
    Issues and verifies signed, time-limited bearer tokens.

    The signing secret is handed in once at startup and never changes; the
    instance is shared read-only by every request.

    Token payload:
        - sub: Subject (user ID, as a string)
        - iat: Issued at timestamp
        - exp: Expiration timestamp (iat + lifetime)
    """

    def __init__(self, secret: str, lifetime: dt.timedelta = ACCESS_TOKEN_LIFETIME):
        self._secret = secret
        self.lifetime = lifetime

    def issue(self, user_id: int, now: dt.datetime | None = None) -> str:
        now = now or dt.datetime.now(dt.timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALG)

    def verify(self, token: str) -> int:
        """
        Decode and validate a token, returning the user id it was issued for.

        Raises:
            TokenExpiredError: past the exp claim
            InvalidSignatureError: signature or signing algorithm mismatch
            MalformedTokenError: the token or its claims cannot be decoded
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALG],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError("token has expired") from exc
        except (jwt.InvalidSignatureError, jwt.InvalidAlgorithmError) as exc:
            raise InvalidSignatureError("token signature is invalid") from exc
        except jwt.InvalidTokenError as exc:
            raise MalformedTokenError(f"token could not be decoded: {exc}") from exc

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise MalformedTokenError("token subject is not a user id") from exc


def build_token_manager(secret: str | None) -> TokenManager:
    """
    Create the process-wide TokenManager.

    Refuses to start without a secret instead of falling back to an insecure
    default.
    """
    if not secret:
        logger.critical("[security] SECRET_KEY environment variable is not set")
        raise RuntimeError("SECRET_KEY environment variable is not set")
    return TokenManager(secret)
