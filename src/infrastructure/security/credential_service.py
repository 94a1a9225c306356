from __future__ import annotations

import base64
import hashlib
import logging
import os
from datetime import UTC, datetime, timedelta
from urllib.parse import urlencode

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from src.domain.errors import AuthError

logger = logging.getLogger(__name__)

_DEFAULT_SECRET = "change-this-secret-key-in-production"


def _prehash(password: str) -> bytes:
    """Fixed 44-byte input for bcrypt, which rejects anything over 72 bytes."""
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def gravatar_url(email: str, size: int = 200) -> str:
    """Deterministic avatar URL for ``email``."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({"s": str(size), "r": "pg", "d": "mm"})
    return f"//www.gravatar.com/avatar/{digest}?{query}"


class CredentialService:
    """Password hashing and signed bearer tokens.

    Tokens carry ``{"user": {"id": ...}}`` and expire after JWT_EXPIRES_HOURS
    (100 by default).
    """

    algorithm = "HS256"

    def __init__(self) -> None:
        self.secret = os.getenv("JWT_SECRET", _DEFAULT_SECRET)
        self.expires = timedelta(hours=float(os.getenv("JWT_EXPIRES_HOURS", "100")))
        self.rounds = int(os.getenv("BCRYPT_ROUNDS", "10"))
        if self.secret == _DEFAULT_SECRET and os.getenv("ENV", "development") == "production":
            logger.warning("JWT_SECRET is not set; using the development default")

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_prehash(password), salt).decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_prehash(password), hashed.encode("utf-8"))
        except ValueError:
            # stored value is not a bcrypt hash
            return False

    def issue_token(self, user_id: str) -> str:
        payload = {
            "user": {"id": user_id},
            "exp": datetime.now(UTC) + self.expires,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify_token(self, token: str | None) -> str:
        """Return the user id embedded in ``token``.

        Raises:
            AuthError: token absent, malformed, badly signed or expired.
        """
        if not token:
            raise AuthError("No token, authorization denied")
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            logger.info("Rejected expired token")
            raise AuthError("Token is not valid") from exc
        except JWTError as exc:
            logger.info("Rejected invalid token: %s", exc)
            raise AuthError("Token is not valid") from exc
        user = payload.get("user")
        user_id = user.get("id") if isinstance(user, dict) else None
        if not user_id:
            raise AuthError("Token is not valid")
        return str(user_id)
