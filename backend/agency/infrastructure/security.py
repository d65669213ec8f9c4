"""Admin Security — password hashing and signed session tokens.

Invariants:
    - Passwords stored only as pbkdf2_sha256 hashes (passlib CryptContext)
    - Session token: HS256 JWT with sub (admin email), role and exp claims
    - decode_session_token returns None for any invalid, tampered or expired
      token; it never raises

Design Decisions:
    - Stateless tokens, no server-side session store: the gate decides from
      the cookie alone
    - pbkdf2_sha256 over bcrypt: no native extension required
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
SESSION_COOKIE = "session-token"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


@dataclass(frozen=True)
class SessionClaims:
    email: str
    role: str
    expires_at: datetime


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Unrecognized hash format stored for the user
        logger.warning("Stored password hash could not be parsed")
        return False


def create_session_token(
    email: str, role: str, secret: str, max_age_seconds: int,
    now: datetime | None = None,
) -> str:
    issued = now or datetime.now(timezone.utc)
    claims = {
        "sub": email,
        "role": role,
        "iat": int(issued.timestamp()),
        "exp": int((issued + timedelta(seconds=max_age_seconds)).timestamp()),
    }
    return jwt.encode(claims, secret, algorithm=ALGORITHM)


def decode_session_token(token: str | None, secret: str) -> SessionClaims | None:
    if not token:
        return None
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except JWTError:
        return None
    email = payload.get("sub")
    role = payload.get("role")
    if not email or not role or "exp" not in payload:
        return None
    return SessionClaims(
        email=email,
        role=role,
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )
