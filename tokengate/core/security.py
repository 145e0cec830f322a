import uuid
from datetime import datetime, timezone
from typing import Any

from jose import jwt


def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def token_expiry(issued_at: datetime, lifetime) -> datetime:
    # JWT "exp" has whole-second precision; keep server-side expiries identical to it.
    return (issued_at + lifetime).replace(microsecond=0)

def is_expired(expires_at: datetime, now: datetime) -> bool:
    # Same rule python-jose applies to "exp" (zero leeway): still valid during its last second.
    return expires_at < now.replace(microsecond=0)

def encode_token(claims: dict[str, Any], secret_key: str, algorithm: str, expire: datetime, with_jti: bool = False) -> str:
    to_encode = {**claims, "exp": expire}
    if with_jti:
        to_encode["jti"] = uuid.uuid4().hex
    return jwt.encode(to_encode, secret_key, algorithm)

def decode_token(token: str, secret_key: str, algorithm: str) -> dict[str, Any]:
    # Raises jose.JWTError (ExpiredSignatureError included) on any failure.
    return jwt.decode(token, secret_key, algorithms=[algorithm])
