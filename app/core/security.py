import secrets
from datetime import datetime, timedelta
from typing import Optional

import bcrypt
from jose import jwt

from app.core.config import get_settings

settings = get_settings()

MIN_PASSWORD_LENGTH = 6
# bcrypt only accepts this many bytes of password
MAX_PASSWORD_BYTES = 72

def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES

def hash_password(password: str) -> str:
    pw = password.encode("utf-8")
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(pw, salt).decode("utf-8")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    if password_too_long(plain_password):
        return False
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )

def new_session_id() -> str:
    return secrets.token_hex(16)

def create_access_token(subject: str, session_id: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload = {"sub": subject, "sid": session_id, "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)

def decode_access_token(token: str) -> dict:
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
