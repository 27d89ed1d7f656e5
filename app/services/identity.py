"""In-process identity provider.

Owns the ``auth_users`` and ``auth_sessions`` tables. Profiles (and with them
roles) live in the data store proper and are attached by the callers of this
module, the same way a hosted auth service leaves profile rows to the app.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple

from jose import JWTError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.security import (
    MAX_PASSWORD_BYTES,
    MIN_PASSWORD_LENGTH,
    create_access_token,
    decode_access_token,
    hash_password,
    new_session_id,
    password_too_long,
    verify_password,
)
from app.models import AuthSession, AuthUser

logger = logging.getLogger(__name__)


class IdentityError(Exception):
    """Base class for identity provider failures."""


class UserAlreadyRegisteredError(IdentityError):
    pass


class InvalidCredentialsError(IdentityError):
    pass


class SignupDisabledError(IdentityError):
    pass


class WeakPasswordError(IdentityError):
    pass


class UserNotFoundError(IdentityError):
    pass


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[AuthUser]:
    return db.query(AuthUser).filter(AuthUser.email == normalize_email(email)).first()


def _check_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise WeakPasswordError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if password_too_long(password):
        raise WeakPasswordError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


def _add_user(db: Session, email: str, password: str, full_name: Optional[str] = None) -> AuthUser:
    _check_password(password)
    if get_user_by_email(db, email):
        raise UserAlreadyRegisteredError("Email already registered")
    user = AuthUser(email=normalize_email(email), password_hash=hash_password(password), full_name=full_name)
    db.add(user)
    try:
        db.flush()
    except IntegrityError as exc:
        db.rollback()
        raise UserAlreadyRegisteredError("Email already registered") from exc
    return user


def sign_up(db: Session, email: str, password: str, full_name: Optional[str] = None) -> AuthUser:
    """Self-service registration. Commits the new user."""
    if not get_settings().signup_enabled:
        raise SignupDisabledError("Signup is disabled")
    user = _add_user(db, email, password, full_name)
    db.commit()
    db.refresh(user)
    logger.info(f"New user signed up: {user.email}")
    return user


def admin_create_user(db: Session, email: str, password: str, full_name: Optional[str] = None) -> AuthUser:
    """Create a user on behalf of an administrator.

    Works even when self-service sign-up is disabled. The user is flushed but
    not committed so the caller can attach a profile in the same transaction.
    """
    return _add_user(db, email, password, full_name)


def admin_delete_user(db: Session, user_id: int) -> None:
    user = db.query(AuthUser).filter(AuthUser.id == user_id).first()
    if not user:
        raise UserNotFoundError("User not found")
    db.delete(user)
    db.flush()


def sign_in(db: Session, email: str, password: str) -> Tuple[str, AuthUser]:
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        logger.warning(f"Failed sign-in attempt for {email}")
        raise InvalidCredentialsError("Invalid login credentials")

    settings = get_settings()
    expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    session = AuthSession(
        id=new_session_id(),
        user_id=user.id,
        created_at=datetime.utcnow(),
        expires_at=datetime.utcnow() + expires_delta,
    )
    db.add(session)
    db.commit()

    token = create_access_token(subject=str(user.id), session_id=session.id, expires_delta=expires_delta)
    logger.info(f"User signed in: {user.email}")
    return token, user


def sign_out(db: Session, session_id: str) -> None:
    """Drop the session. Signing out twice is harmless."""
    deleted = db.query(AuthSession).filter(AuthSession.id == session_id).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info(f"Session {session_id} signed out")


def resolve_session(db: Session, token: str) -> Optional[Tuple[AuthUser, AuthSession]]:
    """Map a bearer token back to its user and live session, if any."""
    try:
        payload = decode_access_token(token)
    except JWTError:
        return None

    user_id = payload.get("sub")
    session_id = payload.get("sid")
    if not user_id or not session_id:
        return None

    session = db.query(AuthSession).filter(AuthSession.id == session_id).first()
    if not session or str(session.user_id) != str(user_id):
        return None
    if session.expires_at < datetime.utcnow():
        return None
    return session.user, session
