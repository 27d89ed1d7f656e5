from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.api.access import GUEST, CallerContext, Role, role_for
from app.db.session import SessionLocal
from app.models import Profile
from app.services import identity

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="login", auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_caller(
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(oauth2_scheme),
) -> CallerContext:
    if not token:
        return GUEST
    resolved = identity.resolve_session(db, token)
    if resolved is None:
        return GUEST
    user, session = resolved
    profile = db.query(Profile).filter(Profile.id == user.id).first()
    return CallerContext(role=role_for(profile), user=user, session=session, profile=profile)


def get_current_caller(caller: CallerContext = Depends(get_caller)) -> CallerContext:
    if not caller.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return caller


def get_current_admin(caller: CallerContext = Depends(get_current_caller)) -> Profile:
    if caller.role != Role.admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return caller.profile
