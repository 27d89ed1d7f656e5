import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.models import AuthUser, Profile, UserRole
from app.services import identity

logger = logging.getLogger(__name__)


def register_admin(db: Session, email: str, password: str, full_name: str) -> Profile:
    """Sign up a new user and give it an admin profile."""
    user = identity.sign_up(db, email, password, full_name=full_name)
    profile = Profile(id=user.id, email=user.email, full_name=full_name, role=UserRole.admin)
    db.add(profile)
    db.commit()
    db.refresh(profile)
    logger.info(f"Administrator registered: {profile.email}")
    return profile


def get_profile(db: Session, user: AuthUser) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.id == user.id).first()
