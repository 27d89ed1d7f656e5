import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.models import AuthUser, Profile, Subject, TeacherSubject, UserRole
from app.services import identity

logger = logging.getLogger(__name__)


class TeacherError(Exception):
    pass


class TeacherNotFoundError(TeacherError):
    pass


class TeacherSubjectError(TeacherError):
    pass


class TeacherEmailTakenError(TeacherError):
    pass


def list_teachers(db: Session) -> List[Profile]:
    return (
        db.query(Profile)
        .options(selectinload(Profile.subject_links).selectinload(TeacherSubject.subject))
        .filter(Profile.role == UserRole.teacher)
        .order_by(Profile.full_name)
        .all()
    )


def get_teacher(db: Session, teacher_id: int) -> Optional[Profile]:
    return (
        db.query(Profile)
        .filter(Profile.id == teacher_id, Profile.role == UserRole.teacher)
        .first()
    )


def _load_subjects(db: Session, subject_ids: List[int]) -> List[Subject]:
    unique_ids = list(dict.fromkeys(subject_ids))
    if not unique_ids:
        return []
    subjects = db.query(Subject).filter(Subject.id.in_(unique_ids)).all()
    missing = set(unique_ids) - {subject.id for subject in subjects}
    if missing:
        raise TeacherSubjectError(f"Unknown subject ids: {sorted(missing)}")
    return subjects


def create_teacher(db: Session, full_name: str, email: str, password: str, subject_ids: List[int]) -> Profile:
    """Create the login, the teacher profile and its subject links together."""
    subjects = _load_subjects(db, subject_ids)
    try:
        user = identity.admin_create_user(db, email, password, full_name=full_name)
    except identity.UserAlreadyRegisteredError as exc:
        raise TeacherEmailTakenError(str(exc)) from exc

    teacher = Profile(id=user.id, email=user.email, full_name=full_name, role=UserRole.teacher)
    db.add(teacher)
    db.flush()
    db.add_all([TeacherSubject(teacher_id=teacher.id, subject_id=subject.id) for subject in subjects])
    db.commit()
    db.refresh(teacher)
    logger.info(f"Teacher account created: {teacher.email}")
    return teacher


def update_teacher(db: Session, teacher_id: int, changes: Dict) -> Profile:
    teacher = get_teacher(db, teacher_id)
    if not teacher:
        raise TeacherNotFoundError("Teacher not found")

    if changes.get("full_name") is not None:
        teacher.full_name = changes["full_name"]

    if changes.get("email") is not None:
        email = identity.normalize_email(changes["email"])
        taken = db.query(AuthUser.id).filter(AuthUser.email == email, AuthUser.id != teacher.id).first()
        if taken:
            raise TeacherEmailTakenError("Email already registered")
        teacher.email = email
        if teacher.user is not None:
            teacher.user.email = email

    if changes.get("subject_ids") is not None:
        subjects = _load_subjects(db, changes["subject_ids"])
        # links are replaced wholesale
        teacher.subject_links.clear()
        db.flush()
        teacher.subject_links.extend(TeacherSubject(subject_id=subject.id) for subject in subjects)

    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise TeacherEmailTakenError("Email already registered") from exc
    db.refresh(teacher)
    logger.info(f"Teacher {teacher.id} updated")
    return teacher


def delete_teacher(db: Session, teacher_id: int) -> None:
    """Remove the teacher's links, profile and login.

    Schedule entries stay in place without a teacher.
    """
    teacher = get_teacher(db, teacher_id)
    if not teacher:
        raise TeacherNotFoundError("Teacher not found")

    for schedule in teacher.schedules:
        schedule.teacher_id = None
    db.delete(teacher)
    db.flush()
    try:
        identity.admin_delete_user(db, teacher_id)
    except identity.UserNotFoundError:
        logger.warning(f"Teacher {teacher_id} had no login to delete")
    db.commit()
    logger.info(f"Teacher {teacher_id} deleted")
