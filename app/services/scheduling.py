"""Weekly schedule assignment.

A class can only have one subject per weekday and time slot, and a teacher
can only be in one class per weekday and time slot. Both rules are checked
here before writing and are also unique constraints on ``schedules``, so a
write racing past the check is still rejected by the database.
"""
import logging
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.core.timetable import DAYS, TIME_SLOTS, is_weekday, slot_position
from app.models import ClassGroup, Profile, Schedule, Subject, UserRole

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "Could not save schedule, check for conflicts"


class ScheduleError(Exception):
    pass


class ScheduleConflictError(ScheduleError):
    def __init__(self, message: str = CONFLICT_MESSAGE, conflicting_id: Optional[int] = None):
        super().__init__(message)
        self.conflicting_id = conflicting_id


class ScheduleReferenceError(ScheduleError):
    pass


class ScheduleNotFoundError(ScheduleError):
    pass


def _validate_slot(day_of_week: int, time_slot: str) -> None:
    if not is_weekday(day_of_week):
        raise ValueError(f"day_of_week must be between 1 and 5, got {day_of_week}")
    if time_slot not in TIME_SLOTS:
        raise ValueError(f"Unknown time slot: {time_slot}")


def _check_references(db: Session, class_id: int, subject_id: int, teacher_id: Optional[int]) -> None:
    if not db.query(ClassGroup.id).filter(ClassGroup.id == class_id).first():
        raise ScheduleReferenceError("Class not found")
    if not db.query(Subject.id).filter(Subject.id == subject_id).first():
        raise ScheduleReferenceError("Subject not found")
    if teacher_id is not None:
        teacher = (
            db.query(Profile.id)
            .filter(Profile.id == teacher_id, Profile.role == UserRole.teacher)
            .first()
        )
        if not teacher:
            raise ScheduleReferenceError("Teacher not found")


def find_conflict(
    db: Session,
    class_id: int,
    teacher_id: Optional[int],
    day_of_week: int,
    time_slot: str,
    exclude_id: Optional[int] = None,
) -> Optional[Schedule]:
    """Return an existing entry that would clash with the given slot."""
    clash = Schedule.class_id == class_id
    if teacher_id is not None:
        clash = or_(clash, Schedule.teacher_id == teacher_id)

    query = db.query(Schedule).filter(
        Schedule.day_of_week == day_of_week,
        Schedule.time_slot == time_slot,
        clash,
    )
    if exclude_id is not None:
        query = query.filter(Schedule.id != exclude_id)
    return query.first()


def _raise_conflict(existing: Schedule, class_id: int) -> None:
    if existing.class_id == class_id:
        message = "Class already has a subject in this time slot"
    else:
        message = "Teacher is already assigned to another class in this time slot"
    logger.warning(
        f"Schedule conflict with entry {existing.id} on day {existing.day_of_week} at {existing.time_slot}"
    )
    raise ScheduleConflictError(message, conflicting_id=existing.id)


def _commit(db: Session, schedule: Schedule) -> Schedule:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(f"Schedule write rejected by the database: {exc.orig}")
        raise ScheduleConflictError() from exc
    db.refresh(schedule)
    return schedule


def assign_schedule(
    db: Session,
    class_id: int,
    subject_id: int,
    teacher_id: Optional[int],
    day_of_week: int,
    time_slot: str,
) -> Schedule:
    _validate_slot(day_of_week, time_slot)
    _check_references(db, class_id, subject_id, teacher_id)

    existing = find_conflict(db, class_id, teacher_id, day_of_week, time_slot)
    if existing:
        _raise_conflict(existing, class_id)

    schedule = Schedule(
        class_id=class_id,
        subject_id=subject_id,
        teacher_id=teacher_id,
        day_of_week=day_of_week,
        time_slot=time_slot,
    )
    db.add(schedule)
    schedule = _commit(db, schedule)
    logger.info(f"Schedule {schedule.id} assigned: class {class_id}, day {day_of_week}, {time_slot}")
    return schedule


def update_schedule(db: Session, schedule_id: int, changes: Dict) -> Schedule:
    """Apply ``changes`` to an entry, re-checking conflicts on the merged row.

    ``changes`` holds only the fields the caller set; ``teacher_id`` may be
    set to ``None`` to unassign the teacher.
    """
    schedule = db.query(Schedule).filter(Schedule.id == schedule_id).first()
    if not schedule:
        raise ScheduleNotFoundError("Schedule not found")

    class_id = changes.get("class_id") or schedule.class_id
    subject_id = changes.get("subject_id") or schedule.subject_id
    teacher_id = changes["teacher_id"] if "teacher_id" in changes else schedule.teacher_id
    day_of_week = changes.get("day_of_week") or schedule.day_of_week
    time_slot = changes.get("time_slot") or schedule.time_slot

    _validate_slot(day_of_week, time_slot)
    _check_references(db, class_id, subject_id, teacher_id)

    existing = find_conflict(db, class_id, teacher_id, day_of_week, time_slot, exclude_id=schedule.id)
    if existing:
        _raise_conflict(existing, class_id)

    schedule.class_id = class_id
    schedule.subject_id = subject_id
    schedule.teacher_id = teacher_id
    schedule.day_of_week = day_of_week
    schedule.time_slot = time_slot
    schedule = _commit(db, schedule)
    logger.info(f"Schedule {schedule.id} updated")
    return schedule


def delete_schedule(db: Session, schedule_id: int) -> int:
    """Delete one entry and return how many rows went away (0 or 1)."""
    deleted = db.query(Schedule).filter(Schedule.id == schedule_id).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info(f"Schedule {schedule_id} deleted")
    return deleted


def _with_relations(db: Session):
    return db.query(Schedule).options(
        joinedload(Schedule.class_group),
        joinedload(Schedule.subject),
        joinedload(Schedule.teacher),
    )


def get_schedule(db: Session, schedule_id: int) -> Optional[Schedule]:
    return _with_relations(db).filter(Schedule.id == schedule_id).first()


def list_class_schedule(db: Session, class_id: int) -> List[Schedule]:
    return (
        _with_relations(db)
        .filter(Schedule.class_id == class_id)
        .order_by(Schedule.day_of_week, Schedule.time_slot)
        .all()
    )


def list_teacher_schedule(db: Session, teacher_id: int) -> List[Schedule]:
    return (
        _with_relations(db)
        .filter(Schedule.teacher_id == teacher_id)
        .order_by(Schedule.day_of_week, Schedule.time_slot)
        .all()
    )


def _slot_order(schedule: Schedule) -> int:
    # unknown slots sort last
    if schedule.time_slot in TIME_SLOTS:
        return slot_position(schedule.time_slot)
    return len(TIME_SLOTS)


def group_by_day(schedules: Iterable[Schedule]) -> Dict[int, List[Schedule]]:
    """Bucket entries by weekday, Monday first, each day ordered by slot.

    Every weekday gets a key even when it has no entries. Entries outside the
    school week are an error rather than being left out.
    """
    grouped = OrderedDict((day, []) for day in DAYS)
    for schedule in schedules:
        if not is_weekday(schedule.day_of_week):
            raise ValueError(f"Schedule {schedule.id} has day_of_week {schedule.day_of_week} outside the school week")
        grouped[schedule.day_of_week].append(schedule)

    for entries in grouped.values():
        entries.sort(key=_slot_order)
    return grouped
