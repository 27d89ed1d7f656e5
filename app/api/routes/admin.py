import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_admin
from app.models import ClassGroup, Profile, Subject
from app.schemas.class_group import ClassGroupOut, ClassGroupCreate, ClassGroupUpdate
from app.schemas.schedule import ScheduleCreate, ScheduleUpdate, ScheduleOut, DeleteResponse
from app.schemas.subject import SubjectOut, SubjectCreate, SubjectUpdate
from app.schemas.teacher import TeacherOut, TeacherCreate, TeacherUpdate
from app.services import scheduling, teachers

router = APIRouter()
logger = logging.getLogger(__name__)


def get_class_group(db: Session, class_id: int) -> ClassGroup:
    class_group = db.query(ClassGroup).filter(ClassGroup.id == class_id).first()
    if not class_group:
        raise HTTPException(status_code=404, detail="Class not found")
    return class_group


def get_subject(db: Session, subject_id: int) -> Subject:
    subject = db.query(Subject).filter(Subject.id == subject_id).first()
    if not subject:
        raise HTTPException(status_code=404, detail="Subject not found")
    return subject


def commit_or_conflict(db: Session, detail: str) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(f"Write rejected: {detail}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail) from exc


# Classes

@router.get("/classes", response_model=list[ClassGroupOut])
def list_classes(
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    return db.query(ClassGroup).order_by(ClassGroup.name).all()


@router.post("/classes", response_model=ClassGroupOut, status_code=status.HTTP_201_CREATED)
def create_class(
    payload: ClassGroupCreate,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    class_group = ClassGroup(name=payload.name, description=payload.description)
    db.add(class_group)
    commit_or_conflict(db, "A class with this name already exists")
    db.refresh(class_group)
    logger.info(f"Class created: {class_group.name}")
    return class_group


@router.patch("/classes/{class_id}", response_model=ClassGroupOut)
def update_class(
    class_id: int,
    payload: ClassGroupUpdate,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    class_group = get_class_group(db, class_id)

    if payload.name is not None:
        class_group.name = payload.name
    if "description" in payload.model_fields_set:
        class_group.description = payload.description

    commit_or_conflict(db, "A class with this name already exists")
    db.refresh(class_group)
    return class_group


@router.delete("/classes/{class_id}")
def delete_class(
    class_id: int,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    class_group = get_class_group(db, class_id)
    db.delete(class_group)
    db.commit()
    logger.info(f"Class {class_id} deleted")
    return {"ok": True}


# Subjects

@router.get("/subjects", response_model=list[SubjectOut])
def list_subjects(
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    return db.query(Subject).order_by(Subject.name).all()


@router.post("/subjects", response_model=SubjectOut, status_code=status.HTTP_201_CREATED)
def create_subject(
    payload: SubjectCreate,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    subject = Subject(name=payload.name, icon=payload.icon, color=payload.color)
    db.add(subject)
    commit_or_conflict(db, "A subject with this name already exists")
    db.refresh(subject)
    logger.info(f"Subject created: {subject.name}")
    return subject


@router.patch("/subjects/{subject_id}", response_model=SubjectOut)
def update_subject(
    subject_id: int,
    payload: SubjectUpdate,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    subject = get_subject(db, subject_id)

    if payload.name is not None:
        subject.name = payload.name
    if payload.icon is not None:
        subject.icon = payload.icon
    if payload.color is not None:
        subject.color = payload.color

    commit_or_conflict(db, "A subject with this name already exists")
    db.refresh(subject)
    return subject


@router.delete("/subjects/{subject_id}")
def delete_subject(
    subject_id: int,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    subject = get_subject(db, subject_id)
    db.delete(subject)
    db.commit()
    logger.info(f"Subject {subject_id} deleted")
    return {"ok": True}


# Teachers

@router.get("/teachers", response_model=list[TeacherOut])
def list_teachers(
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    return teachers.list_teachers(db)


@router.post("/teachers", response_model=TeacherOut, status_code=status.HTTP_201_CREATED)
def create_teacher(
    payload: TeacherCreate,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    try:
        return teachers.create_teacher(
            db,
            full_name=payload.full_name,
            email=payload.email,
            password=payload.password,
            subject_ids=payload.subject_ids,
        )
    except teachers.TeacherEmailTakenError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except teachers.TeacherSubjectError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.patch("/teachers/{teacher_id}", response_model=TeacherOut)
def update_teacher(
    teacher_id: int,
    payload: TeacherUpdate,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    try:
        return teachers.update_teacher(db, teacher_id, payload.model_dump(exclude_unset=True))
    except teachers.TeacherNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except teachers.TeacherEmailTakenError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except teachers.TeacherSubjectError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.delete("/teachers/{teacher_id}")
def delete_teacher(
    teacher_id: int,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    try:
        teachers.delete_teacher(db, teacher_id)
    except teachers.TeacherNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return {"ok": True}


# Schedules

@router.get("/schedules", response_model=list[ScheduleOut])
def list_schedules(
    class_id: int = Query(...),
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    get_class_group(db, class_id)
    return scheduling.list_class_schedule(db, class_id)


@router.post("/schedules", response_model=ScheduleOut, status_code=status.HTTP_201_CREATED)
def create_schedule(
    payload: ScheduleCreate,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    try:
        schedule = scheduling.assign_schedule(
            db,
            class_id=payload.class_id,
            subject_id=payload.subject_id,
            teacher_id=payload.teacher_id,
            day_of_week=payload.day_of_week,
            time_slot=payload.time_slot,
        )
    except scheduling.ScheduleConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except scheduling.ScheduleReferenceError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return scheduling.get_schedule(db, schedule.id)


@router.patch("/schedules/{schedule_id}", response_model=ScheduleOut)
def update_schedule(
    schedule_id: int,
    payload: ScheduleUpdate,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
):
    try:
        schedule = scheduling.update_schedule(db, schedule_id, payload.model_dump(exclude_unset=True))
    except scheduling.ScheduleNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except scheduling.ScheduleConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except scheduling.ScheduleReferenceError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return scheduling.get_schedule(db, schedule.id)


@router.delete("/schedules/{schedule_id}", response_model=DeleteResponse)
def delete_schedule(
    schedule_id: int,
    db: Session = Depends(get_db),
    current_admin: Profile = Depends(get_current_admin),
) -> DeleteResponse:
    deleted = scheduling.delete_schedule(db, schedule_id)
    return DeleteResponse(ok=True, deleted=deleted)
