from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.api.access import HOME_PATH, CallerContext, Role, redirect_for
from app.api.deps import get_db, get_caller
from app.core.timetable import BREAK_SLOTS, DAYS, LESSON_SLOTS, SUBJECT_COLORS, SUBJECT_ICONS, TIME_SLOTS
from app.models import ClassGroup, Profile, Schedule, Subject, TeacherSubject, UserRole
from app.schemas.auth import ProfileOut
from app.schemas.class_group import ClassGroupOut
from app.schemas.dashboard import AdminOverview, ScheduleBoard, TeacherDashboardOut, TeacherStats
from app.schemas.schedule import DayOut, ScheduleDay, ScheduleOut, TimeSlotOut, TimetableMeta
from app.schemas.subject import SubjectOut
from app.services.scheduling import group_by_day, list_class_schedule, list_teacher_schedule

router = APIRouter()
fallback_router = APIRouter()


def build_days(grouped: Dict[int, List[Schedule]]) -> List[ScheduleDay]:
    return [
        ScheduleDay(
            day_of_week=day,
            label=DAYS[day],
            entries=[ScheduleOut.model_validate(entry) for entry in entries],
        )
        for day, entries in grouped.items()
    ]


@router.get("/", response_model=ScheduleBoard)
def schedule_board(
    class_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
) -> ScheduleBoard:
    classes = db.query(ClassGroup).order_by(ClassGroup.name).all()

    selected = None
    if class_id is not None:
        selected = next((item for item in classes if item.id == class_id), None)
        if selected is None:
            raise HTTPException(status_code=404, detail="Class not found")
    elif classes:
        selected = classes[0]

    schedules = list_class_schedule(db, selected.id) if selected else []
    return ScheduleBoard(
        classes=[ClassGroupOut.model_validate(item) for item in classes],
        selected_class=ClassGroupOut.model_validate(selected) if selected else None,
        lesson_slots=list(LESSON_SLOTS),
        days=build_days(group_by_day(schedules)),
        total_entries=len(schedules),
    )


@router.get("/meta/timetable", response_model=TimetableMeta)
def timetable_meta() -> TimetableMeta:
    return TimetableMeta(
        days=[DayOut(value=value, label=label) for value, label in DAYS.items()],
        time_slots=[TimeSlotOut(value=slot, is_break=slot in BREAK_SLOTS) for slot in TIME_SLOTS],
        subject_icons=list(SUBJECT_ICONS),
        subject_colors=list(SUBJECT_COLORS),
    )


@router.get("/admin", response_model=AdminOverview)
def admin_dashboard(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    target = redirect_for(Role.admin, caller.role)
    if target:
        return RedirectResponse(url=target)

    return AdminOverview(
        profile=ProfileOut.model_validate(caller.profile),
        total_classes=db.query(ClassGroup).count(),
        total_subjects=db.query(Subject).count(),
        total_teachers=db.query(Profile).filter(Profile.role == UserRole.teacher).count(),
        total_schedules=db.query(Schedule).count(),
    )


@router.get("/teacher", response_model=TeacherDashboardOut)
def teacher_dashboard(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    target = redirect_for(Role.teacher, caller.role)
    if target:
        return RedirectResponse(url=target)

    teacher = caller.profile
    subjects = (
        db.query(Subject)
        .join(TeacherSubject, TeacherSubject.subject_id == Subject.id)
        .filter(TeacherSubject.teacher_id == teacher.id)
        .order_by(Subject.name)
        .all()
    )
    schedules = list_teacher_schedule(db, teacher.id)

    return TeacherDashboardOut(
        profile=ProfileOut.model_validate(teacher),
        subjects=[SubjectOut.model_validate(subject) for subject in subjects],
        days=build_days(group_by_day(schedules)),
        stats=TeacherStats(
            total_classes=len({schedule.class_id for schedule in schedules}),
            total_subjects=len(subjects),
            weekly_hours=len(schedules),
        ),
    )


@fallback_router.get("/{path:path}", include_in_schema=False)
def fallback(path: str) -> RedirectResponse:
    return RedirectResponse(url=HOME_PATH)
