import logging

from app.core.security import hash_password
from app.db.session import SessionLocal
from app.models import AuthUser, ClassGroup, Profile, Schedule, Subject, TeacherSubject, UserRole

logger = logging.getLogger(__name__)


def seed_demo_data() -> None:
    db = SessionLocal()
    try:
        if db.query(AuthUser).first():
            return

        admin_user = AuthUser(
            email="admin@example.com",
            password_hash=hash_password("admin123"),
            full_name="School Admin",
        )
        teacher_user_1 = AuthUser(
            email="ana.souza@example.com",
            password_hash=hash_password("teacher123"),
            full_name="Ana Souza",
        )
        teacher_user_2 = AuthUser(
            email="bruno.lima@example.com",
            password_hash=hash_password("teacher123"),
            full_name="Bruno Lima",
        )
        db.add_all([admin_user, teacher_user_1, teacher_user_2])
        db.flush()

        admin = Profile(id=admin_user.id, email=admin_user.email, full_name="School Admin", role=UserRole.admin)
        teacher_1 = Profile(id=teacher_user_1.id, email=teacher_user_1.email, full_name="Ana Souza", role=UserRole.teacher)
        teacher_2 = Profile(id=teacher_user_2.id, email=teacher_user_2.email, full_name="Bruno Lima", role=UserRole.teacher)
        db.add_all([admin, teacher_1, teacher_2])

        class_6a = ClassGroup(name="6A", description="Morning group")
        class_6b = ClassGroup(name="6B", description="Afternoon group")
        db.add_all([class_6a, class_6b])

        math = Subject(name="Mathematics", icon="calculator", color="#3B82F6")
        science = Subject(name="Science", icon="flask", color="#10B981")
        history = Subject(name="History", icon="globe", color="#F59E0B")
        db.add_all([math, science, history])
        db.flush()

        db.add_all([
            TeacherSubject(teacher_id=teacher_1.id, subject_id=math.id),
            TeacherSubject(teacher_id=teacher_2.id, subject_id=science.id),
            TeacherSubject(teacher_id=teacher_2.id, subject_id=history.id),
        ])

        db.add_all([
            Schedule(class_id=class_6a.id, subject_id=math.id, teacher_id=teacher_1.id,
                     day_of_week=1, time_slot="07:30 - 08:20"),
            Schedule(class_id=class_6a.id, subject_id=science.id, teacher_id=teacher_2.id,
                     day_of_week=1, time_slot="08:20 - 09:10"),
            Schedule(class_id=class_6b.id, subject_id=history.id, teacher_id=teacher_2.id,
                     day_of_week=2, time_slot="13:30 - 14:20"),
            Schedule(class_id=class_6b.id, subject_id=math.id, teacher_id=teacher_1.id,
                     day_of_week=3, time_slot="14:20 - 15:10"),
        ])

        db.commit()
        logger.info("Demo data seeded")
    finally:
        db.close()


if __name__ == "__main__":
    from app.db.base import Base
    from app.db.session import engine

    Base.metadata.create_all(bind=engine)
    seed_demo_data()
