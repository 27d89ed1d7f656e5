import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.api.deps import get_db
from app.models import ClassGroup, Subject, TeacherSubject, UserRole
from app.tests.utils import add_account, login


@pytest.fixture()
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def db_session(db_engine):
    session_local = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = session_local()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.main import app

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture()
def seed_data(db_session):
    admin = add_account(db_session, "admin@example.com", "admin123", "School Admin", UserRole.admin)
    teacher = add_account(db_session, "ana@example.com", "teacher123", "Ana Souza", UserRole.teacher)
    other_teacher = add_account(db_session, "bruno@example.com", "teacher123", "Bruno Lima", UserRole.teacher)

    class_a = ClassGroup(name="6A", description="Morning group")
    class_b = ClassGroup(name="6B")
    math = Subject(name="Mathematics", icon="calculator", color="#3B82F6")
    science = Subject(name="Science", icon="flask", color="#10B981")
    db_session.add_all([class_a, class_b, math, science])
    db_session.flush()

    db_session.add(TeacherSubject(teacher_id=teacher.id, subject_id=math.id))
    db_session.commit()

    return {
        "admin": admin,
        "teacher": teacher,
        "other_teacher": other_teacher,
        "class_a": class_a,
        "class_b": class_b,
        "math": math,
        "science": science,
    }

@pytest.fixture()
def admin_headers(client, seed_data):
    return login(client, "admin@example.com", "admin123")


@pytest.fixture()
def teacher_headers(client, seed_data):
    return login(client, "ana@example.com", "teacher123")
