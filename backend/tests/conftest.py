"""Test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from focus_mode.database import Base, enable_sqlite_foreign_keys
from focus_mode.dispatcher import DispatcherClient
from focus_mode.models import Student, StudentStatus


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite:///:memory:"


class RecordingDispatcher(DispatcherClient):
    """Dispatcher that records notifications instead of calling out."""

    def __init__(self):
        super().__init__(webhook_url="http://dispatcher.test/webhook", timeout=1)
        self.calls = []

    def notify_failed_checkin(self, student_id, quiz_score, focus_minutes):
        self.calls.append({
            "student_id": student_id,
            "quiz_score": quiz_score,
            "focus_minutes": focus_minutes,
        })


@pytest.fixture
def engine():
    """Create a fresh test database engine per test."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Create test database session."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def make_student(db_session):
    """Factory inserting a student with the given status."""
    def _make(name="Test Student", status=StudentStatus.normal, id=None):
        student = Student(id=id, name=name, status=status)
        db_session.add(student)
        db_session.commit()
        db_session.refresh(student)
        return student
    return _make


@pytest.fixture
def sample_student(make_student):
    """Create a sample student in normal status."""
    return make_student(name="Ada Lovelace")


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()


@pytest.fixture
def client(session_factory, dispatcher):
    """TestClient with database and dispatcher dependencies overridden."""
    from focus_mode.main import app
    from focus_mode.database import get_db
    from focus_mode.dispatcher import get_dispatcher

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def assert_remedial_invariant(session):
    """current_intervention_id is set iff the student is remedial."""
    session.expire_all()
    for student in session.query(Student).all():
        assert (student.current_intervention_id is not None) == (
            student.status == StudentStatus.remedial
        ), repr(student)
