"""
Shared fixtures: an in-memory SQLite database per test, a TestClient
bound to it, and seeded staff and student accounts.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["PASSWORD_BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "dormitory-test-secret-key-0123456789abcdef"
os.environ["LOG_LEVEL"] = "WARNING"

import email_validator
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dormitory.core.permissions import Principal
from dormitory.core.security import PasswordHasher, get_jwt_manager
from dormitory.db.base import Base, import_models
from dormitory.db.session import get_db
from dormitory.main import create_app
from dormitory.models.user import Employee, Student

# Test fixtures use the reserved ".test" domain; email-validator only accepts it in test mode.
email_validator.TEST_ENVIRONMENT = True

PASSWORD = "secret-pass"

EMPLOYEES = [
    # employee_id, first, last, role, gender
    ("ADM001", "Abebe", "Kebede", "admin", "male"),
    ("DIR001", "Sara", "Tesfaye", "directorate", "female"),
    ("COO001", "Dawit", "Haile", "coordinator", "male"),
    ("REG001", "Hana", "Girma", "registrar", "female"),
    ("PRO001", "Yonas", "Alemu", "proctor", "male"),
    ("PRO002", "Meron", "Bekele", "proctor", "female"),
    ("PM001", "Samuel", "Tadesse", "proctor_manager", "male"),
    ("SEC001", "Biruk", "Mulugeta", "security_guard", "male"),
    ("MNT001", "Tigist", "Wolde", "maintainer", "female"),
]

STUDENTS = [
    # student_id, first, second, last, gender, disability_status
    ("STU001", "Kidus", "Abel", "Mengistu", "male", "none"),
    ("STU002", "Liya", "Dawit", "Assefa", "female", "none"),
    ("STU003", "Nahom", "Bereket", "Tilahun", "male", "physical"),
]


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    import_models()
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture()
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture()
def seed(db, hasher):
    """Every staff role plus two students and one disabled student."""
    hashed = hasher.hash(PASSWORD)
    for employee_id, first, last, role, gender in EMPLOYEES:
        db.add(Employee(
            employee_id=employee_id,
            first_name=first,
            last_name=last,
            email=f"{employee_id.lower()}@dorm.test",
            gender=gender,
            role=role,
            status="active",
            password=hashed,
        ))
    for student_id, first, second, last, gender, disability in STUDENTS:
        db.add(Student(
            student_id=student_id,
            first_name=first,
            second_name=second,
            last_name=last,
            email=f"{student_id.lower()}@dorm.test",
            gender=gender,
            batch="2024",
            disability_status=disability,
            status="active",
            password=hashed,
        ))
    db.commit()
    return db


def _principal(user_id: str) -> Principal:
    for employee_id, first, last, role, _ in EMPLOYEES:
        if employee_id == user_id:
            return Principal(user_id=employee_id, role=role, name=f"{first} {last}", user_type="employee")
    for student_id, first, second, last, _, _ in STUDENTS:
        if student_id == user_id:
            return Principal(
                user_id=student_id,
                role="student",
                name=f"{first} {second} {last}",
                user_type="student",
            )
    raise KeyError(user_id)


@pytest.fixture()
def auth():
    """auth("ADM001") -> Authorization header for that seeded account."""
    manager = get_jwt_manager()

    def headers_for(user_id: str) -> dict:
        token = manager.create_session_token(_principal(user_id))
        return {"Authorization": f"Bearer {token}"}

    return headers_for


@pytest.fixture()
def make_block(client, auth):
    """Create a block with generated rooms through the API."""

    def create(block_id="A", reserved_for="male", floors=2, rooms_per_floor=2, room_capacity=2, **extra):
        payload = {
            "block_id": block_id,
            "name": f"Block {block_id}",
            "reserved_for": reserved_for,
            "floors": floors,
            "rooms_per_floor": rooms_per_floor,
            "room_capacity": room_capacity,
            **extra,
        }
        response = client.post("/api/blocks", json=payload, headers=auth("ADM001"))
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return create
