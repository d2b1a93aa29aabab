"""Shared test fixtures and configuration."""

import os

# Keep imports of alumni_hub.main from touching an on-disk database
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from alumni_hub.config import Settings
from alumni_hub.main import create_app
from alumni_hub.schemas.person import Person
from alumni_hub.services.database import DatabaseService
from alumni_hub.services.seed import seed_default_data


def make_person(person_id: str, name: str = None, **fields) -> Person:
    """Build a Person with just the fields a test cares about."""
    return Person(id=person_id, name=name or f"Person {person_id}", **fields)


@pytest.fixture
def requester():
    return make_person("u0", "Requester")


@pytest.fixture
def directory():
    """Small mixed directory in a fixed collection order."""
    return [
        make_person(
            "a1",
            "Jane Smith",
            email="jane.smith@university.edu",
            user_type="alumni",
            major="Finance",
            company="Finance Inc",
            graduation_year=2019,
            skills=["Excel", "Risk Management"],
        ),
        make_person(
            "a2",
            "John Doe",
            email="john.doe@university.edu",
            user_type="alumni",
            major="Computer Science",
            company="Tech Corp",
            position="Software Engineer",
            graduation_year=2018,
            location="San Francisco, CA",
            skills=["Python", "React"],
            bio="Mentoring junior developers.",
        ),
        make_person(
            "s1",
            "Alex Chen",
            email="alex.chen@university.edu",
            user_type="student",
            major="Computer Science",
            skills=["Python", "Machine Learning"],
        ),
        make_person(
            "t1",
            "Robert Anderson",
            email="prof.anderson@university.edu",
            user_type="teacher",
            department="Computer Science",
            position="Professor",
        ),
    ]


@pytest.fixture
def db():
    """Empty in-memory record store."""
    store = DatabaseService("sqlite://")
    store.create_tables()
    yield store
    store.close()


@pytest.fixture
def seeded_db(db):
    seed_default_data(db)
    return db


@pytest.fixture
def client():
    """API client over a freshly seeded in-memory store."""
    app = create_app(Settings(DATABASE_URL="sqlite://", SEED_DEFAULT_DATA=True))
    with TestClient(app) as test_client:
        yield test_client


def as_user(user_id: str) -> dict:
    return {"X-User-Id": user_id}
