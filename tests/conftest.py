from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import get_db, init_db
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: startup hooks would touch the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()


def _register(client, email="ada@example.com", name="Ada Lovelace", password="secret123", **extra):
    body = {"name": name, "email": email, "password": password, **extra}
    res = client.post("/v1/auth/register", json=body)
    assert res.status_code == 201, res.text
    return res.json()["data"]


@pytest.fixture
def register_user(client):
    def _register_user(**kwargs):
        return _register(client, **kwargs)

    return _register_user


@pytest.fixture
def auth_headers(client):
    data = _register(client)
    return {"Authorization": f"Bearer {data['token']}"}


@pytest.fixture
def add_subject(client, auth_headers):
    def _add(code, grade, year=1, semester=1, name=None, headers=None, **extra):
        body = {
            "subjectCode": code,
            "subjectName": name or f"Subject {code}",
            "grade": grade,
            "year": year,
            "semester": semester,
            **extra,
        }
        res = client.post("/v1/subjects/add", json=body, headers=headers or auth_headers)
        assert res.status_code == 201, res.text
        return res.json()["data"]

    return _add


@pytest.fixture
def make_record():
    """Plain record with the attributes the grading core reads."""
    def _make(credits, grade, year=1, semester=1, code=None):
        return SimpleNamespace(
            credits=credits,
            grade=grade,
            year=year,
            semester=semester,
            subject_code=code or f"SUB10{credits}",
            subject_name=f"Subject {credits}",
        )

    return _make
