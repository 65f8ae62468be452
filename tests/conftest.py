import os

# Cheap bcrypt rounds for tests; must be set before the settings are loaded
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.db.base_class import Base
from app.db.session import enable_sqlite_foreign_keys, get_db
from app.main import app
from app.models.user import Role, User
from app.services.auth import AuthService
from tests.utils_jwt import generate_test_jwt

TEST_PASSWORD = "password123"


@pytest.fixture
def engine():
    """In-memory SQLite database, fresh for every test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create a SQLAlchemy session for tests."""
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    """Create a FastAPI test client."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    # Clear dependency overrides
    app.dependency_overrides = {}


@pytest.fixture
def make_user(db_session):
    """Factory creating users directly in the database."""
    def _make_user(name: str, email: str, role: Role = Role.MEMBER, password: str = TEST_PASSWORD) -> User:
        user = User(
            name=name,
            email=email,
            role=role,
            hashed_password=AuthService.get_password_hash(password),
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def password():
    """Plain-text password of every fixture user."""
    return TEST_PASSWORD


@pytest.fixture
def member(make_user):
    return make_user("Member One", "member@example.com")


@pytest.fixture
def other_member(make_user):
    return make_user("Member Two", "other@example.com")


@pytest.fixture
def admin(make_user):
    return make_user("Admin", "admin@example.com", role=Role.ADMIN)


def _auth_header(user: User):
    return {"Authorization": f"Bearer {generate_test_jwt(user_id=user.id)}"}


@pytest.fixture
def member_headers(member):
    """Return an Authorization header with a valid JWT for the member."""
    return _auth_header(member)


@pytest.fixture
def other_headers(other_member):
    return _auth_header(other_member)


@pytest.fixture
def admin_headers(admin):
    return _auth_header(admin)
