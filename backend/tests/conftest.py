import os
import tempfile

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test_secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="homestock-uploads-")
os.environ["OPENAI_API_KEY"] = ""
os.environ["HUGGINGFACE_API_KEY"] = ""

from dataclasses import dataclass
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from homestock.db.session import get_db
from homestock.main import app
from homestock.models import Base, UserRole
from homestock.schemas.user import UserCreate
from homestock.services import auth_service
from homestock.services.error_logging import error_logger


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@dataclass
class Account:
    id: UUID
    email: str
    password: str
    token: str

    @property
    def auth(self) -> dict:
        """Bearer header only."""
        return {"Authorization": f"Bearer {self.token}"}

    @property
    def headers(self) -> dict:
        """Bearer header plus the x-user-id header required on list/create."""
        return {**self.auth, "x-user-id": str(self.id)}


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_account(db):
    """
    Create a user directly in the database and issue a session token.
    Admins can only be created this way (or with the CLI).
    """
    def _make(email, username=None, password="password123", role=UserRole.USER):
        user = auth_service.create_user(db, UserCreate(
            username=username or email.split("@")[0],
            email=email,
            password=password,
            role=role,
        ))
        token = auth_service.issue_token(db, user)
        return Account(id=user.id, email=email, password=password, token=token)

    return _make


@pytest.fixture
def alice(make_account):
    return make_account("alice@example.com")


@pytest.fixture
def bob(make_account):
    return make_account("bob@example.com")


@pytest.fixture
def admin(make_account):
    return make_account("admin@example.com", role=UserRole.ADMIN)


@pytest.fixture
def stored_errors(db):
    """Persist error log entries into the test database."""
    error_logger.set_db_session_factory(TestingSessionLocal)
    yield
    error_logger.set_db_session_factory(None)


@pytest.fixture
def app_db(db, mocker):
    """Point code that opens its own sessions (CLI, startup) at the test database."""
    mocker.patch("homestock.db.session.engine", engine)
    mocker.patch("homestock.db.session.SessionLocal", TestingSessionLocal)
    return db
