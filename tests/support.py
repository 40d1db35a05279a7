"""Shared test scaffolding: in-memory SQLite database and a TestClient wired to it."""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from metaspace.core.config import settings
from metaspace.core.database import get_db
from metaspace.main import app
from metaspace.models import Base

API = settings.API_V1_PREFIX


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema per test; bcrypt cost lowered so hashing stays fast."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.addCleanup(self.engine.dispose)
        self.session_factory = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)
        rounds_patcher = patch.object(settings, "BCRYPT_ROUNDS", 4)
        rounds_patcher.start()
        self.addCleanup(rounds_patcher.stop)

    def session(self) -> Session:
        db = self.session_factory()
        self.addCleanup(db.close)
        return db


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db yields sessions on the test database."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db():
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    def signup(self, username: str, password: str = "123456", role: str = "admin"):
        return self.client.post(
            f"{API}/signup",
            json={"username": username, "password": password, "type": role},
        )

    def signin(self, username: str, password: str = "123456"):
        return self.client.post(
            f"{API}/signin",
            json={"username": username, "password": password},
        )

    def token_for(self, username: str, role: str = "admin") -> str:
        """Sign up and sign in; return the bearer token."""
        self.assertEqual(self.signup(username, role=role).status_code, 201)
        response = self.signin(username)
        self.assertEqual(response.status_code, 200)
        return response.json()["token"]

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
