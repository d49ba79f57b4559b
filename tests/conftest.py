"""
Pytest fixtures: a fresh SQLite store per test and an authenticated API client
"""
import sqlite3

import pytest
from fastapi.testclient import TestClient

from config.settings import settings
from core.use_cases.auth_use_cases import register_operator
from infrastructure.db.sqlite import init_db, connect, utcnow, SQLiteUserRepository
from infrastructure.db.sqlite_content import SQLiteContentRepository
from infrastructure.db.sqlite_catalog import (
    SQLitePackageRepository,
    SQLiteAnnouncementRepository,
    SQLiteSettingsRepository,
)
from infrastructure.db.sqlite_operators import SQLiteOperatorRepository
from main import app


OPERATOR_EMAIL = "ops@arvinmatch.com"
OPERATOR_PASSWORD = "correct horse battery"


class Seeder:
    """Rows the app itself would create; the admin API never inserts them"""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def user(self, username="budi", role="user", status="active", balance=0, is_premium=False) -> int:
        now = utcnow()
        cur = self.conn.execute(
            "INSERT INTO users (username, email, role, status, balance, is_premium, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            (username, f"{username}@mail.test", role, status, balance, 1 if is_premium else 0, now, now),
        )
        self.conn.commit()
        return cur.lastrowid

    def post(self, user_id: int, content: str) -> int:
        cur = self.conn.execute(
            "INSERT INTO posts (user_id, content, created_at) VALUES (?, ?, ?)",
            (user_id, content, utcnow()),
        )
        self.conn.commit()
        return cur.lastrowid

    def comment(self, user_id: int, post_id: int, content: str) -> int:
        cur = self.conn.execute(
            "INSERT INTO comments (user_id, post_id, content, created_at) VALUES (?, ?, ?, ?)",
            (user_id, post_id, content, utcnow()),
        )
        self.conn.commit()
        return cur.lastrowid

    def transaction(self, user_id: int, amount: int, type="top_up", status="completed") -> int:
        cur = self.conn.execute(
            "INSERT INTO transactions (user_id, type, amount, status, created_at) VALUES (?, ?, ?, ?, ?)",
            (user_id, type, amount, status, utcnow()),
        )
        self.conn.commit()
        return cur.lastrowid

    def fail_on(self, table: str, event: str) -> None:
        """Make every `event` (INSERT/UPDATE/DELETE) on `table` fail inside the store"""
        self.conn.execute(
            f"CREATE TRIGGER fail_{event.lower()}_{table} BEFORE {event} ON {table} "
            f"BEGIN SELECT RAISE(ABORT, 'store unavailable'); END;"
        )
        self.conn.commit()

    def count(self, table: str, where: str = "1=1", params=()) -> int:
        return self.conn.execute(f"SELECT COUNT(*) FROM {table} WHERE {where}", params).fetchone()[0]


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = str(tmp_path / "admin.db")
    monkeypatch.setattr(settings, "DB_PATH", path)
    init_db(path)
    return path


@pytest.fixture
def conn(db_path):
    connection = connect(db_path)
    yield connection
    connection.close()


@pytest.fixture
def seed(conn):
    return Seeder(conn)


@pytest.fixture
def user_repo(conn):
    return SQLiteUserRepository(conn)


@pytest.fixture
def content_repo(conn):
    return SQLiteContentRepository(conn)


@pytest.fixture
def package_repo(conn):
    return SQLitePackageRepository(conn)


@pytest.fixture
def announcement_repo(conn):
    return SQLiteAnnouncementRepository(conn)


@pytest.fixture
def settings_repo(conn):
    return SQLiteSettingsRepository(conn)


@pytest.fixture
def operator_repo(conn):
    return SQLiteOperatorRepository(conn)


@pytest.fixture
def operator(operator_repo):
    return register_operator(operator_repo, OPERATOR_EMAIL, OPERATOR_PASSWORD)


@pytest.fixture
def client(db_path):
    return TestClient(app)


@pytest.fixture
def auth_client(client, operator):
    response = client.post("/login", auth=(OPERATOR_EMAIL, OPERATOR_PASSWORD))
    assert response.status_code == 200
    client.headers["Authorization"] = f"Bearer {response.json()['access_token']}"
    return client
