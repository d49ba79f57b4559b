import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional, List, Tuple, Iterator
from pathlib import Path

from loguru import logger

from core.entities.user import User
from core.entities.transaction import Transaction
from core.errors import FetchFailure, MutationFailure, RecordNotFound
from core.repositories.user_repository import UserRepository


SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT UNIQUE NOT NULL,
    email TEXT UNIQUE NOT NULL,
    full_name TEXT,
    phone TEXT,
    bio TEXT,
    role TEXT NOT NULL DEFAULT 'user',
    status TEXT NOT NULL DEFAULT 'active',
    balance INTEGER NOT NULL DEFAULT 0 CHECK (balance >= 0),
    is_premium INTEGER NOT NULL DEFAULT 0,
    premium_until TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS posts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL,
    content TEXT NOT NULL,
    image_url TEXT,
    likes_count INTEGER NOT NULL DEFAULT 0,
    comments_count INTEGER NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL,
    FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS comments (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL,
    post_id INTEGER NOT NULL,
    content TEXT NOT NULL,
    status TEXT NOT NULL DEFAULT 'active',
    created_at TEXT NOT NULL,
    FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS transactions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL,
    type TEXT NOT NULL,
    amount INTEGER NOT NULL CHECK (amount > 0),
    status TEXT NOT NULL DEFAULT 'pending',
    description TEXT,
    created_at TEXT NOT NULL,
    FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS packages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    price INTEGER NOT NULL CHECK (price > 0),
    duration_days INTEGER NOT NULL CHECK (duration_days > 0),
    features TEXT NOT NULL DEFAULT '[]',
    is_active INTEGER NOT NULL DEFAULT 1,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS announcements (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    type TEXT NOT NULL DEFAULT 'general',
    is_active INTEGER NOT NULL DEFAULT 1,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS operators (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    email TEXT UNIQUE NOT NULL,
    password_hash TEXT NOT NULL,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS app_settings (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


def utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def connect(db_path: str) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_db(db_path: str) -> None:
    if db_path != ":memory:" and not db_path.startswith("file:"):
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = connect(db_path)
    try:
        conn.executescript(SCHEMA)
        conn.commit()
    finally:
        conn.close()
    logger.info(f"Database ready at {db_path}")


@contextmanager
def reading(what: str) -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as e:
        logger.exception(f"Failed to load {what}")
        raise FetchFailure(f"Failed to load {what}") from e


@contextmanager
def writing(conn: sqlite3.Connection, what: str) -> Iterator[sqlite3.Cursor]:
    """Один вызов - одна транзакция: commit при успехе, rollback при любой ошибке"""
    try:
        with conn:
            yield conn.cursor()
    except sqlite3.Error as e:
        logger.exception(f"Failed to {what}")
        raise MutationFailure(f"Failed to {what}") from e


class SQLiteUserRepository(UserRepository):
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self.conn.row_factory = sqlite3.Row

    def _row_to_user(self, row: sqlite3.Row) -> User:
        return User(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            role=row["role"],
            status=row["status"],
            balance=int(row["balance"]),
            is_premium=bool(row["is_premium"]),
            premium_until=row["premium_until"],
            full_name=row["full_name"],
            phone=row["phone"],
            bio=row["bio"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def _row_to_tx(self, row: sqlite3.Row) -> Transaction:
        return Transaction(
            id=row["id"],
            user_id=row["user_id"],
            type=row["type"],
            amount=int(row["amount"]),
            status=row["status"],
            description=row["description"],
            created_at=row["created_at"],
        )

    def list_users(self) -> List[User]:
        with reading("users"):
            rows = self.conn.execute("SELECT * FROM users ORDER BY created_at DESC, id DESC").fetchall()
        return [self._row_to_user(r) for r in rows]

    def list_user_choices(self) -> List[Tuple[int, str, str]]:
        with reading("users"):
            rows = self.conn.execute("SELECT id, username, email FROM users ORDER BY username").fetchall()
        return [(r["id"], r["username"], r["email"]) for r in rows]

    def get_by_id(self, user_id: int) -> Optional[User]:
        with reading("user"):
            row = self.conn.execute("SELECT * FROM users WHERE id = ?", (int(user_id),)).fetchone()
        return self._row_to_user(row) if row else None

    def _update_field(self, user_id: int, column: str, value: str) -> User:
        with writing(self.conn, f"update user {column}") as cur:
            cur.execute(
                f"UPDATE users SET {column} = ?, updated_at = ? WHERE id = ?",
                (value, utcnow(), int(user_id)),
            )
            if cur.rowcount == 0:
                raise RecordNotFound("User not found")
        user = self.get_by_id(user_id)
        assert user is not None
        return user

    def update_status(self, user_id: int, status: str) -> User:
        return self._update_field(user_id, "status", status)

    def update_role(self, user_id: int, role: str) -> User:
        return self._update_field(user_id, "role", role)

    def credit_with_transaction(self, user_id: int, amount: int, type: str, status: str,
                                description: Optional[str] = None) -> Tuple[User, Transaction]:
        created_at = utcnow()
        with writing(self.conn, "add balance") as cur:
            cur.execute("SELECT id FROM users WHERE id = ?", (int(user_id),))
            if cur.fetchone() is None:
                raise RecordNotFound("User not found")
            # сначала запись в журнал, затем баланс - в одной транзакции
            cur.execute(
                "INSERT INTO transactions (user_id, type, amount, status, description, created_at) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (int(user_id), type, int(amount), status, description, created_at),
            )
            tx_id = cur.lastrowid
            cur.execute(
                "UPDATE users SET balance = balance + ?, updated_at = ? WHERE id = ?",
                (int(amount), created_at, int(user_id)),
            )
        user = self.get_by_id(user_id)
        assert user is not None
        tx = Transaction(id=tx_id, user_id=int(user_id), type=type, amount=int(amount),
                         status=status, description=description, created_at=created_at)
        return user, tx

    def get_transaction(self, tx_id: int) -> Optional[Transaction]:
        with reading("transaction"):
            row = self.conn.execute("SELECT * FROM transactions WHERE id = ?", (int(tx_id),)).fetchone()
        return self._row_to_tx(row) if row else None

    def delete_transaction(self, tx_id: int) -> None:
        with writing(self.conn, "cancel transaction") as cur:
            cur.execute("DELETE FROM transactions WHERE id = ?", (int(tx_id),))
            if cur.rowcount == 0:
                raise RecordNotFound("Transaction not found")

    def list_transactions(self) -> List[Transaction]:
        with reading("transactions"):
            rows = self.conn.execute(
                "SELECT * FROM transactions ORDER BY created_at DESC, id DESC"
            ).fetchall()
        return [self._row_to_tx(r) for r in rows]
