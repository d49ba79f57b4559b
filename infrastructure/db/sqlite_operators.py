import sqlite3
from typing import Optional

from core.entities.operator import Operator
from core.repositories.operator_repository import OperatorRepository
from infrastructure.db.sqlite import reading, writing, utcnow


class SQLiteOperatorRepository(OperatorRepository):
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self.conn.row_factory = sqlite3.Row

    def _row_to_operator(self, row: sqlite3.Row) -> Operator:
        return Operator(
            id=row["id"],
            email=row["email"],
            password_hash=row["password_hash"],
            created_at=row["created_at"],
        )

    def create_operator(self, email: str, password_hash: str) -> Operator:
        created_at = utcnow()
        with writing(self.conn, "create operator") as cur:
            cur.execute(
                "INSERT INTO operators (email, password_hash, created_at) VALUES (?, ?, ?)",
                (email, password_hash, created_at),
            )
            operator_id = cur.lastrowid
        return Operator(id=operator_id, email=email, password_hash=password_hash, created_at=created_at)

    def get_by_email(self, email: str) -> Optional[Operator]:
        with reading("operator"):
            row = self.conn.execute("SELECT * FROM operators WHERE email = ?", (email,)).fetchone()
        return self._row_to_operator(row) if row else None

    def get_by_id(self, operator_id: int) -> Optional[Operator]:
        with reading("operator"):
            row = self.conn.execute("SELECT * FROM operators WHERE id = ?", (int(operator_id),)).fetchone()
        return self._row_to_operator(row) if row else None
