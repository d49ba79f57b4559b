import json
import sqlite3
from dataclasses import asdict, fields
from typing import List, Dict, Any

from core.entities.package import Package
from core.entities.announcement import Announcement
from core.entities.app_settings import AppSettings
from core.errors import RecordNotFound
from core.repositories.catalog_repository import PackageRepository, AnnouncementRepository, SettingsRepository
from infrastructure.db.sqlite import reading, writing, utcnow


class SQLitePackageRepository(PackageRepository):
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self.conn.row_factory = sqlite3.Row

    def _row_to_package(self, row: sqlite3.Row) -> Package:
        try:
            features = json.loads(row["features"]) if row["features"] else []
        except ValueError:
            features = []
        return Package(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            price=int(row["price"]),
            duration_days=int(row["duration_days"]),
            features=[str(f) for f in features] if isinstance(features, list) else [],
            is_active=bool(row["is_active"]),
            created_at=row["created_at"],
        )

    def _get(self, package_id: int) -> Package:
        with reading("package"):
            row = self.conn.execute("SELECT * FROM packages WHERE id = ?", (int(package_id),)).fetchone()
        if row is None:
            raise RecordNotFound("Package not found")
        return self._row_to_package(row)

    def list_packages(self) -> List[Package]:
        with reading("packages"):
            rows = self.conn.execute("SELECT * FROM packages ORDER BY price ASC, id ASC").fetchall()
        return [self._row_to_package(r) for r in rows]

    def create_package(self, data: Dict[str, Any]) -> Package:
        with writing(self.conn, "save package") as cur:
            cur.execute(
                "INSERT INTO packages (name, description, price, duration_days, features, is_active, created_at) "
                "VALUES (?, ?, ?, ?, ?, ?, ?)",
                (data["name"], data["description"], data["price"], data["duration_days"],
                 json.dumps(data["features"], ensure_ascii=False), 1 if data["is_active"] else 0, utcnow()),
            )
            package_id = cur.lastrowid
        return self._get(package_id)

    def update_package(self, package_id: int, data: Dict[str, Any]) -> Package:
        columns = ["name = ?", "description = ?", "price = ?", "duration_days = ?", "features = ?"]
        params = [data["name"], data["description"], data["price"], data["duration_days"],
                  json.dumps(data["features"], ensure_ascii=False)]
        # без is_active в data колонка не меняется
        if data.get("is_active") is not None:
            columns.append("is_active = ?")
            params.append(1 if data["is_active"] else 0)
        with writing(self.conn, "save package") as cur:
            cur.execute(
                f"UPDATE packages SET {', '.join(columns)} WHERE id = ?",
                (*params, int(package_id)),
            )
            if cur.rowcount == 0:
                raise RecordNotFound("Package not found")
        return self._get(package_id)

    def delete_package(self, package_id: int) -> None:
        with writing(self.conn, "delete package") as cur:
            cur.execute("DELETE FROM packages WHERE id = ?", (int(package_id),))
            if cur.rowcount == 0:
                raise RecordNotFound("Package not found")


class SQLiteAnnouncementRepository(AnnouncementRepository):
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self.conn.row_factory = sqlite3.Row

    def _row_to_announcement(self, row: sqlite3.Row) -> Announcement:
        return Announcement(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            type=row["type"],
            is_active=bool(row["is_active"]),
            created_at=row["created_at"],
        )

    def list_announcements(self) -> List[Announcement]:
        with reading("announcements"):
            rows = self.conn.execute(
                "SELECT * FROM announcements ORDER BY created_at DESC, id DESC"
            ).fetchall()
        return [self._row_to_announcement(r) for r in rows]

    def create_announcement(self, title: str, content: str, type: str, is_active: bool) -> Announcement:
        with writing(self.conn, "send announcement") as cur:
            cur.execute(
                "INSERT INTO announcements (title, content, type, is_active, created_at) VALUES (?, ?, ?, ?, ?)",
                (title, content, type, 1 if is_active else 0, utcnow()),
            )
            announcement_id = cur.lastrowid
        return self.get_announcement(announcement_id)

    def get_announcement(self, announcement_id: int) -> Announcement:
        with reading("announcement"):
            row = self.conn.execute(
                "SELECT * FROM announcements WHERE id = ?", (int(announcement_id),)
            ).fetchone()
        if row is None:
            raise RecordNotFound("Announcement not found")
        return self._row_to_announcement(row)

    def set_active(self, announcement_id: int, is_active: bool) -> Announcement:
        with writing(self.conn, "update announcement") as cur:
            cur.execute(
                "UPDATE announcements SET is_active = ? WHERE id = ?",
                (1 if is_active else 0, int(announcement_id)),
            )
            if cur.rowcount == 0:
                raise RecordNotFound("Announcement not found")
        return self.get_announcement(announcement_id)


class SQLiteSettingsRepository(SettingsRepository):
    """Настройки хранятся как key/value, отсутствующие ключи берутся из AppSettings()"""
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self.conn.row_factory = sqlite3.Row

    def load(self) -> AppSettings:
        with reading("settings"):
            rows = self.conn.execute("SELECT key, value FROM app_settings").fetchall()
        known = {f.name for f in fields(AppSettings)}
        stored = {r["key"]: r["value"] for r in rows if r["key"] in known}
        return AppSettings(**stored)

    def save(self, app_settings: AppSettings) -> AppSettings:
        with writing(self.conn, "save settings") as cur:
            cur.executemany(
                "INSERT INTO app_settings (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                list(asdict(app_settings).items()),
            )
        return self.load()
