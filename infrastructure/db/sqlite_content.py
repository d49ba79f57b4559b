import sqlite3
from typing import List

from core.entities.post import Post
from core.entities.comment import Comment
from core.errors import RecordNotFound
from core.repositories.content_repository import ContentRepository
from infrastructure.db.sqlite import reading, writing, utcnow


class SQLiteContentRepository(ContentRepository):
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self.conn.row_factory = sqlite3.Row

    def _row_to_post(self, row: sqlite3.Row) -> Post:
        return Post(
            id=row["id"],
            user_id=row["user_id"],
            content=row["content"],
            image_url=row["image_url"],
            likes_count=int(row["likes_count"]),
            comments_count=int(row["comments_count"]),
            created_at=row["created_at"],
        )

    def _row_to_comment(self, row: sqlite3.Row) -> Comment:
        return Comment(
            id=row["id"],
            user_id=row["user_id"],
            post_id=row["post_id"],
            content=row["content"],
            status=row["status"],
            created_at=row["created_at"],
        )

    def list_posts(self) -> List[Post]:
        with reading("posts"):
            rows = self.conn.execute("SELECT * FROM posts ORDER BY created_at DESC, id DESC").fetchall()
        return [self._row_to_post(r) for r in rows]

    def delete_post(self, post_id: int) -> None:
        with writing(self.conn, "delete post") as cur:
            cur.execute("DELETE FROM posts WHERE id = ?", (int(post_id),))
            if cur.rowcount == 0:
                raise RecordNotFound("Post not found")

    def count_posts(self) -> int:
        with reading("post count"):
            return int(self.conn.execute("SELECT COUNT(*) FROM posts").fetchone()[0])

    def list_comments(self) -> List[Comment]:
        with reading("comments"):
            rows = self.conn.execute("SELECT * FROM comments ORDER BY created_at DESC, id DESC").fetchall()
        return [self._row_to_comment(r) for r in rows]

    def delete_comment(self, comment_id: int) -> None:
        with writing(self.conn, "delete comment") as cur:
            cur.execute("DELETE FROM comments WHERE id = ?", (int(comment_id),))
            if cur.rowcount == 0:
                raise RecordNotFound("Comment not found")

    def count_comments(self) -> int:
        with reading("comment count"):
            return int(self.conn.execute("SELECT COUNT(*) FROM comments").fetchone()[0])

    def block_user_and_purge_comments(self, user_id: int) -> int:
        with writing(self.conn, "block user") as cur:
            cur.execute(
                "UPDATE users SET status = 'blocked', updated_at = ? WHERE id = ?",
                (utcnow(), int(user_id)),
            )
            if cur.rowcount == 0:
                raise RecordNotFound("User not found")
            cur.execute("DELETE FROM comments WHERE user_id = ?", (int(user_id),))
            return cur.rowcount
