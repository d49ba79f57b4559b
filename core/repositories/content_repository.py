from abc import ABC, abstractmethod
from typing import List
from core.entities.post import Post
from core.entities.comment import Comment


class ContentRepository(ABC):
    @abstractmethod
    def list_posts(self) -> List[Post]:...

    @abstractmethod
    def delete_post(self, post_id: int) -> None:...

    @abstractmethod
    def count_posts(self) -> int:...

    @abstractmethod
    def list_comments(self) -> List[Comment]:...

    @abstractmethod
    def delete_comment(self, comment_id: int) -> None:...

    @abstractmethod
    def count_comments(self) -> int:...

    # Блокировка автора и удаление всех его комментариев - одна атомарная операция
    @abstractmethod
    def block_user_and_purge_comments(self, user_id: int) -> int:...
