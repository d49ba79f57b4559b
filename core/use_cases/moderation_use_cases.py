from typing import Iterable, List, Optional, Sequence, TypeVar

from loguru import logger

from core.entities.comment import Comment
from core.entities.post import Post
from core.errors import MutationFailure
from core.repositories.content_repository import ContentRepository


T = TypeVar("T", Post, Comment)


def is_flagged(text: Optional[str], blocked_words: Sequence[str]) -> bool:
    """Подстрока без учёта регистра, не по границам слов: "sial" ловит и "sialan"."""
    if not text:
        return False
    lowered = text.lower()
    return any(word and word.lower() in lowered for word in blocked_words)


def flagged_subset(items: Iterable[T], blocked_words: Sequence[str]) -> List[T]:
    return [item for item in items if is_flagged(item.content, blocked_words)]


def list_posts(repo: ContentRepository) -> List[Post]:
    return repo.list_posts()


def list_comments(repo: ContentRepository) -> List[Comment]:
    return repo.list_comments()


def delete_post(repo: ContentRepository, post_id: int) -> None:
    repo.delete_post(post_id)
    logger.info(f"Post {post_id} deleted")


def delete_comment(repo: ContentRepository, comment_id: int) -> None:
    repo.delete_comment(comment_id)
    logger.info(f"Comment {comment_id} deleted")


def block_user_from_comment(repo: ContentRepository, user_id: int) -> int:
    removed = repo.block_user_and_purge_comments(user_id)
    logger.info(f"User {user_id} blocked from comments view, {removed} comment(s) removed")
    return removed


def auto_moderate_posts(repo: ContentRepository, blocked_words: Sequence[str]) -> int:
    posts = repo.list_posts()
    to_delete = flagged_subset(posts, blocked_words)
    if not to_delete:
        logger.info("Auto-moderation: no flagged posts")
        return 0

    deleted = 0
    for post in to_delete:
        try:
            repo.delete_post(post.id)
        except MutationFailure as e:
            logger.error(f"Auto-moderation stopped at post {post.id} after {deleted} deletion(s): {e}")
            raise MutationFailure(
                f"Auto-moderation failed after deleting {deleted} of {len(to_delete)} flagged posts"
            ) from e
        deleted += 1

    logger.info(f"Auto-moderation deleted {deleted} flagged post(s)")
    return deleted
