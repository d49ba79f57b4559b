from dataclasses import asdict
from typing import List, Optional, Sequence

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.use_cases.moderation_use_cases import (
    is_flagged,
    list_posts,
    list_comments,
    delete_post,
    delete_comment,
    block_user_from_comment,
    auto_moderate_posts,
)
from infrastructure.db.sqlite_content import SQLiteContentRepository
from infrastructure.web.dependencies import get_content_repo, get_blocked_words, get_current_session
from infrastructure.web.schemas import Notice


router = APIRouter(prefix="", tags=["moderation"], dependencies=[Depends(get_current_session)])


class PostItem(BaseModel):
    id: int
    user_id: int
    content: str
    image_url: Optional[str] = None
    likes_count: int
    comments_count: int
    created_at: str
    flagged: bool

class CommentItem(BaseModel):
    id: int
    user_id: int
    post_id: int
    content: str
    status: str
    created_at: str
    flagged: bool

class ModerationResult(BaseModel):
    message: str
    count: int


@router.get("/posts", response_model=List[PostItem])
def get_posts(
    repo: SQLiteContentRepository = Depends(get_content_repo),
    blocked_words: Sequence[str] = Depends(get_blocked_words),
):
    return [PostItem(**asdict(p), flagged=is_flagged(p.content, blocked_words)) for p in list_posts(repo)]

@router.delete("/posts/{post_id}", response_model=Notice)
def remove_post(post_id: int, repo: SQLiteContentRepository = Depends(get_content_repo)):
    delete_post(repo, post_id)
    return Notice(message="Post deleted")

@router.post("/posts/auto-moderate", response_model=ModerationResult)
def post_auto_moderate(
    repo: SQLiteContentRepository = Depends(get_content_repo),
    blocked_words: Sequence[str] = Depends(get_blocked_words),
):
    count = auto_moderate_posts(repo, blocked_words)
    if count == 0:
        return ModerationResult(message="No posts contain blocked words", count=0)
    return ModerationResult(message=f"{count} post(s) deleted for blocked words", count=count)

@router.get("/comments", response_model=List[CommentItem])
def get_comments(
    repo: SQLiteContentRepository = Depends(get_content_repo),
    blocked_words: Sequence[str] = Depends(get_blocked_words),
):
    return [CommentItem(**asdict(c), flagged=is_flagged(c.content, blocked_words)) for c in list_comments(repo)]

@router.delete("/comments/{comment_id}", response_model=Notice)
def remove_comment(comment_id: int, repo: SQLiteContentRepository = Depends(get_content_repo)):
    delete_comment(repo, comment_id)
    return Notice(message="Comment deleted")

@router.post("/comments/block-user/{user_id}", response_model=ModerationResult)
def post_block_user_from_comment(user_id: int, repo: SQLiteContentRepository = Depends(get_content_repo)):
    removed = block_user_from_comment(repo, user_id)
    return ModerationResult(message="User blocked and their comments deleted", count=removed)
