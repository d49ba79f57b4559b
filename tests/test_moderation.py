"""
Tests for the content moderation policy: flag detection, deletes,
block-from-comment and bulk auto-moderation
"""
import pytest

from config.settings import DEFAULT_BLOCKED_WORDS
from core.entities.comment import Comment
from core.entities.post import Post
from core.errors import MutationFailure, RecordNotFound
from core.repositories.content_repository import ContentRepository
from core.use_cases.moderation_use_cases import (
    is_flagged,
    flagged_subset,
    list_posts,
    list_comments,
    delete_post,
    delete_comment,
    block_user_from_comment,
    auto_moderate_posts,
)


WORDS = DEFAULT_BLOCKED_WORDS.split(",")


class InMemoryContentRepository(ContentRepository):
    def __init__(self, posts, fail_on_id=None):
        self.posts = list(posts)
        self.deleted = []
        self.fail_on_id = fail_on_id

    def list_posts(self):
        return list(self.posts)

    def delete_post(self, post_id):
        if post_id == self.fail_on_id:
            raise MutationFailure("Failed to delete post")
        self.deleted.append(post_id)
        self.posts = [p for p in self.posts if p.id != post_id]

    def count_posts(self):
        return len(self.posts)

    def list_comments(self):
        return []

    def delete_comment(self, comment_id):
        raise NotImplementedError

    def count_comments(self):
        return 0

    def block_user_and_purge_comments(self, user_id):
        raise NotImplementedError


def test_empty_text_is_not_flagged():
    assert not is_flagged("", WORDS)
    assert not is_flagged(None, WORDS)


def test_flag_is_case_insensitive_substring():
    assert is_flagged("ANJING123", WORDS)
    assert is_flagged("Dasar Bodoh!", WORDS)


def test_substring_inside_longer_word_is_flagged():
    # "sial" inside "sosialisasi": substring matching, not word boundaries
    assert is_flagged("acara sosialisasi kampus", WORDS)


def test_clean_text_is_not_flagged():
    assert not is_flagged("Selamat pagi, semoga harimu menyenangkan", WORDS)


def test_custom_word_list():
    assert is_flagged("that is Rude", ["rude"])
    assert not is_flagged("anjing", ["rude"])


def test_flagged_subset_keeps_order():
    posts = [
        Post(id=1, user_id=1, content="halo"),
        Post(id=2, user_id=1, content="kamu tolol"),
        Post(id=3, user_id=1, content="GOBLOK"),
    ]
    assert [p.id for p in flagged_subset(posts, WORDS)] == [2, 3]


def test_flagged_subset_works_for_comments():
    comments = [Comment(id=1, user_id=1, post_id=1, content="idiot"), Comment(id=2, user_id=1, post_id=1, content="ok")]
    assert [c.id for c in flagged_subset(comments, WORDS)] == [1]


def test_auto_moderation_without_flagged_posts_deletes_nothing():
    repo = InMemoryContentRepository([Post(id=1, user_id=1, content="halo"), Post(id=2, user_id=2, content="apa kabar")])
    assert auto_moderate_posts(repo, WORDS) == 0
    assert repo.deleted == []


def test_auto_moderation_on_empty_store():
    repo = InMemoryContentRepository([])
    assert auto_moderate_posts(repo, WORDS) == 0
    assert repo.deleted == []


def test_auto_moderation_deletes_each_flagged_post():
    repo = InMemoryContentRepository([
        Post(id=1, user_id=1, content="babi"),
        Post(id=2, user_id=1, content="halo"),
        Post(id=3, user_id=2, content="Bangsat"),
    ])
    assert auto_moderate_posts(repo, WORDS) == 2
    assert repo.deleted == [1, 3]
    assert [p.id for p in repo.posts] == [2]


def test_auto_moderation_stops_on_failure():
    repo = InMemoryContentRepository(
        [Post(id=1, user_id=1, content="babi"), Post(id=2, user_id=1, content="tolol"), Post(id=3, user_id=1, content="sial")],
        fail_on_id=2,
    )
    with pytest.raises(MutationFailure, match="after deleting 1 of 3"):
        auto_moderate_posts(repo, WORDS)
    assert repo.deleted == [1]


def test_auto_moderation_against_sqlite(seed, content_repo):
    uid = seed.user()
    seed.post(uid, "halo semua")
    seed.post(uid, "dasar IDIOT")
    assert auto_moderate_posts(content_repo, WORDS) == 1
    assert [p.content for p in content_repo.list_posts()] == ["halo semua"]


def test_delete_post_removes_only_that_post(seed, content_repo):
    uid = seed.user()
    keep = seed.post(uid, "satu")
    drop = seed.post(uid, "dua")
    delete_post(content_repo, drop)
    assert [p.id for p in content_repo.list_posts()] == [keep]


def test_comments_survive_post_delete(seed, content_repo):
    author = seed.user("author")
    reader = seed.user("reader")
    pid = seed.post(author, "dua")
    cid = seed.comment(reader, pid, "mantap")
    delete_post(content_repo, pid)
    assert seed.count("comments") == 1
    assert [c.id for c in list_comments(content_repo)] == [cid]


def test_comments_survive_auto_moderation(seed, content_repo):
    uid = seed.user()
    pid = seed.post(uid, "dasar anjing")
    seed.comment(uid, pid, "setuju")
    assert auto_moderate_posts(content_repo, WORDS) == 1
    assert list_posts(content_repo) == []
    assert [c.content for c in list_comments(content_repo)] == ["setuju"]


def test_delete_missing_post(content_repo):
    with pytest.raises(RecordNotFound):
        delete_post(content_repo, 999)


def test_delete_comment(seed, content_repo):
    uid = seed.user()
    pid = seed.post(uid, "post")
    c1 = seed.comment(uid, pid, "a")
    c2 = seed.comment(uid, pid, "b")
    delete_comment(content_repo, c1)
    assert [c.id for c in content_repo.list_comments()] == [c2]


def test_block_from_comment_blocks_and_purges_all_comments(seed, content_repo, user_repo):
    offender = seed.user("offender")
    other = seed.user("other")
    pid = seed.post(other, "post")
    seed.comment(offender, pid, "kamu bodoh")
    seed.comment(offender, pid, "komentar biasa")
    kept = seed.comment(other, pid, "halo")

    removed = block_user_from_comment(content_repo, offender)

    assert removed == 2
    assert user_repo.get_by_id(offender).status == "blocked"
    assert seed.count("comments", "user_id = ?", (offender,)) == 0
    assert [c.id for c in content_repo.list_comments()] == [kept]


def test_block_from_comment_is_atomic(seed, content_repo, user_repo):
    offender = seed.user("offender")
    pid = seed.post(offender, "post")
    seed.comment(offender, pid, "tolol")
    seed.fail_on("comments", "DELETE")

    with pytest.raises(MutationFailure):
        block_user_from_comment(content_repo, offender)

    assert user_repo.get_by_id(offender).status == "active"
    assert seed.count("comments", "user_id = ?", (offender,)) == 1


def test_block_from_comment_unknown_user(content_repo):
    with pytest.raises(RecordNotFound):
        block_user_from_comment(content_repo, 404)
