"""
Tests for operator accounts and session expiry
"""
from datetime import datetime, timedelta, timezone

import pytest

from core.entities.session import AdminSession
from core.errors import ValidationFailure
from core.use_cases.auth_use_cases import register_operator, authenticate_operator, ensure_operator


def test_password_is_stored_hashed(operator_repo):
    op = register_operator(operator_repo, "Admin@ArvinMatch.com ", "s3cret-pass")
    assert op.email == "admin@arvinmatch.com"
    assert op.password_hash != "s3cret-pass"


def test_duplicate_operator(operator_repo):
    register_operator(operator_repo, "admin@arvinmatch.com", "one")
    with pytest.raises(ValidationFailure):
        register_operator(operator_repo, "ADMIN@arvinmatch.com", "two")


def test_authenticate(operator_repo):
    op = register_operator(operator_repo, "admin@arvinmatch.com", "s3cret-pass")
    assert authenticate_operator(operator_repo, "admin@arvinmatch.com", "s3cret-pass").id == op.id
    assert authenticate_operator(operator_repo, "admin@arvinmatch.com", "wrong") is None
    assert authenticate_operator(operator_repo, "nobody@arvinmatch.com", "s3cret-pass") is None


def test_ensure_operator_is_idempotent(operator_repo):
    first = ensure_operator(operator_repo, "boot@arvinmatch.com", "pw")
    second = ensure_operator(operator_repo, "boot@arvinmatch.com", "other")
    assert first.id == second.id


def test_ensure_operator_without_credentials(operator_repo):
    assert ensure_operator(operator_repo, "", "") is None


def test_session_expiry():
    now = datetime.now(timezone.utc)
    session = AdminSession(operator_id=1, email="a@b.com", issued_at=now, expires_at=now + timedelta(minutes=5))
    assert not session.is_expired(now)
    assert session.is_expired(now + timedelta(minutes=5))
