from __future__ import annotations

import pytest

from payroll_system.core.exceptions import AuthenticationError, ConflictError, ValidationError
from payroll_system.users.service import AuthService
from payroll_system.users.session_store import InMemorySessionStore

FAST_HASH = "pbkdf2:sha256:1000"


def _svc(users_repo, sessions=None):
    return AuthService(users_repo, sessions or InMemorySessionStore(), hash_method=FAST_HASH)


def test_register_trims_username_and_hashes_password(users_repo):
    svc = _svc(users_repo)
    uid = svc.register(firstname="  Ada ", lastname=" Lovelace  ", email="ada@example.com", password="s3cret")

    user = users_repo.get_by_email("ada@example.com")
    assert user.id == uid
    assert user.username == "Ada Lovelace"
    assert user.password_hash != "s3cret"
    assert user.password_hash.startswith("pbkdf2:sha256")


def test_register_accepts_non_string_names(users_repo):
    svc = _svc(users_repo)
    svc.register(firstname=123, lastname="Lovelace", email="ada@example.com", password="s3cret")

    assert users_repo.get_by_email("ada@example.com").username == "123 Lovelace"


def test_register_duplicate_email_conflicts(users_repo):
    svc = _svc(users_repo)
    svc.register(firstname="Ada", lastname="Lovelace", email="ada@example.com", password="one")

    with pytest.raises(ConflictError) as exc:
        svc.register(firstname="Ada", lastname="King", email="ada@example.com", password="two")

    assert str(exc.value) == "Email already registered"


def test_register_requires_all_fields(users_repo):
    svc = _svc(users_repo)
    with pytest.raises(ValidationError):
        svc.register(firstname="Ada", lastname="", email="ada@example.com", password="x")


def test_wrong_password_and_unknown_email_fail_identically(users_repo):
    svc = _svc(users_repo)
    svc.register(firstname="Ada", lastname="Lovelace", email="ada@example.com", password="right")

    with pytest.raises(AuthenticationError) as wrong_pw:
        svc.authenticate(email="ada@example.com", password="wrong")
    with pytest.raises(AuthenticationError) as unknown:
        svc.authenticate(email="nobody@example.com", password="right")

    assert str(wrong_pw.value) == str(unknown.value) == "Invalid credentials"


def test_login_opens_session_without_hash(users_repo):
    sessions = InMemorySessionStore()
    svc = _svc(users_repo, sessions)
    svc.register(firstname="Ada", lastname="Lovelace", email="ada@example.com", password="right")

    user, session_id = svc.login(email="ada@example.com", password="right")

    assert user.to_dict() == {"id": 1, "username": "Ada Lovelace", "email": "ada@example.com"}
    assert svc.current_user(session_id) == user

    svc.logout(session_id)
    with pytest.raises(AuthenticationError):
        svc.current_user(session_id)


def test_placeholder_hash_never_matches(users_repo):
    users_repo.create_user(username="Legacy", email="legacy@example.com", password_hash="CHANGE_ME")
    svc = _svc(users_repo)

    with pytest.raises(AuthenticationError):
        svc.authenticate(email="legacy@example.com", password="CHANGE_ME")
