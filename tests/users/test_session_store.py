from payroll_system.users.model import SessionUser
from payroll_system.users.session_store import InMemorySessionStore


def test_sessions_are_independent_and_destroyable():
    store = InMemorySessionStore()
    a = store.create(SessionUser(id=1, username="A", email="a@example.com"))
    b = store.create(SessionUser(id=2, username="B", email="b@example.com"))

    assert a != b
    assert len(store) == 2
    assert store.get(a).id == 1

    assert store.destroy(a) is True
    assert store.get(a) is None
    assert store.get(b).id == 2
    assert store.destroy(a) is False


def test_missing_session_id_reads_as_none():
    store = InMemorySessionStore()
    assert store.get(None) is None
    assert store.get("") is None
    assert store.destroy(None) is False
