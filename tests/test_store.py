"""Unit tests for UserStore."""

import threading

import pytest

from users_api.app.core.store import User, UserStore


def test_new_store_is_empty(store):
    assert store.list() == []
    assert len(store) == 0


def test_list_keeps_insertion_order(store):
    users = [User(id=str(i), name=f"user-{i}xx", email=f"u{i}@x.com") for i in range(5)]
    for user in users:
        store.add(user)

    assert [u.id for u in store.list()] == ["0", "1", "2", "3", "4"]
    assert list(store) == store.list()


def test_get_and_find_by_email(store):
    user = User(id="a", name="Alice Smith", email="alice@example.com")
    store.add(user)

    assert store.get("a") is user
    assert store.get("missing") is None
    assert store.find_by_email("alice@example.com") is user
    # Email lookups are exact, case-sensitive matches.
    assert store.find_by_email("ALICE@example.com") is None


def test_add_rejects_duplicate_id(store):
    store.add(User(id="a", name="Alice Smith", email="alice@example.com"))
    with pytest.raises(ValueError):
        store.add(User(id="a", name="Other Name", email="other@example.com"))
    assert len(store) == 1


def test_add_rejects_duplicate_email(store):
    store.add(User(id="a", name="Alice Smith", email="alice@example.com"))
    with pytest.raises(ValueError):
        store.add(User(id="b", name="Other Name", email="alice@example.com"))
    assert store.get("b") is None


def test_remove_returns_record_and_frees_email(store):
    user = User(id="a", name="Alice Smith", email="alice@example.com")
    store.add(user)

    removed = store.remove(user)

    assert removed is user
    assert store.get("a") is None
    assert store.find_by_email("alice@example.com") is None
    store.add(User(id="b", name="Bob Builder", email="alice@example.com"))


def test_remove_unknown_user_raises(store):
    with pytest.raises(KeyError):
        store.remove(User(id="ghost", name="Nobody Here", email="ghost@example.com"))


def test_update_reindexes_email(store):
    user = User(id="a", name="Alice Smith", email="alice@example.com")
    store.add(user)

    updated = store.update(user, name="Alice Jones", email="alice.jones@example.com")

    assert updated is user
    assert user.name == "Alice Jones"
    assert store.find_by_email("alice.jones@example.com") is user
    assert store.find_by_email("alice@example.com") is None


def test_update_rejects_email_of_other_user(store):
    alice = User(id="a", name="Alice Smith", email="alice@example.com")
    bob = User(id="b", name="Bob Builder", email="bob@example.com")
    store.add(alice)
    store.add(bob)

    with pytest.raises(ValueError):
        store.update(bob, email="alice@example.com")
    assert bob.email == "bob@example.com"


def test_update_with_same_email_is_allowed(store):
    user = User(id="a", name="Alice Smith", email="alice@example.com")
    store.add(user)

    store.update(user, email="alice@example.com")

    assert store.find_by_email("alice@example.com") is user


def test_clear(store):
    store.add(User(id="a", name="Alice Smith", email="alice@example.com"))
    store.clear()
    assert len(store) == 0
    assert store.find_by_email("alice@example.com") is None


def test_get_waits_for_lock_holder(store):
    store.add(User(id="a", name="Alice Smith", email="alice@example.com"))
    results = []

    with store.lock:
        reader = threading.Thread(target=lambda: results.append(store.get("a")))
        reader.start()
        reader.join(timeout=0.2)
        assert reader.is_alive()

    reader.join(timeout=2)
    assert not reader.is_alive()
    assert results[0].email == "alice@example.com"
