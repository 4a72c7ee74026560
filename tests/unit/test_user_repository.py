"""
UserRepository tests.
Verify CRUD operations against a real SQLite file.
"""

import asyncio

import pytest

from db.errors import ConstraintError
from models.user import User


def _create(repo, name, email):
    return asyncio.run(repo.create(name, email))


class TestCreate:

    def test_create_assigns_id(self, user_repository):
        result = _create(user_repository, "Ana", "ana@x.com")

        assert result.last_inserted_id == 1
        assert result.rows_affected == 1

    def test_create_duplicate_email_fails(self, user_repository):
        _create(user_repository, "Ana", "ana@x.com")

        with pytest.raises(ConstraintError):
            _create(user_repository, "Bea", "ana@x.com")

        assert asyncio.run(user_repository.find_one(1)) == User(1, "Ana", "ana@x.com")
        assert len(asyncio.run(user_repository.find_all())) == 1


class TestRead:

    def test_find_one(self, user_repository):
        new_id = _create(user_repository, "Ana", "ana@x.com").last_inserted_id

        user = asyncio.run(user_repository.find_one(new_id))

        assert user == User(id=new_id, name="Ana", email="ana@x.com")

    def test_find_one_missing(self, user_repository):
        assert asyncio.run(user_repository.find_one(99)) is None

    def test_find_all_returns_every_user(self, user_repository):
        emails = [f"user{i}@x.com" for i in range(5)]
        for i, email in enumerate(emails):
            _create(user_repository, f"User {i}", email)

        users = asyncio.run(user_repository.find_all())

        assert len(users) == 5
        assert sorted(u.email for u in users) == sorted(emails)

    def test_find_all_empty(self, user_repository):
        assert asyncio.run(user_repository.find_all()) == []


class TestUpdate:

    def test_update_changes_only_target(self, user_repository):
        _create(user_repository, "Ana", "ana@x.com")
        _create(user_repository, "Bea", "bea@x.com")

        rows = asyncio.run(user_repository.update(1, "Ana Maria", "anamaria@x.com"))

        assert rows == 1
        assert asyncio.run(user_repository.find_one(1)) == User(1, "Ana Maria", "anamaria@x.com")
        assert asyncio.run(user_repository.find_one(2)) == User(2, "Bea", "bea@x.com")

    def test_update_none_keeps_stored_value(self, user_repository):
        _create(user_repository, "Ana", "ana@x.com")

        asyncio.run(user_repository.update(1, "Ana Maria", None))

        assert asyncio.run(user_repository.find_one(1)) == User(1, "Ana Maria", "ana@x.com")

    def test_update_missing_id(self, user_repository):
        rows = asyncio.run(user_repository.update(7, "Ghost", "ghost@x.com"))

        assert rows == 0
        assert asyncio.run(user_repository.find_all()) == []

    def test_update_to_taken_email_fails(self, user_repository):
        _create(user_repository, "Ana", "ana@x.com")
        _create(user_repository, "Bea", "bea@x.com")

        with pytest.raises(ConstraintError):
            asyncio.run(user_repository.update(2, None, "ana@x.com"))

        assert asyncio.run(user_repository.find_one(2)).email == "bea@x.com"


class TestDelete:

    def test_delete_removes_only_target(self, user_repository):
        _create(user_repository, "Ana", "ana@x.com")
        _create(user_repository, "Bea", "bea@x.com")

        rows = asyncio.run(user_repository.delete(1))

        assert rows == 1
        assert asyncio.run(user_repository.find_one(1)) is None
        assert [u.id for u in asyncio.run(user_repository.find_all())] == [2]

    def test_delete_missing_id(self, user_repository):
        assert asyncio.run(user_repository.delete(3)) == 0
