"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
All SQL queries related to the `users` table live here.
"""

from typing import Optional

from db.connection import Store, get_store
from models.user import User, WriteResult
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def __init__(self, store: Optional[Store] = None):
        self.store = store or get_store()

    # ── CREATE ────────────────────────────────────────────

    async def create(self, name: str, email: str) -> WriteResult:
        """
        Insert a new user.

        Returns:
            WriteResult carrying the new user's id.

        Raises:
            ConstraintError: If the email is already registered.
        """
        sql = "INSERT INTO users (name, email) VALUES (?, ?);"
        result = await self.store.execute(sql, (name, email))
        logger.info(f"Created user #{result.last_inserted_id}")
        return result

    # ── READ ──────────────────────────────────────────────

    async def find_all(self) -> list[User]:
        """Fetch every user in the store's natural order."""
        rows = await self.store.fetch_many("SELECT id, name, email FROM users;")
        return [self._row_to_user(r) for r in rows]

    async def find_one(self, user_id: int) -> Optional[User]:
        """
        Fetch a single user by ID.

        Returns:
            A User or None if not found.
        """
        sql = "SELECT id, name, email FROM users WHERE id = ?;"
        row = await self.store.fetch_one(sql, (user_id,))
        return self._row_to_user(row) if row else None

    # ── UPDATE ────────────────────────────────────────────

    async def update(self, user_id: int, name: Optional[str], email: Optional[str]) -> int:
        """
        Change a user's name and/or email. A None field keeps its stored value.

        Returns:
            Number of rows affected (0 if the user does not exist).
        """
        sql = """
            UPDATE users
            SET name = COALESCE(?, name), email = COALESCE(?, email)
            WHERE id = ?;
        """
        result = await self.store.execute(sql, (name, email, user_id))
        if result.rows_affected:
            logger.info(f"Updated user #{user_id}")
        return result.rows_affected

    # ── DELETE ────────────────────────────────────────────

    async def delete(self, user_id: int) -> int:
        """
        Delete a user.

        Returns:
            Number of rows affected (0 if the user does not exist).
        """
        result = await self.store.execute("DELETE FROM users WHERE id = ?;", (user_id,))
        if result.rows_affected:
            logger.info(f"Deleted user #{user_id}")
        return result.rows_affected

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: dict) -> User:
        return User(id=row["id"], name=row["name"], email=row["email"])
