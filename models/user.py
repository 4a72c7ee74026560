"""
models/user.py
--------------
Domain model for registered users.
"""

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a single registered user.

    Attributes:
        id: Database primary key, assigned by the store.
        name: Display name.
        email: Contact address, unique across all users.
    """
    id: int
    name: str
    email: str

    def to_dict(self) -> dict:
        return asdict(self)

    def __str__(self) -> str:
        return f"#{self.id} {self.name} <{self.email}>"


@dataclass
class WriteResult:
    """Outcome of a mutating statement."""
    rows_affected: int
    last_inserted_id: Optional[int] = None
