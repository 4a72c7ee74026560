"""
services/user_service.py
-------------------------
Business logic for user registration.
Validates incoming payloads and delegates persistence to the UserRepository.
"""

from typing import Mapping, Optional, Union

from models.dto import CreateUserDto, UpdateUserDto
from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """
    Handles everything the HTTP layer needs for the users resource.

    Payloads may be passed as DTOs or as plain mappings; mappings are
    validated into DTOs first, raising ``pydantic.ValidationError`` when a
    required field is missing or empty. Store errors are not caught here.
    """

    def __init__(self, repo: Optional[UserRepository] = None):
        self.repo = repo or UserRepository()

    async def create(self, payload: Union[CreateUserDto, Mapping]) -> User:
        """Register a user and return the stored record."""
        dto = self._as_dto(CreateUserDto, payload)
        result = await self.repo.create(dto.name, dto.email)
        return User(id=result.last_inserted_id, name=dto.name, email=dto.email)

    async def find_all(self) -> list[User]:
        return await self.repo.find_all()

    async def find_one(self, user_id: int) -> Optional[User]:
        return await self.repo.find_one(user_id)

    async def update(self, user_id: int, payload: Union[UpdateUserDto, Mapping]) -> int:
        """
        Apply a partial update. Fields absent from the payload keep their
        current value.

        Returns:
            Number of rows affected (0 if the user does not exist).
        """
        dto = self._as_dto(UpdateUserDto, payload)
        return await self.repo.update(user_id, dto.name, dto.email)

    async def remove(self, user_id: int) -> int:
        return await self.repo.delete(user_id)

    @staticmethod
    def _as_dto(dto_cls, payload):
        if isinstance(payload, dto_cls):
            return payload
        return dto_cls.model_validate(payload)
