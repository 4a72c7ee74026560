"""
handlers/user_handler.py
-------------------------
Routes for the users resource.
Delegates all logic to UserService.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from db.errors import ConstraintError, StoreError
from models.dto import CreateUserDto, UpdateUserDto
from services.user_service import UserService
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/user", tags=["users"])


def get_user_service(request: Request) -> UserService:
    """Dependency returning the service built at startup."""
    return request.app.state.user_service


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(dto: CreateUserDto, service: UserService = Depends(get_user_service)) -> dict:
    """Register a user and return the stored record."""
    user = await service.create(dto)
    return user.to_dict()


@router.get("")
async def list_users(service: UserService = Depends(get_user_service)) -> list[dict]:
    """List every registered user."""
    return [u.to_dict() for u in await service.find_all()]


@router.get("/{user_id}")
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> dict:
    """Fetch one user, 404 if absent."""
    user = await service.find_one(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return user.to_dict()


@router.patch("/{user_id}")
async def update_user(
    user_id: int,
    dto: UpdateUserDto,
    service: UserService = Depends(get_user_service),
) -> dict:
    """Change name and/or email; omitted fields are kept."""
    rows = await service.update(user_id, dto)
    if not rows:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return {"rowsAffected": rows}


@router.delete("/{user_id}")
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> dict:
    """Delete a user, 404 if absent."""
    rows = await service.remove(user_id)
    if not rows:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return {"rowsAffected": rows}


# ── Error mapping ─────────────────────────────────────────

async def constraint_error_handler(request: Request, exc: ConstraintError) -> JSONResponse:
    """Duplicate email (or other constraint violation) becomes 409."""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "A user with this email already exists"},
    )


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Any other store failure becomes a generic 500."""
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )
