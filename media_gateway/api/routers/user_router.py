import uuid

from fastapi import APIRouter, Depends, Query
from loguru import logger as custom_logger
from pydantic import BaseModel

from media_gateway.api.dependencies import get_user_repository
from media_gateway.api.exceptions import IngestError
from media_gateway.api.repositories.user_repository import UserRepository
from media_gateway.api.responses.base import BaseResponse

router = APIRouter()


class UserCreate(BaseModel):
    username: str
    email: str


@router.post("")
async def add_user(payload: UserCreate, users: UserRepository = Depends(get_user_repository)):
    """Create a user.

    Existing clients read failures from the body, so errors are answered
    with 200 and {"status": "error"}.
    """
    try:
        user = await users.create_user(payload.username, payload.email)
    except IngestError as e:
        custom_logger.warning(f"User creation failed: {e.message}")
        return BaseResponse.success_response({"status": "error", "message": e.message})

    custom_logger.info(f"User created: {user.user_id}")
    return BaseResponse.success_response({"status": "success", "user": str(user.user_id)})


@router.get("")
async def get_users(users: UserRepository = Depends(get_user_repository)):
    rows = await users.list_users()
    return BaseResponse.success_response({"payload": [u.to_dict() for u in rows]})


@router.get("/id/{user_id}")
async def get_user_by_id(user_id: uuid.UUID, users: UserRepository = Depends(get_user_repository)):
    user = await users.get_user_by_id(user_id)
    return BaseResponse.success_response(user.to_dict())


@router.get("/username")
async def get_user_by_username(username: str = Query(...), users: UserRepository = Depends(get_user_repository)):
    user = await users.get_user_by_username(username)
    return BaseResponse.success_response(user.to_dict())


@router.get("/email")
async def get_user_by_email(email: str = Query(...), users: UserRepository = Depends(get_user_repository)):
    user = await users.get_user_by_email(email)
    return BaseResponse.success_response(user.to_dict())
