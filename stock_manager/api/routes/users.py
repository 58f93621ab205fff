from fastapi import APIRouter, Depends, status
from typing import List

from ...schemas.base import MessageResponse
from ...schemas.user import UserCreate, UserUpdate, UserResponse
from ...services import UserService
from ..dependencies import get_user_service

router = APIRouter(prefix="/user", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
        data: UserCreate,
        service: UserService = Depends(get_user_service)
):
    return await service.create(data)


@router.get("", response_model=List[UserResponse])
async def get_users(service: UserService = Depends(get_user_service)):
    return await service.list()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
        user_id: int,
        service: UserService = Depends(get_user_service)
):
    return await service.get(user_id)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
        user_id: int,
        data: UserUpdate,
        service: UserService = Depends(get_user_service)
):
    return await service.update(user_id, data)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
        user_id: int,
        service: UserService = Depends(get_user_service)
):
    await service.delete(user_id)
    return {"message": "User deleted"}
