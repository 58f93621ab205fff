from fastapi import APIRouter, Depends, status
from typing import List

from ...schemas.base import MessageResponse
from ...schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from ...services import CategoryService
from ..dependencies import get_category_service

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
        data: CategoryCreate,
        service: CategoryService = Depends(get_category_service)
):
    return await service.create(data)


@router.get("", response_model=List[CategoryResponse])
async def get_categories(service: CategoryService = Depends(get_category_service)):
    return await service.list()


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
        category_id: int,
        service: CategoryService = Depends(get_category_service)
):
    return await service.get(category_id)


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
        category_id: int,
        data: CategoryUpdate,
        service: CategoryService = Depends(get_category_service)
):
    return await service.update(category_id, data)


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
        category_id: int,
        service: CategoryService = Depends(get_category_service)
):
    await service.delete(category_id)
    return {"message": "Category deleted"}
