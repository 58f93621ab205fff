from fastapi import APIRouter, Depends, status
from typing import List

from ...schemas.base import MessageResponse
from ...schemas.subcategory import SubcategoryCreate, SubcategoryUpdate, SubcategoryResponse
from ...services import SubcategoryService
from ..dependencies import get_subcategory_service

router = APIRouter(prefix="/subcategories", tags=["subcategories"])


@router.post("", response_model=SubcategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_subcategory(
        data: SubcategoryCreate,
        service: SubcategoryService = Depends(get_subcategory_service)
):
    return await service.create(data)


@router.get("", response_model=List[SubcategoryResponse])
async def get_subcategories(service: SubcategoryService = Depends(get_subcategory_service)):
    return await service.list()


@router.get("/{subcategory_id}", response_model=SubcategoryResponse)
async def get_subcategory(
        subcategory_id: int,
        service: SubcategoryService = Depends(get_subcategory_service)
):
    return await service.get(subcategory_id)


@router.patch("/{subcategory_id}", response_model=SubcategoryResponse)
async def update_subcategory(
        subcategory_id: int,
        data: SubcategoryUpdate,
        service: SubcategoryService = Depends(get_subcategory_service)
):
    return await service.update(subcategory_id, data)


@router.delete("/{subcategory_id}", response_model=MessageResponse)
async def delete_subcategory(
        subcategory_id: int,
        service: SubcategoryService = Depends(get_subcategory_service)
):
    await service.delete(subcategory_id)
    return {"message": "Subcategory deleted"}
