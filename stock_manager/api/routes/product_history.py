from fastapi import APIRouter, Depends, status
from typing import List

from ...schemas.base import MessageResponse
from ...schemas.product_history import (
    ProductHistoryCreate,
    ProductHistoryUpdate,
    ProductHistoryResponse,
)
from ...services import ProductHistoryService
from ..dependencies import get_product_history_service

router = APIRouter(prefix="/product-history", tags=["product-history"])


@router.post("", response_model=ProductHistoryResponse, status_code=status.HTTP_201_CREATED)
async def create_product_history(
        data: ProductHistoryCreate,
        service: ProductHistoryService = Depends(get_product_history_service)
):
    return await service.create(data)


@router.get("", response_model=List[ProductHistoryResponse])
async def get_product_histories(service: ProductHistoryService = Depends(get_product_history_service)):
    return await service.list()


@router.get("/{history_id}", response_model=ProductHistoryResponse)
async def get_product_history(
        history_id: int,
        service: ProductHistoryService = Depends(get_product_history_service)
):
    return await service.get(history_id)


@router.patch("/{history_id}", response_model=ProductHistoryResponse)
async def update_product_history(
        history_id: int,
        data: ProductHistoryUpdate,
        service: ProductHistoryService = Depends(get_product_history_service)
):
    return await service.update(history_id, data)


@router.delete("/{history_id}", response_model=MessageResponse)
async def delete_product_history(
        history_id: int,
        service: ProductHistoryService = Depends(get_product_history_service)
):
    await service.delete(history_id)
    return {"message": "Product history deleted"}
