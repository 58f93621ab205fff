from fastapi import APIRouter, Depends, status
from typing import List

from ...schemas.base import MessageResponse
from ...schemas.order_item import OrderItemCreate, OrderItemUpdate, OrderItemResponse
from ...services import OrderItemService
from ..dependencies import get_order_item_service

router = APIRouter(prefix="/order-item", tags=["order-items"])


@router.post("", response_model=OrderItemResponse, status_code=status.HTTP_201_CREATED)
async def create_order_item(
        data: OrderItemCreate,
        service: OrderItemService = Depends(get_order_item_service)
):
    """Add an item to an existing order"""
    return await service.create(data)


@router.get("", response_model=List[OrderItemResponse])
async def get_order_items(service: OrderItemService = Depends(get_order_item_service)):
    return await service.list()


@router.get("/{item_id}", response_model=OrderItemResponse)
async def get_order_item(
        item_id: int,
        service: OrderItemService = Depends(get_order_item_service)
):
    return await service.get(item_id)


@router.patch("/{item_id}", response_model=OrderItemResponse)
async def update_order_item(
        item_id: int,
        data: OrderItemUpdate,
        service: OrderItemService = Depends(get_order_item_service)
):
    return await service.update(item_id, data)


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_order_item(
        item_id: int,
        service: OrderItemService = Depends(get_order_item_service)
):
    await service.delete(item_id)
    return {"message": "Order item deleted"}
