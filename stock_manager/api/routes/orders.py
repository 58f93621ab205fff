from fastapi import APIRouter, Depends, status
from typing import List

from ...schemas.base import MessageResponse
from ...schemas.order import OrderCreate, OrderUpdate, OrderResponse
from ...services import OrderService
from ..dependencies import get_order_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
        data: OrderCreate,
        order_service: OrderService = Depends(get_order_service)
):
    """Create an order for a customer or a client, optionally with its items"""
    return await order_service.create(data)


@router.get("", response_model=List[OrderResponse])
async def get_orders(order_service: OrderService = Depends(get_order_service)):
    """List orders with their party and items"""
    return await order_service.list()


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
        order_id: int,
        order_service: OrderService = Depends(get_order_service)
):
    return await order_service.get(order_id)


@router.patch("/{order_id}", response_model=OrderResponse)
async def update_order(
        order_id: int,
        data: OrderUpdate,
        order_service: OrderService = Depends(get_order_service)
):
    """Update status, date or party of an order; its total follows its items"""
    return await order_service.update(order_id, data)


@router.delete("/{order_id}", response_model=MessageResponse)
async def delete_order(
        order_id: int,
        order_service: OrderService = Depends(get_order_service)
):
    """Delete an order and all of its items"""
    await order_service.delete(order_id)
    return {"message": "Order deleted"}
