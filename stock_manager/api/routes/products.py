from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from ...config import Settings
from ...schemas.base import MessageResponse
from ...schemas.product import ProductCreate, ProductUpdate, ProductResponse
from ...services import ProductService
from ..dependencies import get_product_service, get_settings

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
        data: ProductCreate,
        service: ProductService = Depends(get_product_service)
):
    return await service.create(data)


@router.get("", response_model=List[ProductResponse])
async def get_products(service: ProductService = Depends(get_product_service)):
    return await service.list()


@router.get("/ruptures", response_model=List[ProductResponse])
async def get_low_stock_products(
        category_ids: Optional[List[int]] = Query(None, alias="categoryId", description="Restrict to these categories"),
        service: ProductService = Depends(get_product_service),
        app_settings: Settings = Depends(get_settings)
):
    """Active products that were close to running out last week"""
    return await service.list_low_stock(
        threshold=app_settings.low_stock_threshold,
        category_ids=category_ids
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
        product_id: int,
        service: ProductService = Depends(get_product_service)
):
    return await service.get(product_id)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
        product_id: int,
        data: ProductUpdate,
        service: ProductService = Depends(get_product_service)
):
    return await service.update(product_id, data)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
        product_id: int,
        service: ProductService = Depends(get_product_service)
):
    """Delete a product together with its weekly history"""
    await service.delete(product_id)
    return {"message": "Product deleted"}
