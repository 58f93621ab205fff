from fastapi import APIRouter, Depends, status
from typing import List

from ...schemas.base import MessageResponse
from ...schemas.party import CustomerCreate, CustomerUpdate, CustomerResponse
from ...services import CustomerService
from ..dependencies import get_customer_service

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
        data: CustomerCreate,
        service: CustomerService = Depends(get_customer_service)
):
    return await service.create(data)


@router.get("", response_model=List[CustomerResponse])
async def get_customers(service: CustomerService = Depends(get_customer_service)):
    return await service.list()


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
        customer_id: int,
        service: CustomerService = Depends(get_customer_service)
):
    return await service.get(customer_id)


@router.patch("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
        customer_id: int,
        data: CustomerUpdate,
        service: CustomerService = Depends(get_customer_service)
):
    return await service.update(customer_id, data)


@router.delete("/{customer_id}", response_model=MessageResponse)
async def delete_customer(
        customer_id: int,
        service: CustomerService = Depends(get_customer_service)
):
    await service.delete(customer_id)
    return {"message": "Customer deleted"}
