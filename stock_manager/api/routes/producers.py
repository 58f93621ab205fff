from fastapi import APIRouter, Depends, status
from typing import List

from ...schemas.base import MessageResponse
from ...schemas.producer import ProducerCreate, ProducerUpdate, ProducerResponse
from ...services import ProducerService
from ..dependencies import get_producer_service

router = APIRouter(prefix="/producers", tags=["producers"])


@router.post("", response_model=ProducerResponse, status_code=status.HTTP_201_CREATED)
async def create_producer(
        data: ProducerCreate,
        service: ProducerService = Depends(get_producer_service)
):
    return await service.create(data)


@router.get("", response_model=List[ProducerResponse])
async def get_producers(service: ProducerService = Depends(get_producer_service)):
    return await service.list()


@router.get("/{producer_id}", response_model=ProducerResponse)
async def get_producer(
        producer_id: int,
        service: ProducerService = Depends(get_producer_service)
):
    return await service.get(producer_id)


@router.patch("/{producer_id}", response_model=ProducerResponse)
async def update_producer(
        producer_id: int,
        data: ProducerUpdate,
        service: ProducerService = Depends(get_producer_service)
):
    return await service.update(producer_id, data)


@router.delete("/{producer_id}", response_model=MessageResponse)
async def delete_producer(
        producer_id: int,
        service: ProducerService = Depends(get_producer_service)
):
    await service.delete(producer_id)
    return {"message": "Producer deleted"}
