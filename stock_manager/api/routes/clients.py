from fastapi import APIRouter, Depends, status
from typing import List

from ...schemas.base import MessageResponse
from ...schemas.party import ClientCreate, ClientUpdate, ClientResponse
from ...services import ClientService
from ..dependencies import get_client_service

router = APIRouter(prefix="/clients", tags=["clients"])


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
        data: ClientCreate,
        service: ClientService = Depends(get_client_service)
):
    return await service.create(data)


@router.get("", response_model=List[ClientResponse])
async def get_clients(service: ClientService = Depends(get_client_service)):
    return await service.list()


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
        client_id: int,
        service: ClientService = Depends(get_client_service)
):
    return await service.get(client_id)


@router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
        client_id: int,
        data: ClientUpdate,
        service: ClientService = Depends(get_client_service)
):
    return await service.update(client_id, data)


@router.delete("/{client_id}", response_model=MessageResponse)
async def delete_client(
        client_id: int,
        service: ClientService = Depends(get_client_service)
):
    await service.delete(client_id)
    return {"message": "Client deleted"}
