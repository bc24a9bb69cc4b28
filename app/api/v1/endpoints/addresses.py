"""Address API: postal and property addresses of the caller's business profile."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies.onboarding import (
    get_address_service,
    get_address_service_for_write,
    get_owned_business_profile,
)
from app.application.dtos.business_profile import BusinessProfileResult
from app.application.use_cases.addresses import AddressService
from app.core.limiter import limit_writes
from app.schemas.address import (
    AddressCreateRequest,
    AddressDeleteResponse,
    AddressResponse,
    AddressUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=AddressResponse, status_code=201)
@limit_writes
async def create_address(
    request: Request,
    body: AddressCreateRequest,
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
    service: Annotated[AddressService, Depends(get_address_service_for_write)],
):
    """Add an address to the caller's business profile."""
    created = await service.create(profile.id, **body.model_dump())
    return AddressResponse.model_validate(created)


@router.get("", response_model=list[AddressResponse])
async def list_addresses(
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
    service: Annotated[AddressService, Depends(get_address_service)],
):
    """Addresses of the caller's business profile, primary first."""
    addresses = await service.list_by_entity(profile.id)
    return [AddressResponse.model_validate(a) for a in addresses]


@router.patch("/{address_id}", response_model=AddressResponse)
@limit_writes
async def update_address(
    request: Request,
    address_id: str,
    body: AddressUpdateRequest,
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
    service: Annotated[AddressService, Depends(get_address_service_for_write)],
):
    updated = await service.update(
        profile.id, address_id, body.model_dump(exclude_unset=True)
    )
    return AddressResponse.model_validate(updated)


@router.delete("/{address_id}", response_model=AddressDeleteResponse)
@limit_writes
async def delete_address(
    request: Request,
    address_id: str,
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
    service: Annotated[AddressService, Depends(get_address_service_for_write)],
):
    """Delete an address. 404 when it belongs to another business profile."""
    await service.delete(profile.id, address_id)
    return AddressDeleteResponse(id=address_id, deleted=True)
