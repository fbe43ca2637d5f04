# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from aidlink.config import settings
from aidlink.dependencies import get_current_user, get_storage
from aidlink.schemas import schemas
from aidlink.storage.base import Storage

router = APIRouter(
    prefix="/organizations",
    tags=["Organizations"],
    responses={404: {"description": "Not found"}},
)


@router.post("/", response_model=schemas.Organization, status_code=status.HTTP_201_CREATED)
def create_organization(
    organization: schemas.OrganizationCreate,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """
    Registers an organization owned by the authenticated user. It starts unverified.
    """
    return storage.create_organization(organization, user_id=current_user.id)


@router.get("/me", response_model=schemas.Organization)
def read_my_organization(
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    db_organization = storage.get_organization_by_user_id(current_user.id)
    if db_organization is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Organization not found")
    return db_organization


@router.get("/nearby", response_model=List[schemas.Organization])
def read_nearby_organizations(
    lat: float,
    lng: float,
    radius: Optional[float] = None,
    storage: Storage = Depends(get_storage),
):
    """
    Lists organizations within radius kilometres of the given point.
    """
    if radius is None:
        radius = settings.default_search_radius_km
    return storage.get_organizations_by_location(lat, lng, radius)
