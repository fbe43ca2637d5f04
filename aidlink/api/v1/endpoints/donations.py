# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from aidlink.dependencies import ensure_owner, get_current_user, get_location_filter, get_storage
from aidlink.events import donation_handlers
from aidlink.schemas import schemas
from aidlink.storage.base import Storage

router = APIRouter(
    prefix="/donations",
    tags=["Donations"],
    responses={404: {"description": "Not found"}},
)


@router.post("/", response_model=schemas.Donation, status_code=status.HTTP_201_CREATED)
def create_donation(
    donation: schemas.DonationCreate,
    background_tasks: BackgroundTasks,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """
    Posts a donation for the authenticated user and schedules matching and alerts.
    """
    db_donation = storage.create_donation(donation, donor_id=current_user.id)
    background_tasks.add_task(
        donation_handlers.trigger_donation_matching, storage, current_user.id, db_donation.id
    )
    return db_donation


@router.get("/", response_model=List[schemas.Donation])
def read_donations(
    type: Optional[str] = None,
    location: Optional[schemas.LocationFilter] = Depends(get_location_filter),
    storage: Storage = Depends(get_storage),
):
    """
    Lists donations, newest first, optionally by type and distance.
    """
    return storage.get_donations(type=type, location=location)


@router.get("/{donation_id}", response_model=schemas.Donation)
def read_donation(donation_id: str, storage: Storage = Depends(get_storage)):
    db_donation = storage.get_donation(donation_id)
    if db_donation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Donation not found")
    return db_donation


@router.patch("/{donation_id}", response_model=schemas.Donation)
def update_donation(
    donation_id: str,
    donation: schemas.DonationUpdate,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """
    Updates a donation. Only the donor may change it.
    """
    db_donation = storage.get_donation(donation_id)
    if db_donation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Donation not found")
    ensure_owner(db_donation.donor_id, current_user)
    return storage.update_donation(donation_id, donation)
