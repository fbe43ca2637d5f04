# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from aidlink.dependencies import ensure_owner, get_current_user, get_location_filter, get_storage
from aidlink.schemas import schemas
from aidlink.storage.base import Storage

router = APIRouter(
    prefix="/requests",
    tags=["Requests"],
    responses={404: {"description": "Not found"}},
)


@router.post("/", response_model=schemas.Request, status_code=status.HTTP_201_CREATED)
def create_request(
    request: schemas.RequestCreate,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    return storage.create_request(request, requester_id=current_user.id)


@router.get("/", response_model=List[schemas.Request])
def read_requests(
    type: Optional[str] = None,
    urgency: Optional[str] = None,
    location: Optional[schemas.LocationFilter] = Depends(get_location_filter),
    storage: Storage = Depends(get_storage),
):
    """
    Lists aid requests, newest first, optionally by type, urgency and distance.
    """
    return storage.get_requests(type=type, urgency=urgency, location=location)


@router.get("/{request_id}", response_model=schemas.Request)
def read_request(request_id: str, storage: Storage = Depends(get_storage)):
    db_request = storage.get_request(request_id)
    if db_request is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Request not found")
    return db_request


@router.patch("/{request_id}", response_model=schemas.Request)
def update_request(
    request_id: str,
    request: schemas.RequestUpdate,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    db_request = storage.get_request(request_id)
    if db_request is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Request not found")
    ensure_owner(db_request.requester_id, current_user)
    return storage.update_request(request_id, request)
