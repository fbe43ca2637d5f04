# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from aidlink.dependencies import ensure_owner, get_current_user, get_location_filter, get_storage
from aidlink.schemas import schemas
from aidlink.storage.base import Storage

router = APIRouter(
    tags=["Activities"],
    responses={404: {"description": "Not found"}},
)


def _get_activity_or_404(storage: Storage, activity_id: str) -> schemas.Activity:
    db_activity = storage.get_activity(activity_id)
    if db_activity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found")
    return db_activity


@router.post("/activities/", response_model=schemas.Activity, status_code=status.HTTP_201_CREATED)
def create_activity(
    activity: schemas.ActivityCreate,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """
    Creates a volunteer activity organised by the authenticated user.
    """
    return storage.create_activity(activity, organizer_id=current_user.id)


@router.get("/activities/", response_model=List[schemas.Activity])
def read_activities(
    location: Optional[schemas.LocationFilter] = Depends(get_location_filter),
    storage: Storage = Depends(get_storage),
):
    """
    Lists activities, soonest first.
    """
    return storage.get_activities(location=location)


@router.get("/activities/{activity_id}", response_model=schemas.Activity)
def read_activity(activity_id: str, storage: Storage = Depends(get_storage)):
    return _get_activity_or_404(storage, activity_id)


@router.patch("/activities/{activity_id}", response_model=schemas.Activity)
def update_activity(
    activity_id: str,
    activity: schemas.ActivityUpdate,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    db_activity = _get_activity_or_404(storage, activity_id)
    ensure_owner(db_activity.organizer_id, current_user)
    return storage.update_activity(activity_id, activity)


@router.post(
    "/activities/{activity_id}/registrations",
    response_model=schemas.VolunteerRegistration,
    status_code=status.HTTP_201_CREATED,
)
def register_for_activity(
    activity_id: str,
    message: Optional[str] = Body(None, embed=True),
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """
    Signs the authenticated user up for an activity. The registration starts as pending.
    """
    _get_activity_or_404(storage, activity_id)
    return storage.create_volunteer_registration(
        schemas.VolunteerRegistrationCreate(activity_id=activity_id, message=message),
        volunteer_id=current_user.id,
    )


@router.get("/registrations/me", response_model=List[schemas.VolunteerRegistration])
def read_my_registrations(
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    return storage.get_volunteer_registrations(current_user.id)
