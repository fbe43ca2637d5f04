# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List

from fastapi import APIRouter, Depends, Response, status

from aidlink.dependencies import get_current_user, get_storage
from aidlink.schemas import schemas
from aidlink.storage.base import Storage

router = APIRouter(
    prefix="/notifications",
    tags=["Notifications"],
)


@router.get("/me", response_model=List[schemas.Notification])
def read_my_notifications(
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    return storage.get_notifications(current_user.id)


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
def mark_notification_as_read(
    notification_id: str,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """
    Marks one of the user's notifications as read. Unknown ids are accepted and ignored.
    """
    if any(n.id == notification_id for n in storage.get_notifications(current_user.id)):
        storage.mark_notification_as_read(notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
