# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List

from fastapi import APIRouter, Depends

from aidlink.dependencies import get_current_user, get_storage
from aidlink.schemas import schemas
from aidlink.storage.base import Storage

router = APIRouter(
    prefix="/matches",
    tags=["Matches"],
)


@router.get("/me", response_model=List[schemas.Match])
def read_my_matches(
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """
    Lists the match suggestions stored for the authenticated user.
    """
    return storage.get_matches(current_user.id)
