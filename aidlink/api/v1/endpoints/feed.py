# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List

from fastapi import APIRouter, Depends, Query

from aidlink.config import settings
from aidlink.dependencies import get_storage
from aidlink.schemas import schemas
from aidlink.storage.base import Storage

router = APIRouter(tags=["Feed"])


@router.get("/feed", response_model=List[schemas.ActivityFeedItem])
def read_activity_feed(
    limit: int = Query(settings.activity_feed_limit, ge=1, le=500),
    storage: Storage = Depends(get_storage),
):
    """
    Returns the most recent feed entries, newest first.
    """
    return storage.get_activity_feed(limit)
