"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Jul 08 2025
# SPDX-License-Identifier: MIT
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from aidlink.config import settings
from aidlink.dependencies import create_access_token, get_current_user, get_storage
from aidlink.schemas import schemas
from aidlink.storage.base import Storage
from aidlink.utils.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Authentication"],
    responses={404: {"description": "Not found"}},
)


def _issue_token(user: schemas.User) -> str:
    access_token_expires = timedelta(minutes=settings.access_token_expire_minutes)
    return create_access_token(data={"sub": user.id}, expires_delta=access_token_expires)


@router.post("/register", response_model=schemas.Registration, status_code=status.HTTP_201_CREATED)
def register_user(user: schemas.UserCreate, storage: Storage = Depends(get_storage)):
    """
    Registers a new user and returns their profile with an access token.
    """
    if storage.get_user_by_email(user.email):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    db_user = storage.create_user(user.model_copy(update={"password": get_password_hash(user.password)}))
    logger.info("Registered user %s", db_user.id)
    return schemas.Registration(
        user=schemas.UserPublic.model_validate(db_user), access_token=_issue_token(db_user)
    )


@router.post("/login", response_model=schemas.Registration)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(), storage: Storage = Depends(get_storage)
):
    """
    Authenticates a user and returns their profile with an access token.
    """
    user = storage.get_user_by_email(form_data.username)
    if not user or not verify_password(form_data.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return schemas.Registration(user=schemas.UserPublic.model_validate(user), access_token=_issue_token(user))


@router.get("/users/me", response_model=schemas.UserPublic)
def read_users_me(current_user: schemas.User = Depends(get_current_user)):
    """
    Retrieves the current authenticated user's profile.
    """
    return current_user
