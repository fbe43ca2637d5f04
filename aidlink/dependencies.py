"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Jul 08 2025
# SPDX-License-Identifier: MIT
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from aidlink.config import settings
from aidlink.schemas import schemas
from aidlink.storage.base import Storage


def get_storage(request: Request) -> Storage:
    """
    FastAPI dependency returning the store owned by the running application.
    """
    return request.app.state.storage


def verify_token(token: str, credentials_exception: HTTPException) -> schemas.TokenData:
    """
    Verifies a JWT token and returns the token data.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        user_id: Optional[str] = payload.get("sub")
        if user_id is None:
            raise credentials_exception
        token_data = schemas.TokenData(user_id=user_id)
    except JWTError:
        raise credentials_exception
    return token_data


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/login")


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Creates a JWT access token.
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def get_current_user(
    token: str = Depends(oauth2_scheme), storage: Storage = Depends(get_storage)
) -> schemas.User:
    """
    FastAPI dependency to get the current authenticated user.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    token_data = verify_token(token, credentials_exception)
    user = storage.get_user(token_data.user_id)
    if user is None:
        raise credentials_exception
    return user


def ensure_owner(owner_id: str, current_user: schemas.User):
    if owner_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")


def get_location_filter(
    lat: Optional[float] = None, lng: Optional[float] = None, radius: Optional[float] = None
) -> Optional[schemas.LocationFilter]:
    """
    Builds a radius filter from query parameters. Both coordinates are needed, otherwise no filter applies.
    """
    if lat is None or lng is None:
        return None
    return schemas.LocationFilter(
        lat=lat, lng=lng, radius=radius if radius is not None else settings.default_search_radius_km
    )
