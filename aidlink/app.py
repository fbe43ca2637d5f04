# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from aidlink.api.v1.endpoints import (
    activities,
    aid_requests,
    assistant,
    auth,
    donations,
    feed,
    matches,
    notifications,
    organizations,
    payments,
)
from aidlink.config import settings
from aidlink.exceptions import NotFoundError
from aidlink.logging_config import configure_logging
from aidlink.storage.base import Storage
from aidlink.storage.memory import MemStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    logger.info("aidlink API starting up with %s.", type(app.state.storage).__name__)
    yield
    logger.info("aidlink API shutting down.")


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """
    Builds the API around the given store. A fresh MemStorage is used when none is passed.
    """
    app = FastAPI(
        title="aidlink Backend API",
        description="API for coordinating community donations, aid requests and volunteering.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.storage = storage if storage is not None else MemStorage()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins.split(","),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH"],
        allow_headers=["*"],
    )
    app.add_exception_handler(NotFoundError, not_found_handler)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    for module in (
        auth,
        donations,
        aid_requests,
        activities,
        organizations,
        feed,
        matches,
        notifications,
        payments,
        assistant,
    ):
        app.include_router(module.router, prefix="/api/v1")

    return app
