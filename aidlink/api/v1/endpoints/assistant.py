"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Oct 14 2025
# SPDX-License-Identifier: MIT
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from aidlink.dependencies import get_current_user
from aidlink.schemas import schemas
from aidlink.services.ai_service import AIService

router = APIRouter(tags=["Assistant"])


def get_ai_service() -> AIService:
    return AIService()


@router.post("/chat", response_model=schemas.ChatReply)
async def chat(
    chat_message: schemas.ChatMessage,
    current_user: schemas.User = Depends(get_current_user),
    ai_service: AIService = Depends(get_ai_service),
):
    reply = await ai_service.chat(chat_message.message, current_user)
    if reply is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Chat service temporarily unavailable"
        )
    return {"reply": reply}


@router.post("/analyze-image", response_model=schemas.ImageAnalysis)
async def analyze_image(
    image: UploadFile = File(...),
    current_user: schemas.User = Depends(get_current_user),
    ai_service: AIService = Depends(get_ai_service),
):
    """
    Describes an uploaded photo so it can be turned into a donation listing.
    """
    data = await image.read()
    if not data:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No image provided")

    analysis = await ai_service.analyze_image(data, image.content_type or "image/jpeg")
    if analysis is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Image analysis failed")
    return {"analysis": analysis}
