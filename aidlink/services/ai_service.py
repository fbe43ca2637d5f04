"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Oct 14 2025
# SPDX-License-Identifier: MIT
"""

import json
import logging
from typing import Any, Dict, List, Optional

import google.generativeai as genai

from aidlink.config import settings
from aidlink.schemas import schemas

logger = logging.getLogger(__name__)


class AIService:
    _SYSTEM_INSTRUCTION = """
    You are the assistant of a community platform where people donate goods and money, post aid requests
    and organise volunteer activities. Be concise, practical and kind. When asked for structured output,
    always adhere to the specified JSON format.
    """

    _MATCH_RESPONSE_SCHEMA = {
        "type": "ARRAY",
        "items": {
            "type": "OBJECT",
            "properties": {"score": {"type": "number"}, "reason": {"type": "string"}},
            "required": ["score", "reason"],
        },
    }

    def __init__(self):
        genai.configure(api_key=settings.google_api_key)

        self.model = genai.GenerativeModel(
            model_name=settings.gemini_model_name, system_instruction=self._SYSTEM_INSTRUCTION
        )

    @staticmethod
    def _response_text(response: Any) -> Optional[str]:
        if response.candidates and response.candidates[0].content and response.candidates[0].content.parts:
            return response.candidates[0].content.parts[0].text
        logger.warning("Gemini API did not return expected content structure: %s", response)
        return None

    async def _call_gemini_api(self, contents: Any, schema: Optional[Dict[str, Any]] = None) -> Any:
        """
        Sends contents to Gemini. With a schema the reply is requested as JSON
        and returned decoded, otherwise the plain text is returned.
        Returns None on any failure.
        """
        generation_config = None
        if schema is not None:
            generation_config = {"response_mime_type": "application/json", "response_schema": schema}
        try:
            response = await self.model.generate_content_async(contents, generation_config=generation_config)
            text = self._response_text(response)
            if text is None or schema is None:
                return text
            return json.loads(text)
        except Exception:
            logger.exception("Error calling Gemini API")
            return None

    async def chat(self, message: str, user: schemas.User) -> Optional[str]:
        prompt = f"""
        The user {user.name} ({user.user_type}) writes:
        {message}
        """
        return await self._call_gemini_api(prompt)

    async def suggest_matches(self, user: schemas.User, donations: List[schemas.Donation]) -> List[Dict[str, Any]]:
        """
        Asks Gemini to score how well each donation fits open needs on the platform.
        Returns a list of {"score": float, "reason": str}; empty when nothing usable came back.
        """
        if not donations:
            return []

        donation_info = "\n".join(
            f"- Title: {d.title}, Type: {d.type}, Description: {d.description or 'None'}, "
            f"Amount: {d.amount or 'None'}, Quantity: {d.quantity or 'None'}"
            for d in donations
        )
        prompt = f"""
        Your task is to suggest how the following donations from {user.name} could best be matched with
        people or organisations in need. For every suggestion give a score between 0 and 1 and a short reason.

        **Donations:**
        {donation_info}
        """

        suggestions = await self._call_gemini_api(prompt, self._MATCH_RESPONSE_SCHEMA)
        if not isinstance(suggestions, list):
            return []

        matches = []
        for suggestion in suggestions:
            score = suggestion.get("score") if isinstance(suggestion, dict) else None
            reason = suggestion.get("reason") if isinstance(suggestion, dict) else None
            if isinstance(score, (int, float)) and isinstance(reason, str):
                matches.append({"score": float(score), "reason": reason})
            else:
                logger.warning("Gemini returned invalid match data format: %s", suggestion)
        return matches

    async def analyze_image(self, data: bytes, mime_type: str) -> Optional[str]:
        prompt = (
            "Describe the item in this photo as a donation listing: what it is, its apparent condition "
            "and a suggested donation category."
        )
        return await self._call_gemini_api([prompt, {"mime_type": mime_type, "data": data}])
