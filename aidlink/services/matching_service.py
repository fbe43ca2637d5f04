"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Oct 14 2025
# SPDX-License-Identifier: MIT
"""

import logging
from typing import List, Optional

from aidlink.schemas import schemas
from aidlink.services.ai_service import AIService
from aidlink.storage.base import Storage

logger = logging.getLogger(__name__)


class MatchingService:
    def __init__(self, storage: Storage, ai_service: Optional[AIService] = None):
        self.storage = storage
        self.ai_service = ai_service or AIService()

    async def match_donation(self, user: schemas.User, donation: schemas.Donation) -> List[schemas.Match]:
        """
        Asks the AI service for match suggestions on a new donation and stores
        one pending match per suggestion for the donor.
        """
        suggestions = await self.ai_service.suggest_matches(user, [donation])
        if not suggestions:
            logger.info("No match suggestions for Donation ID %s", donation.id)
            return []

        matches = [
            self.storage.create_match(
                schemas.MatchCreate(
                    user_id=user.id,
                    target=schemas.DonationTarget(donation_id=donation.id),
                    score=suggestion["score"],
                    reason=suggestion["reason"],
                )
            )
            for suggestion in suggestions
        ]
        logger.info("Stored %d matches for Donation ID %s", len(matches), donation.id)
        return matches
