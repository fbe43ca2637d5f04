"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Oct 14 2025
# SPDX-License-Identifier: MIT
"""

import logging

from aidlink.schemas import schemas
from aidlink.services.matching_service import MatchingService
from aidlink.services.sms_service import SmsService
from aidlink.storage.base import Storage

logger = logging.getLogger(__name__)


async def trigger_donation_matching(storage: Storage, user_id: str, donation_id: str):
    """
    Runs matching for a newly posted donation, notifies the donor in-app and
    alerts their phone when the donation carries an amount.
    This function is designed to run as a background task.
    """
    user = storage.get_user(user_id)
    donation = storage.get_donation(donation_id)
    if user is None or donation is None:
        logger.warning(
            "Background Task Warning: User %s or Donation %s not found for matching.", user_id, donation_id
        )
        return

    matches = await MatchingService(storage).match_donation(user, donation)

    storage.create_notification(
        schemas.NotificationCreate(
            user_id=user.id,
            title="Donation posted",
            message=f"'{donation.title}' is live with {len(matches)} suggested matches.",
            type="donation",
        )
    )

    if user.phone and donation.amount:
        await SmsService().send_donation_alert(user.phone, donation.title, f"₹{donation.amount}")
