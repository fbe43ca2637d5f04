'''
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Oct 14 2025
# SPDX-License-Identifier: MIT
'''

import logging

import httpx

from aidlink.config import settings

logger = logging.getLogger(__name__)


class SmsService:
    def __init__(self):
        self.account_sid = settings.twilio_account_sid
        self.auth_token = settings.twilio_auth_token
        self.from_number = settings.twilio_from_number
        self.base_url = settings.twilio_base_url

    @property
    def configured(self) -> bool:
        return bool(self.account_sid and self.auth_token and self.from_number)

    async def send_donation_alert(self, phone: str, donation_title: str, amount: str) -> bool:
        """
        Tells a donor that their donation is live.
        """
        body = f"Your donation '{donation_title}' of {amount} is now live. Thank you for giving!"
        return await self.send_sms(phone, body)

    async def send_sms(self, to: str, body: str) -> bool:
        """
        Sends a text message through the Twilio Messages API.
        Returns False when the gateway is not configured or the call fails.
        """
        if not self.configured:
            logger.info("SMS gateway not configured, skipping message to %s", to)
            return False

        url = f"{self.base_url}/Accounts/{self.account_sid}/Messages.json"
        async with httpx.AsyncClient(timeout=10.0) as client:
            try:
                response = await client.post(
                    url,
                    data={"To": to, "From": self.from_number, "Body": body},
                    auth=(self.account_sid, self.auth_token),
                )
                response.raise_for_status()
            except httpx.HTTPError:
                logger.exception("Error sending SMS to %s", to)
                return False

        logger.info("SMS sent to %s. Status Code: %s", to, response.status_code)
        return True
