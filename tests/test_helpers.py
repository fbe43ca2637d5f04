# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import datetime, timedelta, timezone

USER_PASSWORD = "testpassword"


class FakeClock:
    """Returns a strictly increasing UTC timestamp on every call."""

    def __init__(self, start=datetime(2025, 1, 1, tzinfo=timezone.utc), step=timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self):
        current = self.now
        self.now += self.step
        return current


def user_payload(email="donor@example.com", **overrides):
    payload = {
        "name": "Test Donor",
        "email": email,
        "password": "hashed-password",
        "user_type": "donor",
        "phone": "+15550001111",
    }
    payload.update(overrides)
    return payload


def donation_payload(**overrides):
    payload = {"type": "food", "title": "Rice bags", "description": "Ten bags of rice", "quantity": 10}
    payload.update(overrides)
    return payload


def request_payload(**overrides):
    payload = {"type": "money", "title": "School fees", "description": "Fees for three students"}
    payload.update(overrides)
    return payload


def activity_payload(start_time, /, **overrides):
    payload = {
        "title": "Park cleanup",
        "description": "Pick up litter in the park",
        "location": {"lat": 12.97, "lng": 77.59, "address": "Cubbon Park"},
        "start_time": start_time,
        "end_time": start_time + timedelta(hours=3),
        "skills": ["cleaning"],
    }
    payload.update(overrides)
    return payload


def register_user(client, email="auth_test_user@example.com", password=USER_PASSWORD, **overrides):
    """Registers through the API and returns (user json, bearer headers)."""
    body = {
        "name": "Auth Test User",
        "email": email,
        "password": password,
        "user_type": "donor",
        "phone": "+15550002222",
    }
    body.update(overrides)
    response = client.post("/api/v1/register", json=body)
    assert response.status_code == 201
    data = response.json()
    return data["user"], {"Authorization": f"Bearer {data['access_token']}"}
