# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from aidlink.api.v1.endpoints.assistant import get_ai_service
from aidlink.storage.memory import MemStorage
from tests.test_helpers import register_user


# --- organizations ---
def test_organization_endpoints(client: TestClient, auth_user):
    user, headers = auth_user
    assert client.get("/api/v1/organizations/me", headers=headers).status_code == 404

    response = client.post(
        "/api/v1/organizations/",
        json={"name": "City Food Bank", "location": {"lat": 0.001, "lng": 0.001, "address": "Dock 4"}},
        headers=headers,
    )
    assert response.status_code == 201
    organization = response.json()
    assert organization["user_id"] == user["id"]
    assert organization["verified"] is False
    assert organization["documents"] == []

    assert client.get("/api/v1/organizations/me", headers=headers).json()["id"] == organization["id"]

    nearby = client.get("/api/v1/organizations/nearby", params={"lat": 0, "lng": 0, "radius": 1}).json()
    assert [o["id"] for o in nearby] == [organization["id"]]
    assert client.get("/api/v1/organizations/nearby", params={"lat": 10, "lng": 10}).json() == []


# --- notifications ---
def test_notification_endpoints(client: TestClient, storage: MemStorage, auth_user):
    user, headers = auth_user
    notification = storage.create_notification({"user_id": user["id"], "title": "Hi", "message": "Welcome"})
    other = storage.create_notification({"user_id": "someone-else", "title": "Hi", "message": "Not yours"})

    listed = client.get("/api/v1/notifications/me", headers=headers).json()
    assert [n["id"] for n in listed] == [notification.id]
    assert listed[0]["read"] is False

    response = client.post(f"/api/v1/notifications/{notification.id}/read", headers=headers)
    assert response.status_code == 204
    assert storage.get_notifications(user["id"])[0].read is True

    assert client.post(f"/api/v1/notifications/{other.id}/read", headers=headers).status_code == 204
    assert storage.get_notifications("someone-else")[0].read is False

    assert client.post("/api/v1/notifications/unknown/read", headers=headers).status_code == 204


# --- matches ---
def test_read_my_matches(client: TestClient, storage: MemStorage, auth_user):
    user, headers = auth_user
    storage.create_match(
        {"user_id": user["id"], "target": {"kind": "donation", "donation_id": "d-1"}, "score": 0.8, "reason": "Fits"}
    )
    storage.create_match({"user_id": "someone-else", "score": 0.1})

    matches = client.get("/api/v1/matches/me", headers=headers).json()

    assert len(matches) == 1
    assert matches[0]["target"] == {"kind": "donation", "donation_id": "d-1"}
    assert matches[0]["status"] == "pending"


# --- payments ---
def test_payment_endpoints(client: TestClient, auth_user):
    _, headers = auth_user
    recipient, recipient_headers = register_user(client, email="recipient@example.com")
    _, stranger_headers = register_user(client, email="stranger@example.com")

    response = client.post(
        "/api/v1/payments/", json={"recipient_id": recipient["id"], "amount": "250"}, headers=headers
    )
    assert response.status_code == 201
    payment = response.json()
    assert payment["status"] == "created"

    assert client.get(f"/api/v1/payments/{payment['id']}", headers=recipient_headers).status_code == 200
    assert client.get(f"/api/v1/payments/{payment['id']}", headers=stranger_headers).status_code == 403
    assert client.get("/api/v1/payments/unknown", headers=headers).status_code == 404

    updated = client.patch(
        f"/api/v1/payments/{payment['id']}",
        json={"status": "paid", "gateway_payment_id": "pay_1"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["status"] == "paid"
    assert (
        client.patch(f"/api/v1/payments/{payment['id']}", json={"status": "x"}, headers=recipient_headers).status_code
        == 403
    )
    assert (
        client.patch(f"/api/v1/payments/{payment['id']}", json={"status": None}, headers=headers).status_code
        == 422
    )


# --- assistant ---
def _override_ai(client: TestClient, **methods):
    ai_service = MagicMock()
    for name, value in methods.items():
        setattr(ai_service, name, AsyncMock(return_value=value))
    client.app.dependency_overrides[get_ai_service] = lambda: ai_service
    return ai_service


def test_chat(client: TestClient, auth_user):
    _, headers = auth_user
    ai_service = _override_ai(client, chat="Try the food bank on Main street.")

    response = client.post("/api/v1/chat", json={"message": "Where can I give food?"}, headers=headers)

    assert response.status_code == 200
    assert response.json() == {"reply": "Try the food bank on Main street."}
    assert ai_service.chat.await_args.args[0] == "Where can I give food?"


def test_chat_unavailable(client: TestClient, auth_user):
    _, headers = auth_user
    _override_ai(client, chat=None)

    response = client.post("/api/v1/chat", json={"message": "Hello"}, headers=headers)

    assert response.status_code == 503
    assert response.json()["detail"] == "Chat service temporarily unavailable"


def test_analyze_image(client: TestClient, auth_user):
    _, headers = auth_user
    ai_service = _override_ai(client, analyze_image="A winter jacket in good condition.")

    response = client.post(
        "/api/v1/analyze-image", files={"image": ("jacket.png", b"\x89PNG data", "image/png")}, headers=headers
    )

    assert response.status_code == 200
    assert response.json() == {"analysis": "A winter jacket in good condition."}
    ai_service.analyze_image.assert_awaited_once_with(b"\x89PNG data", "image/png")


def test_analyze_image_empty_upload(client: TestClient, auth_user):
    _, headers = auth_user
    _override_ai(client, analyze_image="unused")

    response = client.post("/api/v1/analyze-image", files={"image": ("empty.png", b"", "image/png")}, headers=headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "No image provided"


def test_analyze_image_failure(client: TestClient, auth_user):
    _, headers = auth_user
    _override_ai(client, analyze_image=None)

    response = client.post("/api/v1/analyze-image", files={"image": ("a.jpg", b"jpeg", "image/jpeg")}, headers=headers)

    assert response.status_code == 500
