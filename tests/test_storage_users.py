# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import pytest
from pydantic import ValidationError

from aidlink.exceptions import NotFoundError
from aidlink.schemas import schemas
from aidlink.storage.memory import MemStorage
from tests.test_helpers import user_payload


def test_create_user_applies_defaults(storage: MemStorage):
    user = storage.create_user(user_payload())

    assert user.id
    assert user.created_at is not None
    assert user.avatar is None
    assert user.verified is False
    assert user.bio is None
    assert user.location is None
    assert user.password == "hashed-password"


def test_create_user_ignores_caller_supplied_defaults(storage: MemStorage):
    user = storage.create_user(user_payload(verified=True, avatar="http://x/a.png", id="chosen"))

    assert user.verified is False
    assert user.avatar is None
    assert user.id != "chosen"


def test_create_user_accepts_schema_instance(storage: MemStorage):
    user = storage.create_user(schemas.UserCreate(**user_payload(email="model@example.com")))
    assert user.email == "model@example.com"


def test_get_user_round_trip(storage: MemStorage):
    user = storage.create_user(user_payload())

    assert storage.get_user(user.id) == user


def test_get_user_miss_returns_none(storage: MemStorage):
    assert storage.get_user("missing") is None


def test_get_user_by_email(storage: MemStorage):
    first = storage.create_user(user_payload(email="same@example.com", name="First"))
    storage.create_user(user_payload(email="same@example.com", name="Second"))
    storage.create_user(user_payload(email="other@example.com"))

    found = storage.get_user_by_email("same@example.com")
    assert found.id == first.id
    assert storage.get_user_by_email("nobody@example.com") is None


def test_returned_user_is_a_copy(storage: MemStorage):
    user = storage.create_user(user_payload(location={"lat": 1.0, "lng": 2.0}))
    user.name = "Changed"
    user.location.lat = 50.0

    stored = storage.get_user(user.id)
    assert stored.name == "Test Donor"
    assert stored.location.lat == 1.0


def test_update_user_merges_fields(storage: MemStorage):
    user = storage.create_user(user_payload())

    updated = storage.update_user(user.id, {"bio": "I cook", "verified": True})

    assert updated.bio == "I cook"
    assert updated.verified is True
    assert updated.name == user.name
    assert updated.email == user.email
    assert storage.get_user(user.id) == updated


def test_update_user_with_update_model_only_uses_set_fields(storage: MemStorage):
    user = storage.create_user(user_payload(bio="Keep me"))

    updated = storage.update_user(user.id, schemas.UserUpdate(avatar="http://img/1.png"))

    assert updated.avatar == "http://img/1.png"
    assert updated.bio == "Keep me"


def test_update_user_never_changes_identity(storage: MemStorage):
    user = storage.create_user(user_payload())

    updated = storage.update_user(user.id, {"id": "new-id", "created_at": "2030-01-01T00:00:00Z", "name": "N"})

    assert updated.id == user.id
    assert updated.created_at == user.created_at
    assert storage.get_user("new-id") is None


def test_update_missing_user_raises_not_found(storage: MemStorage):
    with pytest.raises(NotFoundError) as exc_info:
        storage.update_user("missing", {"name": "Ghost"})

    assert exc_info.value.entity == "User"
    assert exc_info.value.entity_id == "missing"
    assert str(exc_info.value) == "User not found"


def test_create_organization_defaults(storage: MemStorage):
    owner = storage.create_user(user_payload(user_type="organization"))

    organization = storage.create_organization({"name": "Food Bank"}, user_id=owner.id)

    assert organization.user_id == owner.id
    assert organization.verified is False
    assert organization.documents == []
    assert organization.description is None
    assert organization.location is None


def test_get_organization_by_user_id(storage: MemStorage):
    organization = storage.create_organization({"name": "Shelter"}, user_id="owner-1")
    storage.create_organization({"name": "Other"}, user_id="owner-2")

    assert storage.get_organization_by_user_id("owner-1").id == organization.id
    assert storage.get_organization_by_user_id("owner-3") is None


def test_create_user_validates_field_shapes(storage: MemStorage):
    with pytest.raises(ValidationError):
        storage.create_user(user_payload(email="not-an-email"))

    assert storage.get_user_by_email("not-an-email") is None
