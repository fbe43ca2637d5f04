# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from aidlink.app import create_app
from aidlink.storage.memory import MemStorage
from tests.test_helpers import FakeClock, register_user


@pytest.fixture(name="clock")
def clock_fixture():
    return FakeClock()


@pytest.fixture(name="storage")
def storage_fixture(clock):
    """
    A fresh in-memory store for each test.
    """
    return MemStorage(clock=clock)


@pytest.fixture(name="trigger_donation_matching")
def trigger_donation_matching_fixture(mocker):
    return mocker.patch(
        "aidlink.events.donation_handlers.trigger_donation_matching", new_callable=MagicMock
    )


@pytest.fixture(name="client")
def client_fixture(storage, trigger_donation_matching):
    """
    Provides a TestClient around an app built on the test store,
    with donation background work mocked out.
    """
    app = create_app(storage)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(name="auth_user")
def auth_user_fixture(client):
    """
    Registers a user and returns (user json, auth headers).
    """
    return register_user(client)
