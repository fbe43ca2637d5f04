# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import pytest

from aidlink.schemas import schemas
from aidlink.storage.geo import has_coordinates, haversine_km, within_radius
from aidlink.storage.memory import MemStorage


def test_haversine_one_degree_of_longitude_at_equator():
    assert haversine_km(0, 0, 0, 1) == pytest.approx(111.195, rel=1e-4)


def test_haversine_same_point_is_zero():
    assert haversine_km(51.5, -0.12, 51.5, -0.12) == 0


def test_has_coordinates():
    assert has_coordinates(schemas.Location(lat=1, lng=2))
    assert not has_coordinates(schemas.Location(lat=1))
    assert not has_coordinates(schemas.Location(address="Main street"))
    assert not has_coordinates(None)


def test_within_radius_is_inclusive():
    origin = schemas.LocationFilter(lat=0, lng=0, radius=haversine_km(0, 0, 0, 1))
    assert within_radius(schemas.Location(lat=0, lng=1), origin)


def test_location_filter_default_radius():
    assert schemas.LocationFilter(lat=0, lng=0).radius == 10


def test_organizations_by_location(storage: MemStorage):
    near = storage.create_organization({"name": "Near", "location": {"lat": 0.001, "lng": 0.001}}, "u-1")
    storage.create_organization({"name": "Far", "location": {"lat": 10, "lng": 10}}, "u-2")
    storage.create_organization({"name": "Unknown"}, "u-3")
    storage.create_organization({"name": "Half", "location": {"lat": 0.0}}, "u-4")

    found = storage.get_organizations_by_location(lat=0, lng=0, radius=1)

    assert [o.id for o in found] == [near.id]


def test_organizations_by_location_default_radius_is_ten_km(storage: MemStorage):
    # About 8.9 km and 11.1 km north of the origin.
    inside = storage.create_organization({"name": "In", "location": {"lat": 0.08, "lng": 0}}, "u-1")
    storage.create_organization({"name": "Out", "location": {"lat": 0.1, "lng": 0}}, "u-2")

    assert [o.id for o in storage.get_organizations_by_location(0, 0)] == [inside.id]
