"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Mon Oct 13 2025
# SPDX-License-Identifier: MIT
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from aidlink.exceptions import NotFoundError
from aidlink.schemas import schemas
from aidlink.storage.base import Fields, Storage
from aidlink.storage.geo import within_radius

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Never taken from an update payload.
IMMUTABLE_FIELDS = ("id", "created_at")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def _as_model(model_cls: Type[ModelT], data: Fields) -> ModelT:
    if type(data) is model_cls:
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    return model_cls.model_validate(data)


def _changes(data: Fields) -> Dict[str, Any]:
    if isinstance(data, BaseModel):
        changes = data.model_dump(exclude_unset=True)
    else:
        changes = dict(data)
    for key in IMMUTABLE_FIELDS:
        changes.pop(key, None)
    return changes


def _copies(records: Iterable[ModelT]) -> List[ModelT]:
    return [record.model_copy(deep=True) for record in records]


def _newest_first(records: List[ModelT]) -> List[ModelT]:
    # Sorting is stable, so reversing first puts later inserts ahead on equal timestamps.
    return sorted(reversed(records), key=lambda record: record.created_at, reverse=True)


class MemStorage(Storage):
    """
    Process-local Storage backed by dictionaries keyed by id.

    One re-entrant lock guards all tables, so an instance can be shared between
    FastAPI's threadpool and the event loop. The clock and id factory are
    injectable for tests.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_id,
    ):
        self._clock = clock
        self._new_id = id_factory
        self._lock = threading.RLock()
        self._users: Dict[str, schemas.User] = {}
        self._organizations: Dict[str, schemas.Organization] = {}
        self._donations: Dict[str, schemas.Donation] = {}
        self._requests: Dict[str, schemas.Request] = {}
        self._activities: Dict[str, schemas.Activity] = {}
        self._volunteer_registrations: Dict[str, schemas.VolunteerRegistration] = {}
        self._matches: Dict[str, schemas.Match] = {}
        self._activity_feed: Dict[str, schemas.ActivityFeedItem] = {}
        self._payments: Dict[str, schemas.Payment] = {}
        self._notifications: Dict[str, schemas.Notification] = {}

    # --- helpers ---
    def _stamp(self, model_cls: Type[ModelT], payload: BaseModel, **fields: Any) -> ModelT:
        return model_cls(**payload.model_dump(), **fields, id=self._new_id(), created_at=self._clock())

    def _insert(self, table: Dict[str, ModelT], record: ModelT) -> ModelT:
        with self._lock:
            table[record.id] = record
        logger.debug("Stored %s %s", type(record).__name__, record.id)
        return record.model_copy(deep=True)

    def _get(self, table: Dict[str, ModelT], record_id: str) -> Optional[ModelT]:
        with self._lock:
            record = table.get(record_id)
            return record.model_copy(deep=True) if record is not None else None

    def _values(self, table: Dict[str, ModelT]) -> List[ModelT]:
        with self._lock:
            return list(table.values())

    def _update(self, table: Dict[str, ModelT], entity: str, record_id: str, data: Fields) -> ModelT:
        changes = _changes(data)
        with self._lock:
            current = table.get(record_id)
            if current is None:
                logger.warning("%s %s not found for update", entity, record_id)
                raise NotFoundError(entity, record_id)
            required = schemas.non_nullable_fields(type(current))
            # A null for a field the record cannot leave empty keeps the current value.
            changes = {k: v for k, v in changes.items() if v is not None or k not in required}
            merged = type(current).model_validate({**current.model_dump(), **changes})
            table[record_id] = merged
        logger.debug("Updated %s %s: %s", entity, record_id, sorted(changes))
        return merged.model_copy(deep=True)

    # --- users ---
    def get_user(self, user_id: str) -> Optional[schemas.User]:
        return self._get(self._users, user_id)

    def get_user_by_email(self, email: str) -> Optional[schemas.User]:
        for user in self._values(self._users):
            if user.email == email:
                return user.model_copy(deep=True)
        return None

    def create_user(self, user: Fields) -> schemas.User:
        payload = _as_model(schemas.UserCreate, user)
        return self._insert(self._users, self._stamp(schemas.User, payload))

    def update_user(self, user_id: str, user: Fields) -> schemas.User:
        return self._update(self._users, "User", user_id, user)

    # --- organizations ---
    def create_organization(self, organization: Fields, user_id: str) -> schemas.Organization:
        payload = _as_model(schemas.OrganizationCreate, organization)
        return self._insert(self._organizations, self._stamp(schemas.Organization, payload, user_id=user_id))

    def get_organization_by_user_id(self, user_id: str) -> Optional[schemas.Organization]:
        for organization in self._values(self._organizations):
            if organization.user_id == user_id:
                return organization.model_copy(deep=True)
        return None

    def get_organizations_by_location(
        self, lat: float, lng: float, radius: float = 10
    ) -> List[schemas.Organization]:
        origin = schemas.LocationFilter(lat=lat, lng=lng, radius=radius)
        return _copies(o for o in self._values(self._organizations) if within_radius(o.location, origin))

    # --- donations ---
    def create_donation(self, donation: Fields, donor_id: str) -> schemas.Donation:
        payload = _as_model(schemas.DonationCreate, donation)
        with self._lock:
            record = self._insert(self._donations, self._stamp(schemas.Donation, payload, donor_id=donor_id))
            self.create_activity_feed_item(
                {
                    "user_id": donor_id,
                    "type": "donation",
                    "title": f"New donation: {record.title}",
                    "description": record.description or "",
                    "metadata": {"donation_id": record.id, "type": record.type},
                }
            )
        return record

    def get_donations(
        self, type: Optional[str] = None, location: Optional[schemas.LocationFilter] = None
    ) -> List[schemas.Donation]:
        donations = self._values(self._donations)
        if type:
            donations = [d for d in donations if d.type == type]
        if location is not None:
            donations = [d for d in donations if within_radius(d.location, location)]
        return _copies(_newest_first(donations))

    def get_donation(self, donation_id: str) -> Optional[schemas.Donation]:
        return self._get(self._donations, donation_id)

    def update_donation(self, donation_id: str, donation: Fields) -> schemas.Donation:
        return self._update(self._donations, "Donation", donation_id, donation)

    # --- requests ---
    def create_request(self, request: Fields, requester_id: str) -> schemas.Request:
        payload = _as_model(schemas.RequestCreate, request)
        with self._lock:
            record = self._insert(self._requests, self._stamp(schemas.Request, payload, requester_id=requester_id))
            self.create_activity_feed_item(
                {
                    "user_id": requester_id,
                    "type": "request",
                    "title": f"New request: {record.title}",
                    "description": record.description,
                    "metadata": {"request_id": record.id, "urgency": record.urgency},
                }
            )
        return record

    def get_requests(
        self,
        type: Optional[str] = None,
        urgency: Optional[str] = None,
        location: Optional[schemas.LocationFilter] = None,
    ) -> List[schemas.Request]:
        requests = self._values(self._requests)
        if type:
            requests = [r for r in requests if r.type == type]
        if urgency:
            requests = [r for r in requests if r.urgency == urgency]
        if location is not None:
            requests = [r for r in requests if within_radius(r.location, location)]
        return _copies(_newest_first(requests))

    def get_request(self, request_id: str) -> Optional[schemas.Request]:
        return self._get(self._requests, request_id)

    def update_request(self, request_id: str, request: Fields) -> schemas.Request:
        return self._update(self._requests, "Request", request_id, request)

    # --- activities ---
    def create_activity(self, activity: Fields, organizer_id: str) -> schemas.Activity:
        payload = _as_model(schemas.ActivityCreate, activity)
        with self._lock:
            record = self._insert(
                self._activities, self._stamp(schemas.Activity, payload, organizer_id=organizer_id)
            )
            self.create_activity_feed_item(
                {
                    "user_id": organizer_id,
                    "type": "volunteer",
                    "title": f"New volunteer opportunity: {record.title}",
                    "description": record.description,
                    "metadata": {"activity_id": record.id, "location": record.location.model_dump()},
                }
            )
        return record

    def get_activities(self, location: Optional[schemas.LocationFilter] = None) -> List[schemas.Activity]:
        activities = self._values(self._activities)
        if location is not None:
            activities = [a for a in activities if within_radius(a.location, location)]
        return _copies(sorted(activities, key=lambda activity: activity.start_time))

    def get_activity(self, activity_id: str) -> Optional[schemas.Activity]:
        return self._get(self._activities, activity_id)

    def update_activity(self, activity_id: str, activity: Fields) -> schemas.Activity:
        return self._update(self._activities, "Activity", activity_id, activity)

    # --- volunteer registrations ---
    def create_volunteer_registration(
        self, registration: Fields, volunteer_id: str
    ) -> schemas.VolunteerRegistration:
        payload = _as_model(schemas.VolunteerRegistrationCreate, registration)
        return self._insert(
            self._volunteer_registrations,
            self._stamp(schemas.VolunteerRegistration, payload, volunteer_id=volunteer_id),
        )

    def get_volunteer_registrations(self, volunteer_id: str) -> List[schemas.VolunteerRegistration]:
        return _copies(r for r in self._values(self._volunteer_registrations) if r.volunteer_id == volunteer_id)

    # --- matches ---
    def get_matches(self, user_id: str) -> List[schemas.Match]:
        return _copies(m for m in self._values(self._matches) if m.user_id == user_id)

    def create_match(self, match: Fields) -> schemas.Match:
        payload = _as_model(schemas.MatchCreate, match)
        return self._insert(self._matches, self._stamp(schemas.Match, payload))

    # --- activity feed ---
    def get_activity_feed(self, limit: int = 50) -> List[schemas.ActivityFeedItem]:
        return _copies(_newest_first(self._values(self._activity_feed))[:limit])

    def create_activity_feed_item(self, item: Fields) -> schemas.ActivityFeedItem:
        payload = _as_model(schemas.ActivityFeedItemCreate, item)
        return self._insert(self._activity_feed, self._stamp(schemas.ActivityFeedItem, payload))

    # --- payments ---
    def create_payment(self, payment: Fields, payer_id: str) -> schemas.Payment:
        payload = _as_model(schemas.PaymentCreate, payment)
        return self._insert(self._payments, self._stamp(schemas.Payment, payload, payer_id=payer_id))

    def get_payment(self, payment_id: str) -> Optional[schemas.Payment]:
        return self._get(self._payments, payment_id)

    def update_payment(self, payment_id: str, payment: Fields) -> schemas.Payment:
        return self._update(self._payments, "Payment", payment_id, payment)

    # --- notifications ---
    def get_notifications(self, user_id: str) -> List[schemas.Notification]:
        notifications = [n for n in self._values(self._notifications) if n.user_id == user_id]
        return _copies(_newest_first(notifications))

    def create_notification(self, notification: Fields) -> schemas.Notification:
        payload = _as_model(schemas.NotificationCreate, notification)
        return self._insert(self._notifications, self._stamp(schemas.Notification, payload, read=False))

    def mark_notification_as_read(self, notification_id: str) -> None:
        with self._lock:
            notification = self._notifications.get(notification_id)
            if notification is not None:
                self._notifications[notification_id] = notification.model_copy(update={"read": True})
