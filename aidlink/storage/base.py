"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Mon Oct 13 2025
# SPDX-License-Identifier: MIT
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel

from aidlink.schemas import schemas

# Create and update payloads may be passed as models or as plain mappings.
Fields = Union[BaseModel, Mapping[str, Any]]


class Storage(ABC):
    """
    Repository contract for every entity kind.

    Create operations assign the id and creation timestamp and fill defaults.
    Get operations return None on a miss and list operations return an empty
    list. Update operations raise NotFoundError when the record is missing.
    Everything returned is a copy of the stored state.

    Create payloads are validated against the matching *Create schema, so field
    shapes such as the e-mail format are enforced by the store as well as by
    the HTTP layer. An update that sets a field the record cannot leave empty
    to None keeps the stored value.
    """

    # Users
    @abstractmethod
    def get_user(self, user_id: str) -> Optional[schemas.User]: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[schemas.User]: ...

    @abstractmethod
    def create_user(self, user: Fields) -> schemas.User: ...

    @abstractmethod
    def update_user(self, user_id: str, user: Fields) -> schemas.User: ...

    # Organizations
    @abstractmethod
    def create_organization(self, organization: Fields, user_id: str) -> schemas.Organization: ...

    @abstractmethod
    def get_organization_by_user_id(self, user_id: str) -> Optional[schemas.Organization]: ...

    @abstractmethod
    def get_organizations_by_location(
        self, lat: float, lng: float, radius: float = 10
    ) -> List[schemas.Organization]: ...

    # Donations
    @abstractmethod
    def create_donation(self, donation: Fields, donor_id: str) -> schemas.Donation:
        """Stores the donation and a companion "donation" feed item."""

    @abstractmethod
    def get_donations(
        self, type: Optional[str] = None, location: Optional[schemas.LocationFilter] = None
    ) -> List[schemas.Donation]: ...

    @abstractmethod
    def get_donation(self, donation_id: str) -> Optional[schemas.Donation]: ...

    @abstractmethod
    def update_donation(self, donation_id: str, donation: Fields) -> schemas.Donation: ...

    # Requests
    @abstractmethod
    def create_request(self, request: Fields, requester_id: str) -> schemas.Request:
        """Stores the request and a companion "request" feed item."""

    @abstractmethod
    def get_requests(
        self,
        type: Optional[str] = None,
        urgency: Optional[str] = None,
        location: Optional[schemas.LocationFilter] = None,
    ) -> List[schemas.Request]: ...

    @abstractmethod
    def get_request(self, request_id: str) -> Optional[schemas.Request]: ...

    @abstractmethod
    def update_request(self, request_id: str, request: Fields) -> schemas.Request: ...

    # Activities
    @abstractmethod
    def create_activity(self, activity: Fields, organizer_id: str) -> schemas.Activity:
        """Stores the activity and a companion "volunteer" feed item."""

    @abstractmethod
    def get_activities(self, location: Optional[schemas.LocationFilter] = None) -> List[schemas.Activity]: ...

    @abstractmethod
    def get_activity(self, activity_id: str) -> Optional[schemas.Activity]: ...

    @abstractmethod
    def update_activity(self, activity_id: str, activity: Fields) -> schemas.Activity: ...

    # Volunteer registrations
    @abstractmethod
    def create_volunteer_registration(
        self, registration: Fields, volunteer_id: str
    ) -> schemas.VolunteerRegistration: ...

    @abstractmethod
    def get_volunteer_registrations(self, volunteer_id: str) -> List[schemas.VolunteerRegistration]: ...

    # Matches
    @abstractmethod
    def get_matches(self, user_id: str) -> List[schemas.Match]: ...

    @abstractmethod
    def create_match(self, match: Fields) -> schemas.Match: ...

    # Activity feed
    @abstractmethod
    def get_activity_feed(self, limit: int = 50) -> List[schemas.ActivityFeedItem]: ...

    @abstractmethod
    def create_activity_feed_item(self, item: Fields) -> schemas.ActivityFeedItem: ...

    # Payments
    @abstractmethod
    def create_payment(self, payment: Fields, payer_id: str) -> schemas.Payment: ...

    @abstractmethod
    def get_payment(self, payment_id: str) -> Optional[schemas.Payment]: ...

    @abstractmethod
    def update_payment(self, payment_id: str, payment: Fields) -> schemas.Payment: ...

    # Notifications
    @abstractmethod
    def get_notifications(self, user_id: str) -> List[schemas.Notification]: ...

    @abstractmethod
    def create_notification(self, notification: Fields) -> schemas.Notification: ...

    @abstractmethod
    def mark_notification_as_read(self, notification_id: str) -> None:
        """Marks the notification read. Unknown ids are ignored."""
