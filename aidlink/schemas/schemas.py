# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Set, Type, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, model_validator


def _to_utc(value: datetime) -> datetime:
    # Naive values are read as UTC so every stored datetime is comparable.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_to_utc)]


def non_nullable_fields(model_cls: Type[BaseModel]) -> Set[str]:
    """Fields of a record model that never hold None: required ones and those with a non-None default."""
    return {
        name for name, field in model_cls.model_fields.items() if field.is_required() or field.default is not None
    }


class PartialUpdate(BaseModel):
    """
    Base for PATCH payloads. Omitted fields are left alone; an explicit null is
    only accepted for fields the record allows to be empty.
    """

    record_model: ClassVar[Type[BaseModel]]

    @model_validator(mode="after")
    def reject_null_for_required_fields(self):
        required = non_nullable_fields(self.record_model)
        nulls = sorted(name for name in self.model_fields_set if name in required and getattr(self, name) is None)
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class TokenData(BaseModel):
    user_id: Optional[str] = None


# --- Locations ---
class Location(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None
    address: Optional[str] = None


class LocationFilter(BaseModel):
    lat: float
    lng: float
    radius: float = 10


# --- Users ---
class UserBase(BaseModel):
    name: str
    email: EmailStr
    user_type: str
    phone: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[Location] = None


class UserCreate(UserBase):
    password: str


class User(UserCreate):
    id: str
    avatar: Optional[str] = None
    verified: bool = False
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserPublic(UserBase):
    id: str
    avatar: Optional[str] = None
    verified: bool = False
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserUpdate(PartialUpdate):
    record_model = User

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    user_type: Optional[str] = None
    phone: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[Location] = None
    verified: Optional[bool] = None


class Registration(BaseModel):
    user: UserPublic
    access_token: str
    token_type: str = "bearer"


# --- Organizations ---
class OrganizationCreate(BaseModel):
    name: str
    description: Optional[str] = None
    website: Optional[str] = None
    documents: List[str] = []
    location: Optional[Location] = None


class Organization(OrganizationCreate):
    id: str
    user_id: str
    verified: bool = False
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Donations ---
class DonationCreate(BaseModel):
    type: str
    title: str
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    quantity: Optional[int] = None
    location: Optional[Location] = None
    images: List[str] = []
    expiry_date: Optional[UtcDatetime] = None


class Donation(DonationCreate):
    id: str
    donor_id: str
    recipient_id: Optional[str] = None
    status: str = "active"
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DonationUpdate(PartialUpdate):
    record_model = Donation

    recipient_id: Optional[str] = None
    type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    quantity: Optional[int] = None
    location: Optional[Location] = None
    images: Optional[List[str]] = None
    status: Optional[str] = None
    expiry_date: Optional[UtcDatetime] = None


# --- Requests ---
class RequestCreate(BaseModel):
    type: str
    title: str
    description: str
    urgency: str = "medium"
    target_amount: Optional[Decimal] = None
    target_quantity: Optional[int] = None
    location: Optional[Location] = None
    images: List[str] = []
    deadline: Optional[UtcDatetime] = None


class Request(RequestCreate):
    id: str
    requester_id: str
    raised_amount: Decimal = Decimal("0")
    received_quantity: int = 0
    status: str = "active"
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RequestUpdate(PartialUpdate):
    record_model = Request

    type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    urgency: Optional[str] = None
    target_amount: Optional[Decimal] = None
    raised_amount: Optional[Decimal] = None
    target_quantity: Optional[int] = None
    received_quantity: Optional[int] = None
    location: Optional[Location] = None
    images: Optional[List[str]] = None
    status: Optional[str] = None
    deadline: Optional[UtcDatetime] = None


# --- Activities ---
class ActivityCreate(BaseModel):
    title: str
    description: str
    location: Location
    start_time: UtcDatetime
    end_time: UtcDatetime
    max_volunteers: Optional[int] = None
    skills: List[str] = []


class Activity(ActivityCreate):
    id: str
    organizer_id: str
    current_volunteers: int = 0
    status: str = "active"
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ActivityUpdate(PartialUpdate):
    record_model = Activity

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[Location] = None
    start_time: Optional[UtcDatetime] = None
    end_time: Optional[UtcDatetime] = None
    max_volunteers: Optional[int] = None
    current_volunteers: Optional[int] = None
    skills: Optional[List[str]] = None
    status: Optional[str] = None


class VolunteerRegistrationCreate(BaseModel):
    activity_id: str
    message: Optional[str] = None


class VolunteerRegistration(VolunteerRegistrationCreate):
    id: str
    volunteer_id: str
    status: str = "pending"
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Matches ---
class DonationTarget(BaseModel):
    kind: Literal["donation"] = "donation"
    donation_id: str


class RequestTarget(BaseModel):
    kind: Literal["request"] = "request"
    request_id: str


class ActivityTarget(BaseModel):
    kind: Literal["activity"] = "activity"
    activity_id: str


MatchTarget = Annotated[Union[DonationTarget, RequestTarget, ActivityTarget], Field(discriminator="kind")]


class MatchCreate(BaseModel):
    user_id: str
    target: Optional[MatchTarget] = None
    score: float
    reason: Optional[str] = None
    status: str = "pending"


class Match(MatchCreate):
    id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Activity feed ---
FeedItemType = Literal["donation", "request", "volunteer"]


class ActivityFeedItemCreate(BaseModel):
    user_id: str
    type: FeedItemType
    title: str
    description: str = ""
    metadata: Dict[str, Any] = {}
    likes: int = 0
    comments: int = 0


class ActivityFeedItem(ActivityFeedItemCreate):
    id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Payments ---
class PaymentCreate(BaseModel):
    recipient_id: str
    donation_id: Optional[str] = None
    request_id: Optional[str] = None
    amount: Decimal
    gateway_payment_id: Optional[str] = None
    gateway_order_id: Optional[str] = None
    status: str = "created"


class Payment(PaymentCreate):
    id: str
    payer_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PaymentUpdate(PartialUpdate):
    record_model = Payment

    gateway_payment_id: Optional[str] = None
    gateway_order_id: Optional[str] = None
    status: Optional[str] = None


# --- Notifications ---
class NotificationCreate(BaseModel):
    user_id: str
    title: str
    message: str
    type: Optional[str] = None


class Notification(NotificationCreate):
    id: str
    read: bool = False
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Assistant ---
class ChatMessage(BaseModel):
    message: str


class ChatReply(BaseModel):
    reply: str


class ImageAnalysis(BaseModel):
    analysis: str
