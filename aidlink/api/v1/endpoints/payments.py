# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from fastapi import APIRouter, Depends, HTTPException, status

from aidlink.dependencies import ensure_owner, get_current_user, get_storage
from aidlink.schemas import schemas
from aidlink.storage.base import Storage

router = APIRouter(
    prefix="/payments",
    tags=["Payments"],
    responses={404: {"description": "Not found"}},
)


def _get_payment_or_404(storage: Storage, payment_id: str) -> schemas.Payment:
    db_payment = storage.get_payment(payment_id)
    if db_payment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return db_payment


@router.post("/", response_model=schemas.Payment, status_code=status.HTTP_201_CREATED)
def create_payment(
    payment: schemas.PaymentCreate,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """
    Records a payment from the authenticated user. Gateway references are filled in later.
    """
    return storage.create_payment(payment, payer_id=current_user.id)


@router.get("/{payment_id}", response_model=schemas.Payment)
def read_payment(
    payment_id: str,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    db_payment = _get_payment_or_404(storage, payment_id)
    if current_user.id not in (db_payment.payer_id, db_payment.recipient_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    return db_payment


@router.patch("/{payment_id}", response_model=schemas.Payment)
def update_payment(
    payment_id: str,
    payment: schemas.PaymentUpdate,
    current_user: schemas.User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    db_payment = _get_payment_or_404(storage, payment_id)
    ensure_owner(db_payment.payer_id, current_user)
    return storage.update_payment(payment_id, payment)
