from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.db.session import get_db
from app.models.user import User
from app.schemas.base import MessageResponse
from app.schemas.payment import (
    AdminPaymentCreate,
    AdminPaymentResponse,
    MemberPaymentCreate,
    PaymentResponse,
    PaymentUpdate,
)
from app.services.payment import PaymentService

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[PaymentResponse])
def list_my_payments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """The caller's payment history, most recent first."""
    return PaymentService.list_for_user(db, current_user.id)


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def create_my_payment(
    payment_data: MemberPaymentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Pay for a program. The amount charged is the program price."""
    return PaymentService.create_member_payment(db, current_user, payment_data)


@admin_router.get("", response_model=List[AdminPaymentResponse])
def list_payments(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """List payments; ``userId=all`` or no ``userId`` lists everyone's."""
    return PaymentService.list_all(db, user_id)


@admin_router.post("", response_model=AdminPaymentResponse, status_code=status.HTTP_201_CREATED)
def create_payment(
    payment_data: AdminPaymentCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return PaymentService.create_payment(db, payment_data)


@admin_router.put("/{payment_id}", response_model=AdminPaymentResponse)
def update_payment(
    payment_id: str,
    payment_data: PaymentUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return PaymentService.update_payment(db, payment_id, payment_data)


@admin_router.delete("/{payment_id}", response_model=MessageResponse)
def delete_payment(
    payment_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    PaymentService.delete_payment(db, payment_id)
    return {"message": "Payment deleted successfully"}
