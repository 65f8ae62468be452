"""Payment service.

Administrators record payments for any user, with or without a program, and
may override the amount. Members pay for a program at its listed price.
Transaction references are unique across all payments.
"""

from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload

from app.models.payment import Payment
from app.models.program import Program
from app.models.user import User
from app.schemas.payment import (
    AdminPaymentCreate,
    AdminPaymentResponse,
    MemberPaymentCreate,
    PaymentUpdate,
)
from app.schemas.program import ProgramSummary
from app.services.error_handler import handle_db_errors, transaction_rollback
from app.services.program import ProgramService, to_money
from app.utils.logger import payment_logger


class PaymentService:
    """Service class for payment operations."""

    @staticmethod
    def _ensure_unique_reference(db: Session, transaction_ref: str, exclude_id: Optional[str] = None) -> None:
        query = db.query(Payment.id).filter(Payment.transaction_ref == transaction_ref)
        if exclude_id is not None:
            query = query.filter(Payment.id != exclude_id)
        if query.first():
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Transaction reference already exists",
            )

    @staticmethod
    def get_payment(db: Session, payment_id: str) -> Payment:
        payment = db.query(Payment).filter(Payment.id == payment_id).first()
        if not payment:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found"
            )
        return payment

    @staticmethod
    def list_all(db: Session, user_id: Optional[str] = None) -> List[AdminPaymentResponse]:
        """Get payments for the admin table, most recent first.

        ``user_id`` of ``None`` or ``"all"`` lists every user's payments.
        """
        query = db.query(Payment).options(joinedload(Payment.user), joinedload(Payment.program))
        if user_id and user_id != "all":
            query = query.filter(Payment.user_id == user_id)
        payments = query.order_by(Payment.paid_at.desc()).all()
        return [PaymentService.to_admin_response(payment) for payment in payments]

    @staticmethod
    def list_for_user(db: Session, user_id: str) -> List[Payment]:
        return (
            db.query(Payment)
            .options(joinedload(Payment.program))
            .filter(Payment.user_id == user_id)
            .order_by(Payment.paid_at.desc())
            .all()
        )

    @staticmethod
    @handle_db_errors("create payment")
    def create_payment(db: Session, payment_data: AdminPaymentCreate) -> AdminPaymentResponse:
        """Record a payment for any user.

        A supplied amount is kept as is, even when it differs from the
        program price; without one the program price is charged.
        """
        if not db.query(User.id).filter(User.id == payment_data.user_id).first():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        program = None
        if payment_data.program_id:
            program = ProgramService.get_program(db, payment_data.program_id)

        PaymentService._ensure_unique_reference(db, payment_data.transaction_ref)

        amount = payment_data.amount if payment_data.amount is not None else program.price
        payment = Payment(
            user_id=payment_data.user_id,
            program_id=program.id if program else None,
            amount=to_money(amount),
            method=payment_data.method,
            transaction_ref=payment_data.transaction_ref,
        )
        if payment_data.paid_at is not None:
            payment.paid_at = payment_data.paid_at

        with transaction_rollback(db):
            db.add(payment)
        db.refresh(payment)

        payment_logger.success(
            "Payment recorded", "CREATE",
            payment_id=payment.id, user_id=payment.user_id, amount=str(payment.amount),
        )
        return PaymentService.to_admin_response(payment)

    @staticmethod
    @handle_db_errors("create member payment")
    def create_member_payment(db: Session, user: User, payment_data: MemberPaymentCreate) -> Payment:
        """Record a member's purchase of a program at the program price."""
        program = ProgramService.get_program(db, payment_data.program_id)
        PaymentService._ensure_unique_reference(db, payment_data.transaction_ref)

        payment = Payment(
            user_id=user.id,
            program_id=program.id,
            amount=program.price,
            method=payment_data.method,
            transaction_ref=payment_data.transaction_ref,
        )
        with transaction_rollback(db):
            db.add(payment)
        db.refresh(payment)

        payment_logger.success(
            "Member payment recorded", "CREATE",
            payment_id=payment.id, user_id=user.id, program_id=program.id,
        )
        return payment

    @staticmethod
    @handle_db_errors("update payment")
    def update_payment(db: Session, payment_id: str, payment_data: PaymentUpdate) -> AdminPaymentResponse:
        payment = PaymentService.get_payment(db, payment_id)
        update_data = payment_data.model_dump(exclude_unset=True)

        if update_data.get("transaction_ref"):
            PaymentService._ensure_unique_reference(db, update_data["transaction_ref"], exclude_id=payment.id)

        if "program_id" in update_data:
            program_id = update_data["program_id"]
            if program_id in ("", "none"):
                update_data["program_id"] = None
            elif program_id is not None:
                ProgramService.get_program(db, program_id)

        with transaction_rollback(db):
            for field, value in update_data.items():
                if value is None and field != "program_id":
                    continue
                if field == "amount":
                    value = to_money(value)
                setattr(payment, field, value)
        db.refresh(payment)

        payment_logger.info("Payment updated", "UPDATE", payment_id=payment.id)
        return PaymentService.to_admin_response(payment)

    @staticmethod
    @handle_db_errors("delete payment")
    def delete_payment(db: Session, payment_id: str) -> None:
        payment = PaymentService.get_payment(db, payment_id)
        with transaction_rollback(db):
            db.delete(payment)

        payment_logger.info("Payment deleted", "DELETE", payment_id=payment_id)

    @staticmethod
    def to_admin_response(payment: Payment) -> AdminPaymentResponse:
        program: Optional[Program] = payment.program
        return AdminPaymentResponse(
            id=payment.id,
            user_id=payment.user_id,
            user_name=payment.user.name,
            user_email=payment.user.email,
            program_id=payment.program_id,
            program=ProgramSummary.model_validate(program) if program else None,
            amount=float(payment.amount),
            method=payment.method,
            transaction_ref=payment.transaction_ref,
            paid_at=payment.paid_at,
            created_at=payment.created_at,
        )
