from decimal import Decimal
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.payment import Payment
from app.models.program import Program
from app.schemas.program import ProgramCreate, ProgramUpdate
from app.services.error_handler import handle_db_errors, transaction_rollback
from app.utils.logger import program_logger


def to_money(value: float) -> Decimal:
    """Convert a client supplied amount to a two-place Decimal."""
    return Decimal(str(value)).quantize(Decimal("0.01"))


class ProgramService:
    @staticmethod
    def list_programs(db: Session) -> List[Program]:
        """Get all programs, newest first."""
        return db.query(Program).order_by(Program.created_at.desc()).all()

    @staticmethod
    def list_active_programs(db: Session) -> List[Program]:
        """Get the programs members can currently buy."""
        return (
            db.query(Program)
            .filter(Program.active.is_(True))
            .order_by(Program.price.asc())
            .all()
        )

    @staticmethod
    def get_program(db: Session, program_id: str) -> Program:
        program = db.query(Program).filter(Program.id == program_id).first()
        if not program:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Program not found"
            )
        return program

    @staticmethod
    @handle_db_errors("create program")
    def create_program(db: Session, program_data: ProgramCreate) -> Program:
        data = program_data.model_dump()
        data["price"] = to_money(data["price"])
        program = Program(**data)
        with transaction_rollback(db):
            db.add(program)
        db.refresh(program)

        program_logger.success("Program created", "CREATE", program_id=program.id, price=str(program.price))
        return program

    @staticmethod
    @handle_db_errors("update program")
    def update_program(db: Session, program_id: str, program_data: ProgramUpdate) -> Program:
        program = ProgramService.get_program(db, program_id)
        update_data = program_data.model_dump(exclude_unset=True)

        with transaction_rollback(db):
            for field, value in update_data.items():
                if value is None and field != "image_url":
                    continue
                if field == "price":
                    value = to_money(value)
                setattr(program, field, value)
        db.refresh(program)

        program_logger.info("Program updated", "UPDATE", program_id=program.id)
        return program

    @staticmethod
    @handle_db_errors("delete program")
    def delete_program(db: Session, program_id: str) -> None:
        """Delete a program. Programs that have been paid for are kept."""
        program = ProgramService.get_program(db, program_id)
        if db.query(Payment.id).filter(Payment.program_id == program_id).first():
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Program has payments and cannot be deleted",
            )

        with transaction_rollback(db):
            db.delete(program)

        program_logger.info("Program deleted", "DELETE", program_id=program_id)
