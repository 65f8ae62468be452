from typing import Any, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.db.session import get_db
from app.models.user import User
from app.schemas.base import MessageResponse
from app.schemas.program import ProgramCreate, ProgramResponse, ProgramUpdate
from app.services.program import ProgramService

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[ProgramResponse])
def list_active_programs(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """Programs available for purchase."""
    return ProgramService.list_active_programs(db)


@admin_router.get("", response_model=List[ProgramResponse])
def list_programs(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return ProgramService.list_programs(db)


@admin_router.post("", response_model=ProgramResponse, status_code=status.HTTP_201_CREATED)
def create_program(
    program_data: ProgramCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return ProgramService.create_program(db, program_data)


@admin_router.get("/{program_id}", response_model=ProgramResponse)
def get_program(
    program_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return ProgramService.get_program(db, program_id)


@admin_router.put("/{program_id}", response_model=ProgramResponse)
def update_program(
    program_id: str,
    program_data: ProgramUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return ProgramService.update_program(db, program_id, program_data)


@admin_router.delete("/{program_id}", response_model=MessageResponse)
def delete_program(
    program_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """Delete a program that has no payments."""
    ProgramService.delete_program(db, program_id)
    return {"message": "Program deleted successfully"}
