from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.utils.logger import db_logger

router = APIRouter()


@router.get("")
def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/database")
def database_health_check(db: Session = Depends(get_db)):
    """Check that the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        db_logger.error("Database health check failed", "HEALTH", error=str(e))
        raise HTTPException(status_code=503, detail="Service unavailable")
    return {"status": "healthy", "database": "connected"}
