"""
Error handling utilities for database operations.

This module maps SQLAlchemy errors to HTTP responses and provides a decorator
and a transaction context manager used by the service layer.
"""

import logging
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Dict

from fastapi import HTTPException, status
from sqlalchemy.exc import (
    DataError,
    DatabaseError,
    DisconnectionError,
    IntegrityError,
    OperationalError,
    SQLAlchemyError,
    StatementError,
)
from sqlalchemy.exc import TimeoutError as SQLTimeoutError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class DatabaseErrorHandler:
    """
    Error classifier for database operations.

    Turns SQLAlchemy errors into HTTP exceptions with a status code and a
    message that is safe to show to clients.
    """

    # Order matters: subclasses must come before their bases
    ERROR_MAPPINGS = {
        IntegrityError: {
            'status_code': status.HTTP_409_CONFLICT,
            'detail': 'Data integrity constraint violation',
        },
        DisconnectionError: {
            'status_code': status.HTTP_503_SERVICE_UNAVAILABLE,
            'detail': 'Database connection lost',
        },
        OperationalError: {
            'status_code': status.HTTP_503_SERVICE_UNAVAILABLE,
            'detail': 'Database operation failed',
        },
        SQLTimeoutError: {
            'status_code': status.HTTP_504_GATEWAY_TIMEOUT,
            'detail': 'Database operation timed out',
        },
        DataError: {
            'status_code': status.HTTP_400_BAD_REQUEST,
            'detail': 'Invalid data format',
        },
        DatabaseError: {
            'status_code': status.HTTP_500_INTERNAL_SERVER_ERROR,
            'detail': 'Database error occurred',
        },
        StatementError: {
            'status_code': status.HTTP_400_BAD_REQUEST,
            'detail': 'Invalid database query',
        },
    }

    @classmethod
    def classify_error(cls, error: Exception) -> Dict[str, Any]:
        """
        Classify a database error.

        Args:
            error: The exception that occurred

        Returns:
            Dictionary with status_code and detail
        """
        for exc_type, mapping in cls.ERROR_MAPPINGS.items():
            if isinstance(error, exc_type):
                return mapping.copy()

        return {
            'status_code': status.HTTP_500_INTERNAL_SERVER_ERROR,
            'detail': 'An unexpected database error occurred',
        }

    @classmethod
    def handle_error(cls, error: Exception, operation_name: str = "database operation") -> HTTPException:
        """
        Log a database error and build the matching HTTPException.

        Args:
            error: The exception that occurred
            operation_name: Name of the operation for logging

        Returns:
            HTTPException with appropriate status code and message
        """
        error_info = cls.classify_error(error)

        if error_info['status_code'] >= 500:
            logger.error(f"Database error in {operation_name}: {error}")
        else:
            logger.warning(f"Rejected {operation_name}: {error}")

        return HTTPException(
            status_code=error_info['status_code'],
            detail=error_info['detail'],
        )


def handle_db_errors(operation_name: str = "database operation"):
    """
    Decorator converting database errors raised by a service call into HTTP errors.

    HTTPExceptions raised on purpose by the service pass through unchanged.

    Args:
        operation_name: Name of the operation for logging
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except SQLAlchemyError as e:
                raise DatabaseErrorHandler.handle_error(e, operation_name)
        return wrapper
    return decorator


@contextmanager
def transaction_rollback(db: Session):
    """
    Commit on success, roll back on any error.

    Usage:
        with transaction_rollback(db):
            db.add(obj)
    """
    try:
        yield db
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Transaction rolled back due to error: {e}")
        raise
