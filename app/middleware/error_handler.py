from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from app.utils.exceptions import (
    WalletNotFoundError,
    OfferNotFoundError,
    OfferNotAcceptableError
)
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _error_response(status_code: int, error: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "details": details if details is not None else {}
        }
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    # Only keep JSON-safe parts; ctx may hold Decimals or exception objects
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg"),
            "type": error.get("type"),
        }
        for error in exc.errors()
    ]
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY, "validation_error", "Invalid request data", details
    )

async def wallet_not_found_handler(request: Request, exc: WalletNotFoundError):
    """Handle wallet not found errors"""
    return _error_response(status.HTTP_404_NOT_FOUND, "wallet_not_found", exc.message)

async def offer_not_found_handler(request: Request, exc: OfferNotFoundError):
    """Handle offer not found errors"""
    return _error_response(status.HTTP_404_NOT_FOUND, "offer_not_found", exc.message)

async def offer_not_acceptable_handler(request: Request, exc: OfferNotAcceptableError):
    """Handle accept attempts on inactive or expired offers"""
    return _error_response(status.HTTP_409_CONFLICT, "offer_not_acceptable", exc.message)

async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Handle database errors"""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "database_error", "A database error occurred"
    )

async def generic_exception_handler(request: Request, exc: Exception):
    """Handle all other exceptions"""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_server_error", "An unexpected error occurred"
    )
