from fastapi import FastAPI
from app.config import settings
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from app.api.v1 import api_router
from app.middleware.error_handler import (
    validation_exception_handler,
    wallet_not_found_handler,
    offer_not_found_handler,
    offer_not_acceptable_handler,
    database_exception_handler,
    generic_exception_handler
)
from app.utils.exceptions import (
    WalletNotFoundError,
    OfferNotFoundError,
    OfferNotAcceptableError
)

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json"
)

@app.get("/health")
def health_check():
    return {"status": "healthy"}

# Register exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(WalletNotFoundError, wallet_not_found_handler)
app.add_exception_handler(OfferNotFoundError, offer_not_found_handler)
app.add_exception_handler(OfferNotAcceptableError, offer_not_acceptable_handler)
app.add_exception_handler(SQLAlchemyError, database_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Include API routes
app.include_router(api_router, prefix=settings.API_PREFIX)
