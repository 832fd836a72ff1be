from fastapi import APIRouter
from . import marketplace, wallets, offers, messages

api_router = APIRouter()

# Include all routes
api_router.include_router(marketplace.router, tags=["marketplace"])
api_router.include_router(wallets.router, prefix="/wallets", tags=["wallets"])
api_router.include_router(offers.router, prefix="/offers", tags=["offers"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])
