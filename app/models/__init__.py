
from app.database import Base
from .wallet import Wallet
from .offer import Offer
from .message import Message
from .marketplace_stats import MarketplaceStats
from .user import User

__all__ = ["Base", "Wallet", "Offer", "Message", "MarketplaceStats", "User"]
