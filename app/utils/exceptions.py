class MarketplaceException(Exception):
    """Base exception for all marketplace errors"""
    def __init__(self, message: str, code: str = "MARKETPLACE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

class WalletNotFoundError(MarketplaceException):
    def __init__(self, message: str = "The requested wallet was not found"):
        super().__init__(message, code="WALLET_NOT_FOUND")

class OfferNotFoundError(MarketplaceException):
    def __init__(self, message: str = "The requested offer was not found"):
        super().__init__(message, code="OFFER_NOT_FOUND")

class OfferNotAcceptableError(MarketplaceException):
    """Raised when accepting an offer that is inactive or past its expiry date"""
    def __init__(self, message: str = "This offer can no longer be accepted"):
        super().__init__(message, code="OFFER_NOT_ACCEPTABLE")
