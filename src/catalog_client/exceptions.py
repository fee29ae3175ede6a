class CatalogError(Exception):
    """Base exception for all catalog client errors."""
    pass

class TransportError(CatalogError):
    """Raised when the catalog service is unreachable or fails without a readable message."""
    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code

class ServiceError(CatalogError):
    """Raised when the catalog service rejects a request with a human-readable message.

    The message is the service's own text so it can be shown to the user as-is.
    """
    def __init__(self, message: str, status_code: int = None, response_content: str = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_content = response_content

class InvalidRequestError(CatalogError, ValueError):
    """Raised before any network call when a request is missing a required argument."""
    pass
