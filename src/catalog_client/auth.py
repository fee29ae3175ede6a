from abc import ABC, abstractmethod

class AuthStrategy(ABC):
    """Abstract base class for authentication strategies."""
    @abstractmethod
    def get_auth_headers(self) -> dict:
        """Return a dictionary of headers to be included in API requests."""
        pass

class TokenAuth(AuthStrategy):
    """Authentication strategy sending the raw publish token in the 'Authorization' header."""
    def __init__(self, token: str):
        if not token or not isinstance(token, str):
            raise ValueError("Token must be a non-empty string.")
        self.token = token

    def get_auth_headers(self) -> dict:
        """Return the authentication headers for catalog writes."""
        return {"Authorization": self.token}
