"""Abstract interface (port) for request credentials."""

from abc import ABC, abstractmethod


class CredentialProvider(ABC):
    """Supplies the authorization header; token lifecycle is managed elsewhere."""

    @abstractmethod
    def authorization_headers(self) -> dict[str, str]:
        """Headers to attach to every backend request."""
        ...
