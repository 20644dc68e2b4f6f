"""Credential provider backed by a static bearer token from settings."""

from admin_console.application.interfaces import CredentialProvider


class StaticTokenProvider(CredentialProvider):
    """Returns a fixed bearer token; an empty token sends no Authorization header."""

    def __init__(self, token: str):
        self._token = token.strip()

    def authorization_headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}
