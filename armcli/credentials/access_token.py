from ..models.credential import Token
from .token_credentials import TokenCredentials


class AccessTokenCredentials(TokenCredentials):
    """Hands out a token that was obtained elsewhere, e.g. by a cloud console."""

    def __init__(self, access_token: str, token_type: str = "Bearer"):
        self._token = Token(tokenType=token_type, accessToken=access_token)

    def retrieve_token(self, timeout=None) -> Token:
        return self._token
