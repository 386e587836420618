from ..connectors.httpconnectors import IdentityHttpConnector
from ..models.credential import Credential, Token
from .token_credentials import TokenCredentials


class MsiTokenCredentials(TokenCredentials):
    def __init__(self, credential: Credential, session=None):
        self.credential = credential
        self._session = session

    def retrieve_token(self, timeout=None) -> Token:
        return IdentityHttpConnector.fetch_token(
            self.credential, timeout=timeout, session=self._session
        )
