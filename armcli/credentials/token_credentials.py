from abc import ABC, abstractmethod

from ..models.credential import Token


class TokenCredentials(ABC):
    """A source of bearer tokens, one implementation per authentication strategy."""

    @abstractmethod
    def retrieve_token(self, timeout=None) -> Token:
        pass
