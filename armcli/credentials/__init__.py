from pydantic import ValidationError

from ..config import Settings
from ..exceptions.custom_exceptions import InvalidConfigurationError
from ..models.credential import Credential
from .access_token import AccessTokenCredentials
from .msi import MsiTokenCredentials
from .token_credentials import TokenCredentials


def get_credentials(settings: Settings, resource=None, session=None) -> TokenCredentials:
    if settings.auth_type == Settings.AuthType.Msi:
        try:
            credential = Credential(
                resource=resource or settings.resource,
                endpointPort=settings.msi_port,
            )
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid MSI credential: {e}") from e
        return MsiTokenCredentials(credential, session=session)

    if settings.auth_type == Settings.AuthType.Token:
        if not settings.access_token:
            raise InvalidConfigurationError(
                "auth.access_token must be set when auth.type is 'token'."
            )
        return AccessTokenCredentials(
            settings.access_token, token_type=settings.token_type
        )

    raise InvalidConfigurationError(
        f"Unsupported authentication type '{settings.auth_type}'."
    )


__all__ = [
    "AccessTokenCredentials",
    "MsiTokenCredentials",
    "TokenCredentials",
    "get_credentials",
]
