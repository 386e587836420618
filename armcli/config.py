import os
from enum import StrEnum

from knack.config import CLIConfig
from pydantic import BaseModel, Field, ValidationError

from .exceptions.custom_exceptions import InvalidConfigurationError

CLI_NAME = "armcli"
CONFIG_ENV_VAR_PREFIX = "ARMCLI"
DEFAULT_CONFIG_DIR = os.path.expanduser(os.path.join("~", f".{CLI_NAME}"))

DEFAULT_MSI_PORT = 50342
DEFAULT_RESOURCE = "https://management.core.windows.net/"
DEFAULT_ENDPOINT = "https://management.azure.com"
DEFAULT_TIMEOUT = 30.0


def get_config_dir() -> str:
    return os.environ.get(f"{CONFIG_ENV_VAR_PREFIX}_CONFIG_DIR", DEFAULT_CONFIG_DIR)


def get_config() -> CLIConfig:
    return CLIConfig(
        config_dir=get_config_dir(), config_env_var_prefix=CONFIG_ENV_VAR_PREFIX
    )


class Settings(BaseModel):
    class AuthType(StrEnum):
        Msi = "msi"
        Token = "token"

    auth_type: AuthType = AuthType.Msi
    resource: str = Field(default=DEFAULT_RESOURCE, min_length=1)
    msi_port: int = Field(default=DEFAULT_MSI_PORT, gt=0)
    access_token: str | None = None
    token_type: str = Field(default="Bearer", min_length=1)
    endpoint: str = Field(default=DEFAULT_ENDPOINT, min_length=1)
    user_agent: str | None = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)


def load_settings(config: CLIConfig | None = None, **overrides) -> Settings:
    """
    Resolve settings from the config file and ARMCLI_* environment variables.

    Keyword overrides (typically command-line options) win when not None.
    """
    config = config or get_config()
    values = {
        "auth_type": config.get("auth", "type", fallback=Settings.AuthType.Msi.value),
        "access_token": config.get("auth", "access_token", fallback=None),
        "token_type": config.get("auth", "token_type", fallback="Bearer"),
        "msi_port": config.get("msi", "port", fallback=DEFAULT_MSI_PORT),
        "resource": config.get("core", "resource", fallback=DEFAULT_RESOURCE),
        "endpoint": config.get("core", "endpoint", fallback=DEFAULT_ENDPOINT),
        "user_agent": config.get("core", "user_agent", fallback=None),
        "timeout": config.get("core", "timeout", fallback=DEFAULT_TIMEOUT),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return Settings(**values)
    except ValidationError as e:
        raise InvalidConfigurationError(f"Invalid configuration: {e}") from e


def tracing_enabled(config: CLIConfig | None = None) -> bool:
    config = config or get_config()
    return config.getboolean("tracing", "enabled", fallback=False)
