from pydantic import BaseModel, ConfigDict, Field


class Credential(BaseModel):
    """Describes a token request against a local identity endpoint."""

    model_config = ConfigDict(frozen=True)

    resource: str = Field(min_length=1)
    endpointPort: int = Field(gt=0)


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    tokenType: str = Field(min_length=1)
    accessToken: str = Field(min_length=1)

    def authorization_header(self) -> str:
        return f"{self.tokenType} {self.accessToken}"
