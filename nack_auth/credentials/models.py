"""
Auth source descriptors and auth kinds using Pydantic.
"""
from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AuthKind(str, Enum):
    """Kinds of NATS authentication material."""
    CREDS = "creds"
    NKEY = "nkey"

    @property
    def suffix(self) -> str:
        """File extension used for cached files of this kind."""
        return AUTH_KIND_SUFFIX[self]


AUTH_KIND_SUFFIX = {
    AuthKind.CREDS: ".creds",
    AuthKind.NKEY: ".nk",
}


@runtime_checkable
class AuthSource(Protocol):
    """Anything that can supply a credentials source and an NKEY source."""

    def credential_source(self) -> str:
        ...

    def key_source(self) -> str:
        ...


class Options(BaseModel):
    """Controller-wide connection options."""

    nats_credentials: str = ""
    nats_nkey: str = ""
    servers: list[str] = Field(default_factory=list)

    def credential_source(self) -> str:
        return self.nats_credentials

    def key_source(self) -> str:
        return self.nats_nkey


class TLSConfig(BaseModel):
    """Client TLS files referenced by a server spec."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    client_cert: str = ""
    client_key: str = ""
    root_cas: list[str] = Field(default_factory=list)


class ServerSpec(BaseModel):
    """
    Per-resource server settings from a stream or consumer spec.

    Accepts the camelCase keys used by the custom resources.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    servers: list[str] = Field(default_factory=list)
    creds: str = ""
    nkey: str = ""
    tls: TLSConfig | None = None

    def credential_source(self) -> str:
        return self.creds

    def key_source(self) -> str:
        return self.nkey
