"""
Connection options produced by auth resolution.

Each option maps to keyword arguments of nats.connect() in nats-py.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from nack_auth.core.errors import NkeySeedError
from nack_auth.core.nkey_seed import find_seed


@dataclass(frozen=True)
class ConnectOption(ABC):
    """Base class for options passed on to the connection call."""

    @abstractmethod
    def connect_kwargs(self) -> dict[str, Any]:
        """Keyword arguments this option contributes to nats.connect()."""
        pass


@dataclass(frozen=True)
class UserCredentials(ConnectOption):
    """Authenticate with a credentials file (JWT plus NKEY seed)."""
    path: str

    def connect_kwargs(self) -> dict[str, Any]:
        return {"user_credentials": self.path}


@dataclass(frozen=True)
class NkeyFromSeed(ConnectOption):
    """Authenticate by signing the server nonce with an NKEY seed file."""
    path: str

    @classmethod
    def from_seed_file(cls, path: str) -> "NkeyFromSeed":
        """
        Build the option after checking the file holds a valid seed.

        Accepts a bare seed or a decorated block with '-----' marker lines.
        """
        try:
            with open(path, encoding="utf-8") as f:
                contents = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise NkeySeedError(f"cannot read nkey seed file {path}: {e}") from e

        try:
            find_seed(contents)
        except NkeySeedError as e:
            raise NkeySeedError(f"{e} in {path}") from e
        return cls(path)

    def connect_kwargs(self) -> dict[str, Any]:
        return {"nkeys_seed": self.path}


def build_connect_kwargs(opts: list[ConnectOption]) -> dict[str, Any]:
    """Merge options into nats.connect() keyword arguments, later ones winning."""
    kwargs: dict[str, Any] = {}
    for opt in opts:
        kwargs.update(opt.connect_kwargs())
    return kwargs
