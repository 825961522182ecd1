"""
Chooses the auth option for a connection from a source descriptor.
"""
import logging

from nack_auth.core.errors import UnsupportedSourceType
from nack_auth.core.materializer import CredentialMaterializer
from nack_auth.core.options import ConnectOption, NkeyFromSeed, UserCredentials
from nack_auth.credentials.models import AuthKind, AuthSource

logger = logging.getLogger(__name__)


def add_auth_to_options(
    source: object,
    opts: list[ConnectOption],
    materializer: CredentialMaterializer | None = None,
) -> list[ConnectOption]:
    """
    Append the auth option declared by source to opts.

    A credentials source takes precedence over an NKEY source. When neither
    is set, opts is returned unchanged. The input list is never mutated.
    """
    if not isinstance(source, AuthSource):
        raise UnsupportedSourceType(source)

    creds_source = source.credential_source()
    if creds_source:
        materializer = materializer or CredentialMaterializer()
        creds_file = materializer.materialize(creds_source, AuthKind.CREDS)
        return [*opts, UserCredentials(creds_file)]

    nkey_source = source.key_source()
    if nkey_source:
        materializer = materializer or CredentialMaterializer()
        nkey_file = materializer.materialize(nkey_source, AuthKind.NKEY)
        return [*opts, NkeyFromSeed.from_seed_file(nkey_file)]

    logger.debug(f"No auth configured for {type(source).__name__}")
    return opts
