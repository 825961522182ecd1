"""
Turns a declared credential source into a file a NATS client can read.

A source is one of:
- a path to an existing file, returned as is
- '<kind>:<text>' with literal '\\n' sequences standing for newlines
- 'base64:<payload>' holding standard base64
"""
import base64
import binascii
import logging
import os

from nack_auth.config.settings import get_settings
from nack_auth.core.errors import (
    Base64DecodeError,
    UnrecognizedSourceFormat,
    UnsupportedSourcePrefix,
)
from nack_auth.credentials import get_credential_store
from nack_auth.credentials.base import CredentialStore, coerce_kind
from nack_auth.credentials.models import AuthKind

logger = logging.getLogger(__name__)

BASE64_PREFIX = "base64"


class CredentialMaterializer:
    """
    Decodes credential sources and caches them in a content-addressed store.

    Usage:
        materializer = CredentialMaterializer()
        path = materializer.materialize("creds:-----BEGIN ...", AuthKind.CREDS)
    """

    def __init__(
        self,
        store: CredentialStore | None = None,
        strict_prefix: bool | None = None,
    ):
        settings = get_settings()
        self.store = store or get_credential_store()
        self.strict_prefix = (
            settings.strict_source_prefix if strict_prefix is None else strict_prefix
        )

    def materialize(self, source: str, kind: AuthKind | str) -> str:
        """Return a path holding the credential bytes for source."""
        if os.path.exists(source):
            return source

        kind = coerce_kind(kind)
        content = self.decode(source, kind)
        return self.store.put(content, kind)

    def decode(self, source: str, kind: AuthKind | str) -> bytes:
        """Decode a '<prefix>:<payload>' source into raw bytes."""
        kind = coerce_kind(kind)
        parts = source.split(":", 1)
        if len(parts) < 2:
            raise UnrecognizedSourceFormat(source, kind.value)

        prefix = parts[0].strip().lower()
        payload = parts[1].strip()

        if prefix == kind.value:
            return payload.replace("\\n", "\n").encode("utf-8")

        if prefix == BASE64_PREFIX:
            # Line-wrapped payloads are accepted; any other junk is rejected
            unwrapped = payload.replace("\r", "").replace("\n", "")
            try:
                return base64.b64decode(unwrapped, validate=True)
            except binascii.Error as e:
                raise Base64DecodeError(f"invalid base64 {kind.value} source: {e}") from e

        if self.strict_prefix:
            raise UnsupportedSourcePrefix(prefix, kind.value)

        logger.warning(f"Unrecognized {kind.value} source prefix {prefix!r}, caching empty content")
        return b""


def materialize(source: str, kind: AuthKind | str) -> str:
    """Materialize a source with the configured store."""
    return CredentialMaterializer().materialize(source, kind)
