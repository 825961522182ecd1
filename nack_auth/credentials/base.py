"""
Abstract base class for content-addressed credential stores.
"""
import hashlib
import logging
import os
from abc import ABC, abstractmethod

from nack_auth.core.errors import UnsupportedAuthKind
from nack_auth.credentials.models import AuthKind

logger = logging.getLogger(__name__)


def content_digest(content: bytes) -> str:
    """Return the lowercase MD5 hex digest used as the cache key."""
    return hashlib.md5(content, usedforsecurity=False).hexdigest()


def coerce_kind(kind: AuthKind | str) -> AuthKind:
    """Convert a kind name to AuthKind, rejecting unknown names."""
    try:
        return AuthKind(kind)
    except ValueError:
        raise UnsupportedAuthKind(kind) from None


class CredentialStore(ABC):
    """
    Stores decoded credential bytes under a path derived from their digest.

    Layout:
    <creds_dir>/<md5>.creds
    <nkey_dir>/<md5>.nk
    """

    def __init__(self, creds_dir: str, nkey_dir: str):
        self._base_dirs = {
            AuthKind.CREDS: creds_dir,
            AuthKind.NKEY: nkey_dir,
        }

    def base_dir(self, kind: AuthKind | str) -> str:
        """Get the cache directory for an auth kind."""
        return self._base_dirs[coerce_kind(kind)]

    def path_for(self, digest: str, kind: AuthKind | str) -> str:
        """Get the cache path for a digest."""
        kind = coerce_kind(kind)
        return os.path.join(self._base_dirs[kind], f"{digest}{kind.suffix}")

    def put(self, content: bytes, kind: AuthKind | str) -> str:
        """Store content if not already cached and return its path."""
        kind = coerce_kind(kind)
        digest = content_digest(content)
        path = self.path_for(digest, kind)
        if not self.exists(digest, kind):
            self._write(path, content, kind)
            logger.info(f"cache to new file: {path}")
        return path

    @abstractmethod
    def exists(self, digest: str, kind: AuthKind | str) -> bool:
        """Check if content with this digest is already cached."""
        pass

    @abstractmethod
    def _write(self, path: str, content: bytes, kind: AuthKind) -> None:
        """Write content to path."""
        pass
