"""
In-memory credential cache for tests and dry runs.
"""
from nack_auth.credentials.base import CredentialStore
from nack_auth.credentials.models import AuthKind


class InMemoryCredentialStore(CredentialStore):
    """Keeps the on-disk path layout but never touches the filesystem."""

    def __init__(
        self,
        creds_dir: str = "/nack-accounts/creds/",
        nkey_dir: str = "/nack-accounts/keys/",
    ):
        super().__init__(creds_dir, nkey_dir)
        self._files: dict[str, bytes] = {}
        self.writes = 0

    def exists(self, digest: str, kind: AuthKind | str) -> bool:
        return self.path_for(digest, kind) in self._files

    def read(self, path: str) -> bytes:
        """Get stored bytes for a path."""
        return self._files[path]

    def paths(self) -> list[str]:
        """List all stored paths."""
        return sorted(self._files)

    def _write(self, path: str, content: bytes, kind: AuthKind) -> None:
        self._files[path] = content
        self.writes += 1
