"""
Local file-based credential cache.
Files are named by content digest, so byte-identical credentials share one file.
"""
import os
from pathlib import Path
from uuid import uuid4

from nack_auth.credentials.base import CredentialStore
from nack_auth.credentials.models import AuthKind


class LocalCredentialStore(CredentialStore):
    """
    Caches decoded credentials as files on disk.

    Structure:
    /nack-accounts/
    ├── creds/<md5>.creds
    └── keys/<md5>.nk
    """

    def __init__(
        self,
        creds_dir: str = "/nack-accounts/creds/",
        nkey_dir: str = "/nack-accounts/keys/",
        dir_mode: int = 0o666,
        file_mode: int = 0o666,
    ):
        super().__init__(creds_dir, nkey_dir)
        self.dir_mode = dir_mode
        self.file_mode = file_mode

    def exists(self, digest: str, kind: AuthKind | str) -> bool:
        """Check if the cache file for a digest exists."""
        return Path(self.path_for(digest, kind)).exists()

    def _make_dirs(self, base_dir: Path) -> None:
        """Create base_dir and any missing parents, all with dir_mode."""
        missing = [d for d in (base_dir, *base_dir.parents) if not d.exists()]
        for directory in reversed(missing):
            directory.mkdir(mode=self.dir_mode, exist_ok=True)

    def _write(self, path: str, content: bytes, kind: AuthKind) -> None:
        """
        Write through a temp file and rename into place.

        Concurrent writers of the same digest replace identical bytes.
        """
        target = Path(path)
        self._make_dirs(Path(self.base_dir(kind)))

        tmp_file = target.with_name(f".{target.name}.{uuid4().hex}.tmp")
        fd = os.open(tmp_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, self.file_mode)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            tmp_file.replace(target)
        except Exception:
            tmp_file.unlink(missing_ok=True)
            raise
