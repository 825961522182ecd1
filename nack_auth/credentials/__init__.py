"""
Credential cache module.
"""
from nack_auth.config.settings import get_settings
from nack_auth.credentials.base import CredentialStore
from nack_auth.credentials.local import LocalCredentialStore


def get_credential_store() -> CredentialStore:
    """Get the configured credential store."""
    settings = get_settings()

    if settings.credential_backend == "memory":
        from nack_auth.credentials.memory import InMemoryCredentialStore

        return InMemoryCredentialStore(settings.creds_cache_dir, settings.nkey_cache_dir)

    return LocalCredentialStore(
        settings.creds_cache_dir,
        settings.nkey_cache_dir,
        dir_mode=settings.cache_dir_mode,
        file_mode=settings.cache_file_mode,
    )
