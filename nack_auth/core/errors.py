"""
Errors raised while resolving authentication sources.
"""


class AuthSourceError(Exception):
    """Base exception for auth source resolution."""

    pass


class UnsupportedSourceType(AuthSourceError):
    """Descriptor does not expose credential and key sources."""

    def __init__(self, source: object):
        self.source = source
        super().__init__(f"unknown type: {type(source).__name__}")


class UnsupportedAuthKind(AuthSourceError):
    """Auth kind is not one of the known kinds."""

    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"unknown auth type: {kind}")


class UnrecognizedSourceFormat(AuthSourceError):
    """Source has no '<prefix>:<payload>' form and names no existing file."""

    def __init__(self, source: str, kind: str):
        self.source = source
        self.kind = kind
        super().__init__(
            f"not supported {kind} auth or file not exist: {source}"
        )


class UnsupportedSourcePrefix(AuthSourceError):
    """Source prefix is neither the auth kind nor 'base64'."""

    def __init__(self, prefix: str, kind: str):
        self.prefix = prefix
        self.kind = kind
        super().__init__(
            f"unsupported prefix {prefix!r} for {kind} auth, "
            f"expected {kind!r} or 'base64'"
        )


class Base64DecodeError(AuthSourceError):
    """Base64 payload could not be decoded."""

    pass


class NkeySeedError(AuthSourceError):
    """Seed file is unreadable or holds no NKEY seed."""

    pass
