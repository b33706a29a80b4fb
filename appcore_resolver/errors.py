class ResolverError(Exception):
    """Base class for errors raised while resolving the Appcore dependency."""


class InvalidDescriptorPath(ResolverError):
    def __init__(self, path, expected):
        self.path = path
        self.expected = expected
        super().__init__(f"'{path}' is not a {expected} descriptor path")


class InvalidReleasePin(ResolverError):
    pass


class ReleaseFetchError(ResolverError):
    pass


class ChecksumMismatch(ResolverError):
    def __init__(self, url, expected, actual):
        self.url = url
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Checksum mismatch for {url}: expected {expected}, got {actual}"
        )


class ConfigKeyError(ResolverError):
    pass
