"""
Hazelcast JDBC exceptions.

Custom exception hierarchy for URL parsing and configuration resolution.
"""


class HazelcastJdbcError(Exception):
    """Base exception for all hazelcast_jdbc errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)


class NullUrlError(HazelcastJdbcError):
    """Raised when no URL is given at all."""

    def __init__(self, message: str = "URL cannot be null.", code: int | None = None):
        super().__init__(message, code)


class UrlSyntaxError(HazelcastJdbcError):
    """Raised when a jdbc:hazelcast URL is syntactically invalid."""

    def __init__(self, message: str, url: str | None = None, code: int | None = None):
        self.url = url
        super().__init__(message, code)


class UnsupportedUrlError(HazelcastJdbcError):
    """Raised by strict parsing when the URL belongs to another driver."""

    def __init__(self, message: str, url: str | None = None, code: int | None = None):
        self.url = url
        super().__init__(message, code)
