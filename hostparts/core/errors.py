"""Errors raised while decomposing a URI into domain parts."""

from __future__ import annotations


class ParseError(Exception):
    """Base class for every failure surfaced by parse()."""
    pass


class InvalidUriError(ParseError):
    """Raised when the input string is not a syntactically valid URI."""

    def __init__(self, uri: str, reason: str = ""):
        self.uri = uri
        message = f"Invalid URI: {uri!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoHostError(ParseError):
    """Raised when the URI parsed but carries no host component."""

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"URI has no host: {uri!r}")


class UnknownSuffixError(ParseError):
    """Raised when no rule in the suffix list covers the host."""

    def __init__(self, host: str):
        self.host = host
        super().__init__(f"No public suffix found for host {host!r}")


class InvalidDomainError(ParseError):
    """Raised when the host leaves no label for a second-level domain."""

    def __init__(self, host: str, suffix: str | None = None, reason: str = ""):
        self.host = host
        self.suffix = suffix
        if reason:
            message = f"Invalid domain {host!r}: {reason}"
        else:
            message = f"Host {host!r} has no second-level domain left of suffix {suffix!r}"
        super().__init__(message)
