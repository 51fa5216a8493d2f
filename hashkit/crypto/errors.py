"""Exceptions raised by hashing drivers and the driver registry."""


class HashingError(Exception):
    """Base class for every hashing failure."""


class HashingUnsupportedError(HashingError):
    """The underlying primitive refused to produce a digest."""


class AlgorithmMismatchError(HashingError):
    """A strict driver was asked to verify a digest of another algorithm."""


class MalformedDigestError(HashingError, ValueError):
    """The digest is not in a recognized password-hash format."""


class UnsupportedDriverError(HashingError, ValueError):
    """No driver factory is registered under the requested name."""
