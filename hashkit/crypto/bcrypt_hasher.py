"""bcrypt hashing driver."""

import bcrypt

from hashkit.crypto.errors import HashingUnsupportedError
from hashkit.crypto.password import (
    BCRYPT_MAX_BYTES,
    get_info,
    resolve_option,
    verify_password,
)
from hashkit.crypto.types import HashAlgorithm, HashInfo, HashOptions

DEFAULT_ROUNDS = 10


class BcryptHasher:
    """Hashes values with bcrypt at a configurable cost factor."""

    algorithm = HashAlgorithm.BCRYPT

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        """Default cost factor used when a call does not override it."""
        return self._rounds

    def make(self, value: str, options: HashOptions | None = None) -> str:
        """Hash ``value`` with a fresh salt.

        Values longer than 72 bytes once UTF-8 encoded are refused rather
        than truncated.
        """
        try:
            secret = value.encode("utf-8")
            if len(secret) > BCRYPT_MAX_BYTES:
                raise ValueError(f"Value exceeds {BCRYPT_MAX_BYTES} bytes.")
            salt = bcrypt.gensalt(rounds=self._cost(options))
            hashed = bcrypt.hashpw(secret, salt)
        except ValueError as exc:
            raise HashingUnsupportedError("Bcrypt hashing not supported.") from exc
        return hashed.decode("utf-8")

    def check(
        self, value: str, hashed_value: str, options: HashOptions | None = None
    ) -> bool:
        """Verify ``value`` against a stored digest."""
        if not hashed_value:
            return False
        return verify_password(value, hashed_value)

    def needs_rehash(
        self, hashed_value: str, options: HashOptions | None = None
    ) -> bool:
        """True when the digest is not bcrypt at the effective cost."""
        info = self.info(hashed_value)
        if info.algo_name != self.algorithm:
            return True
        return info.options.get("rounds") != self._cost(options)

    def info(self, hashed_value: str) -> HashInfo:
        """Parse the digest header."""
        return get_info(hashed_value)

    def _cost(self, options: HashOptions | None) -> int:
        return resolve_option(options, "rounds", self._rounds)
