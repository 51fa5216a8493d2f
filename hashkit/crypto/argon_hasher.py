"""Argon2i and Argon2id hashing drivers."""

import logging

import argon2

from hashkit.crypto.errors import AlgorithmMismatchError, HashingUnsupportedError
from hashkit.crypto.password import get_info, resolve_option, verify_password
from hashkit.crypto.types import HashAlgorithm, HashInfo, HashOptions

DEFAULT_MEMORY = 1024
DEFAULT_TIME = 2
DEFAULT_THREADS = 2

logger = logging.getLogger(__name__)


class ArgonHasher:
    """Hashes values with Argon2i.

    Cost parameters are memory (KiB), time (iterations) and threads
    (parallelism). With ``verify`` enabled, :meth:`check` refuses digests
    whose embedded algorithm is not Argon2i instead of returning ``False``.
    """

    algorithm = HashAlgorithm.ARGON2I
    argon_type = argon2.Type.I

    def __init__(
        self,
        memory: int = DEFAULT_MEMORY,
        time: int = DEFAULT_TIME,
        threads: int = DEFAULT_THREADS,
        verify: bool = False,
    ) -> None:
        self._memory = memory
        self._time = time
        self._threads = threads
        self._verify_algorithm = verify

    @property
    def memory(self) -> int:
        """Default memory cost in KiB."""
        return self._memory

    @property
    def time(self) -> int:
        """Default number of iterations."""
        return self._time

    @property
    def threads(self) -> int:
        """Default degree of parallelism."""
        return self._threads

    @property
    def verify_algorithm(self) -> bool:
        """Whether :meth:`check` rejects digests of other algorithms."""
        return self._verify_algorithm

    def make(self, value: str, options: HashOptions | None = None) -> str:
        """Hash ``value`` with a fresh salt."""
        params = self._parameters(options)
        try:
            hasher = argon2.PasswordHasher(
                time_cost=params["time"],
                memory_cost=params["memory"],
                parallelism=params["threads"],
                type=self.argon_type,
            )
            return hasher.hash(value)
        except (argon2.exceptions.HashingError, ValueError, OverflowError) as exc:
            raise HashingUnsupportedError(
                f"{self.algorithm.capitalize()} hashing not supported."
            ) from exc

    def check(
        self, value: str, hashed_value: str, options: HashOptions | None = None
    ) -> bool:
        """Verify ``value`` against a stored digest."""
        if self._verify_algorithm:
            algo_name = self.info(hashed_value).algo_name
            if algo_name != HashAlgorithm.ARGON2I:
                logger.warning(
                    "Rejected %s digest on strict Argon2i driver", algo_name
                )
                raise AlgorithmMismatchError(
                    "This password does not use the Argon2i algorithm."
                )
        if not hashed_value:
            return False
        return verify_password(value, hashed_value)

    def needs_rehash(
        self, hashed_value: str, options: HashOptions | None = None
    ) -> bool:
        """True when the digest differs in algorithm or any cost parameter."""
        info = self.info(hashed_value)
        if info.algo_name != self.algorithm:
            return True
        return info.options != self._parameters(options)

    def info(self, hashed_value: str) -> HashInfo:
        """Parse the digest header."""
        return get_info(hashed_value)

    def _parameters(self, options: HashOptions | None) -> dict[str, int]:
        return {
            "memory": resolve_option(options, "memory", self._memory),
            "time": resolve_option(options, "time", self._time),
            "threads": resolve_option(options, "threads", self._threads),
        }


class Argon2idHasher(ArgonHasher):
    """Hashes values with Argon2id.

    The ``verify`` setting is accepted for configuration parity but has no
    effect: only the Argon2i driver guards against foreign digests.
    """

    algorithm = HashAlgorithm.ARGON2ID
    argon_type = argon2.Type.ID

    def check(
        self, value: str, hashed_value: str, options: HashOptions | None = None
    ) -> bool:
        """Verify ``value`` against a stored digest."""
        if not hashed_value:
            return False
        return verify_password(value, hashed_value)
