"""Driver registry that resolves, caches and delegates to hashing drivers."""

import logging
import threading
from collections.abc import Callable

from hashkit.core.settings import DEFAULT_DRIVER, HashingSettings
from hashkit.crypto.argon_hasher import Argon2idHasher, ArgonHasher
from hashkit.crypto.bcrypt_hasher import BcryptHasher
from hashkit.crypto.errors import UnsupportedDriverError
from hashkit.crypto.types import HashAlgorithm, Hasher, HashInfo, HashOptions

logger = logging.getLogger(__name__)

DriverFactory = Callable[[HashingSettings], Hasher]

# Name used for Argon2i by older configurations.
DRIVER_ALIASES = {"argon": HashAlgorithm.ARGON2I}


def create_bcrypt_driver(settings: HashingSettings) -> BcryptHasher:
    """Build the bcrypt driver from the ``bcrypt`` settings subtree."""
    return BcryptHasher(rounds=settings.bcrypt.rounds)


def create_argon_driver(settings: HashingSettings) -> ArgonHasher:
    """Build the Argon2i driver from the ``argon`` settings subtree."""
    argon = settings.argon
    return ArgonHasher(
        memory=argon.memory, time=argon.time, threads=argon.threads, verify=argon.verify
    )


def create_argon2id_driver(settings: HashingSettings) -> Argon2idHasher:
    """Build the Argon2id driver from the ``argon`` settings subtree."""
    argon = settings.argon
    return Argon2idHasher(
        memory=argon.memory, time=argon.time, threads=argon.threads, verify=argon.verify
    )


DRIVER_FACTORIES: dict[HashAlgorithm, DriverFactory] = {
    HashAlgorithm.BCRYPT: create_bcrypt_driver,
    HashAlgorithm.ARGON2I: create_argon_driver,
    HashAlgorithm.ARGON2ID: create_argon2id_driver,
}


class HashManager:
    """Resolves hashing drivers by name and forwards calls to the default one.

    Each driver is built on first use and cached for the lifetime of the
    manager. Resolution is serialized, so concurrent first lookups of the
    same name observe a single instance.
    """

    def __init__(
        self,
        settings: HashingSettings | None = None,
        factories: dict[HashAlgorithm, DriverFactory] | None = None,
    ) -> None:
        self._settings = settings or HashingSettings()
        self._factories = dict(DRIVER_FACTORIES if factories is None else factories)
        self._drivers: dict[HashAlgorithm, Hasher] = {}
        self._lock = threading.Lock()

    @property
    def settings(self) -> HashingSettings:
        return self._settings

    @property
    def default_driver(self) -> str:
        """Configured default driver name."""
        return self._settings.driver or DEFAULT_DRIVER

    @property
    def drivers(self) -> dict[HashAlgorithm, Hasher]:
        """Snapshot of the drivers created so far."""
        with self._lock:
            return dict(self._drivers)

    def driver(self, name: str | HashAlgorithm | None = None) -> Hasher:
        """Return the driver registered under ``name`` or the default one."""
        algorithm = self._resolve_name(name or self.default_driver)

        cached = self._drivers.get(algorithm)
        if cached is not None:
            return cached

        with self._lock:
            if algorithm not in self._drivers:
                self._drivers[algorithm] = self._factories[algorithm](self._settings)
                logger.debug("Created %s hashing driver", algorithm.value)
            return self._drivers[algorithm]

    def make(self, value: str, options: HashOptions | None = None) -> str:
        """Hash ``value`` with the default driver."""
        return self.driver().make(value, options)

    def check(
        self, value: str, hashed_value: str, options: HashOptions | None = None
    ) -> bool:
        """Verify ``value`` with the default driver."""
        return self.driver().check(value, hashed_value, options)

    def needs_rehash(
        self, hashed_value: str, options: HashOptions | None = None
    ) -> bool:
        """Ask the default driver whether ``hashed_value`` is stale."""
        return self.driver().needs_rehash(hashed_value, options)

    def info(self, hashed_value: str) -> HashInfo:
        """Parse ``hashed_value`` with the default driver."""
        return self.driver().info(hashed_value)

    def _resolve_name(self, name: str | HashAlgorithm) -> HashAlgorithm:
        key = str(name).lower()
        algorithm = DRIVER_ALIASES.get(key)
        if algorithm is None:
            try:
                algorithm = HashAlgorithm(key)
            except ValueError:
                raise UnsupportedDriverError(f"Driver [{name}] not supported.") from None
        if algorithm not in self._factories:
            raise UnsupportedDriverError(f"Driver [{name}] not supported.")
        return algorithm
