"""End-to-end hashing flows through a configured HashManager."""

import pytest

from hashkit.core.manager import HashManager
from hashkit.core.settings import HashingSettings
from hashkit.crypto.errors import AlgorithmMismatchError
from hashkit.crypto.types import HashAlgorithm

FAST_CONFIG = {
    "hashing.bcrypt": {"rounds": 4},
    "hashing.argon": {"memory": 1024, "time": 2, "threads": 2},
}


def _manager(**overrides: object) -> HashManager:
    return HashManager(HashingSettings.from_mapping({**FAST_CONFIG, **overrides}))


class TestArgon2idDefault:
    """Default driver configured as argon2id."""

    def test_login_flow(self) -> None:
        manager = _manager(**{"hashing.driver": "argon2id"})
        digest = manager.make("secret1")
        assert digest.startswith("$argon2id$")
        assert manager.check("secret1", digest) is True
        assert manager.check("wrong", digest) is False
        assert manager.needs_rehash(digest) is False
        assert manager.needs_rehash(digest, {"memory": 2048}) is True


class TestAllDrivers:
    """Properties shared by every driver."""

    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_roundtrip_and_salt(self, algorithm: HashAlgorithm) -> None:
        driver = _manager().driver(algorithm)
        d1 = driver.make("s3cret")
        d2 = driver.make("s3cret")
        assert d1 != d2
        assert driver.check("s3cret", d1) is True
        assert driver.check("s3cret", d2) is True
        assert driver.check("other", d1) is False
        assert driver.needs_rehash(d1) is False

    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_info_feeds_back_as_options(self, algorithm: HashAlgorithm) -> None:
        driver = _manager().driver(algorithm)
        digest = driver.make("s3cret")
        assert driver.needs_rehash(digest, driver.info(digest).options) is False


class TestRehashOnLogin:
    """A digest made under old settings is upgraded on next login."""

    def test_bcrypt_rounds_raised(self) -> None:
        old = _manager()
        digest = old.make("secret")

        new = _manager(**{"hashing.bcrypt": {"rounds": 5}})
        assert new.check("secret", digest) is True
        assert new.needs_rehash(digest) is True

        upgraded = new.make("secret")
        assert new.needs_rehash(upgraded) is False
        assert new.info(upgraded).options == {"rounds": 5}

    def test_migrate_bcrypt_to_argon2id(self) -> None:
        digest = _manager().make("secret")

        manager = _manager(**{"hashing.driver": "argon2id"})
        assert manager.check("secret", digest) is True
        assert manager.needs_rehash(digest) is True
        assert manager.info(manager.make("secret")).algo_name == "argon2id"


class TestStrictArgon2i:
    """The verify flag guards only the Argon2i driver."""

    def test_guard(self) -> None:
        manager = _manager(
            **{"hashing.driver": "argon", "hashing.argon": {"verify": True}}
        )
        bcrypt_digest = manager.driver("bcrypt").make("secret")
        with pytest.raises(AlgorithmMismatchError):
            manager.check("secret", bcrypt_digest)
        assert manager.driver("argon2id").check("secret", bcrypt_digest) is True
