"""Type definitions for hashing drivers and digest metadata."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

HashOptions = Mapping[str, int | None]


class HashAlgorithm(StrEnum):
    """Supported password-hashing algorithms."""

    BCRYPT = "bcrypt"
    ARGON2I = "argon2i"
    ARGON2ID = "argon2id"


class HashInfo(BaseModel):
    """Metadata parsed from a digest header."""

    model_config = ConfigDict(frozen=True)

    algo_name: str
    algo_id: str
    options: dict[str, int] = Field(default_factory=dict)


@runtime_checkable
class Hasher(Protocol):
    """Operations every hashing driver provides."""

    def make(self, value: str, options: HashOptions | None = None) -> str:
        """Hash a plaintext value into a self-describing digest."""
        ...

    def check(
        self, value: str, hashed_value: str, options: HashOptions | None = None
    ) -> bool:
        """Verify a plaintext value against a digest."""
        ...

    def needs_rehash(
        self, hashed_value: str, options: HashOptions | None = None
    ) -> bool:
        """Report whether the digest was made with other parameters."""
        ...

    def info(self, hashed_value: str) -> HashInfo:
        """Parse the digest header."""
        ...
