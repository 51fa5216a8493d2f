"""Hashing settings loaded from environment variables or a config mapping."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hashkit.crypto.argon_hasher import DEFAULT_MEMORY, DEFAULT_THREADS, DEFAULT_TIME
from hashkit.crypto.bcrypt_hasher import DEFAULT_ROUNDS

DEFAULT_DRIVER = "bcrypt"

_MISSING = object()


class BcryptSettings(BaseSettings):
    """Cost settings for the bcrypt driver."""

    model_config = SettingsConfigDict(env_prefix="HASHING_BCRYPT_")

    rounds: int = DEFAULT_ROUNDS


class ArgonSettings(BaseSettings):
    """Cost settings shared by the Argon2i and Argon2id drivers."""

    model_config = SettingsConfigDict(env_prefix="HASHING_ARGON_")

    memory: int = DEFAULT_MEMORY
    time: int = DEFAULT_TIME
    threads: int = DEFAULT_THREADS
    verify: bool = False


class HashingSettings(BaseSettings):
    """Driver selection plus per-driver settings."""

    model_config = SettingsConfigDict(env_prefix="HASHING_")

    driver: str = DEFAULT_DRIVER
    internal_token: str = ""
    bcrypt: BcryptSettings = Field(default_factory=BcryptSettings)
    argon: ArgonSettings = Field(default_factory=ArgonSettings)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "HashingSettings":
        """Build settings from an application config mapping.

        Keys may be dotted (``"hashing.bcrypt.rounds"``), dotted subtrees
        (``{"hashing.argon": {"memory": 2048}}``) or plain nested mappings.
        Missing keys take the built-in defaults; the environment is not read.
        """
        values = _section(config, "hashing", cls, skip=("bcrypt", "argon"))
        values["bcrypt"] = BcryptSettings(
            **_section(config, "hashing.bcrypt", BcryptSettings)
        )
        values["argon"] = ArgonSettings(
            **_section(config, "hashing.argon", ArgonSettings)
        )
        return cls(**values)


def _section(
    config: Mapping[str, Any],
    path: str,
    model: type[BaseSettings],
    skip: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Values for every field of ``model``, from ``path`` or the field default."""
    found: dict[str, Any] = {}
    for name, field in model.model_fields.items():
        if name in skip:
            continue
        value = _lookup(config, f"{path}.{name}")
        if value is _MISSING or value is None:
            value = field.get_default(call_default_factory=True)
        found[name] = value
    return found


def _lookup(config: Mapping[str, Any], path: str) -> Any:
    """Resolve a dotted path against flat, dotted or nested mapping keys."""
    if path in config:
        return config[path]
    parts = path.split(".")
    for i in range(len(parts) - 1, 0, -1):
        subtree = config.get(".".join(parts[:i]))
        if isinstance(subtree, Mapping):
            value = _lookup(subtree, ".".join(parts[i:]))
            if value is not _MISSING:
                return value
    return _MISSING
