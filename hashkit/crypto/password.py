"""Digest verification and parsing shared by every hashing driver."""

import re

import argon2
import bcrypt

from hashkit.crypto.errors import MalformedDigestError
from hashkit.crypto.types import HashAlgorithm, HashInfo, HashOptions

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2x$", "$2y$")
BCRYPT_MAX_BYTES = 72
ARGON2_PREFIX = "$argon2"

# $2b$10$ + 22 chars of salt + 31 chars of hash
_BCRYPT_PATTERN = re.compile(r"^\$(2[abxy])\$(\d{2})\$[./A-Za-z0-9]{53}$")

_ARGON2_NAMES = {
    argon2.Type.I: HashAlgorithm.ARGON2I,
    argon2.Type.ID: HashAlgorithm.ARGON2ID,
}

# Parameters only matter for hashing; verify() reads them from the digest.
_argon2_verifier = argon2.PasswordHasher()


def resolve_option(options: HashOptions | None, key: str, default: int) -> int:
    """Return the per-call option for ``key`` or fall back to ``default``."""
    if options is not None:
        value = options.get(key)
        if value is not None:
            return int(value)
    return default


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plaintext value against a bcrypt or Argon2 digest."""
    if hashed.startswith(ARGON2_PREFIX):
        try:
            return _argon2_verifier.verify(hashed, plain)
        except argon2.exceptions.VerificationError:
            return False
        except argon2.exceptions.InvalidHashError:
            return False
        except UnicodeEncodeError:
            return False
    if hashed.startswith(BCRYPT_PREFIXES):
        try:
            secret = plain.encode("utf-8")
            if len(secret) > BCRYPT_MAX_BYTES:
                # bcrypt ignores everything past 72 bytes
                return False
            return bcrypt.checkpw(secret, hashed.encode("utf-8"))
        except ValueError:
            return False
    return False


def get_info(hashed: str) -> HashInfo:
    """Parse the algorithm and cost parameters out of a digest."""
    if hashed.startswith(BCRYPT_PREFIXES):
        match = _BCRYPT_PATTERN.match(hashed)
        if match is None:
            raise MalformedDigestError("Malformed bcrypt hash.")
        return HashInfo(
            algo_name=HashAlgorithm.BCRYPT.value,
            algo_id=match.group(1),
            options={"rounds": int(match.group(2))},
        )

    if hashed.startswith(ARGON2_PREFIX):
        try:
            params = argon2.extract_parameters(hashed)
        except argon2.exceptions.InvalidHashError as exc:
            raise MalformedDigestError("Malformed Argon2 hash.") from exc
        algorithm = _ARGON2_NAMES.get(params.type)
        if algorithm is None:
            raise MalformedDigestError(f"Unsupported Argon2 variant: {params.type.name}.")
        return HashInfo(
            algo_name=algorithm.value,
            algo_id=algorithm.value,
            options={
                "memory": params.memory_cost,
                "time": params.time_cost,
                "threads": params.parallelism,
            },
        )

    raise MalformedDigestError("Hash is not in a recognized format.")
