"""Command-line access to the hashing drivers.

Usage:
    hashkit make [--driver NAME] VALUE
    hashkit check [--driver NAME] VALUE HASH
    hashkit needs-rehash [--driver NAME] HASH
    hashkit info HASH

Cost overrides (--rounds, --memory, --time, --threads) apply to make,
check and needs-rehash. Settings come from HASHING_* environment variables.
"""

import argparse
import json
import sys

from hashkit.core.manager import HashManager
from hashkit.core.settings import HashingSettings
from hashkit.crypto.errors import HashingError

EXIT_OK = 0
EXIT_NEGATIVE = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hashkit", description="Hash and verify passwords."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    costs = argparse.ArgumentParser(add_help=False)
    costs.add_argument("--driver", help="Driver name (default: configured driver)")
    costs.add_argument("--rounds", type=int, help="bcrypt cost factor")
    costs.add_argument("--memory", type=int, help="Argon2 memory cost in KiB")
    costs.add_argument("--time", type=int, help="Argon2 iterations")
    costs.add_argument("--threads", type=int, help="Argon2 parallelism")

    make = commands.add_parser("make", parents=[costs], help="Hash a value")
    make.add_argument("value")

    check = commands.add_parser("check", parents=[costs], help="Verify a value")
    check.add_argument("value")
    check.add_argument("hash")

    rehash = commands.add_parser(
        "needs-rehash", parents=[costs], help="Check whether a hash is stale"
    )
    rehash.add_argument("hash")

    info = commands.add_parser("info", help="Describe a hash")
    info.add_argument("hash")

    return parser


def _options(args: argparse.Namespace) -> dict[str, int]:
    names = ("rounds", "memory", "time", "threads")
    return {n: getattr(args, n) for n in names if getattr(args, n) is not None}


def _run(manager: HashManager, args: argparse.Namespace) -> int:
    if args.command == "info":
        print(json.dumps(manager.info(args.hash).model_dump()))
        return EXIT_OK

    driver = manager.driver(args.driver)
    options = _options(args)

    if args.command == "make":
        print(driver.make(args.value, options))
        return EXIT_OK
    if args.command == "check":
        valid = driver.check(args.value, args.hash, options)
        print("valid" if valid else "invalid")
        return EXIT_OK if valid else EXIT_NEGATIVE

    stale = driver.needs_rehash(args.hash, options)
    print("yes" if stale else "no")
    return EXIT_OK if stale else EXIT_NEGATIVE


def main(argv: list[str] | None = None, manager: HashManager | None = None) -> int:
    """Entry point for the ``hashkit`` console script."""
    args = _build_parser().parse_args(argv)
    try:
        return _run(manager or HashManager(HashingSettings()), args)
    except HashingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
