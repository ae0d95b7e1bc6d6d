"""Verify the API's environment file before (re)starting the service.

Loads ``AppSettings`` from the given ``.env`` file, requires the gateway
credential, and prints the effective gateway settings with the key masked.
``record`` and ``verify`` additionally keep a SHA256 baseline of the file so
unexpected edits are caught.

Example usages::

    python -m scripts.check_env check --env-file /opt/ax-architect/.env

    python -m scripts.check_env record --env-file /opt/ax-architect/.env \
        --hash-file /opt/ax-architect/.env.sha256

    python -m scripts.check_env verify --env-file /opt/ax-architect/.env \
        --hash-file /opt/ax-architect/.env.sha256
"""

from __future__ import annotations

import argparse
import hashlib
import sys
from pathlib import Path

from pydantic import ValidationError

from ax_architect.core.config import AppSettings
from ax_architect.core.errors import ConfigurationError

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2
EXIT_CHECKSUM_ERROR = 3
EXIT_RUNTIME_ERROR = 5

# command -> (help text, whether a --hash-file is required)
_COMMANDS: dict[str, tuple[str, bool]] = {
    "check": ("Validate settings only.", False),
    "record": ("Validate settings and store the checksum baseline.", True),
    "verify": ("Validate settings and compare against the stored baseline.", True),
}


def _compute_hash(env_file: Path) -> str:
    return hashlib.sha256(env_file.read_bytes()).hexdigest()


def _mask(secret: str) -> str:
    if len(secret) <= 8:
        return "*" * len(secret)
    return f"{secret[:4]}...{secret[-4:]}"


def load_settings(env_file: Path) -> AppSettings:
    """Load settings from ``env_file`` and require the gateway credential."""
    if not env_file.exists():
        raise FileNotFoundError(f"Environment file {env_file} does not exist.")
    settings = AppSettings.from_env_file(env_file)
    if not settings.gateway.is_configured:
        raise ConfigurationError("LOVABLE_API_KEY is missing or empty.")
    return settings


def describe(settings: AppSettings) -> str:
    gateway = settings.gateway
    return "\n".join(
        [
            f"environment:     {settings.environment}",
            f"gateway url:     {gateway.base_url}",
            f"gateway model:   {gateway.model}",
            f"gateway key:     {_mask(gateway.api_key or '')}",
            f"timeout:         {gateway.timeout_seconds}s",
            f"429 retries:     {gateway.rate_limit_retries}",
            f"sectioning:      {settings.narrative_sectioning}",
        ]
    )


def compare_checksum(env_file: Path, hash_file: Path) -> int:
    """Compare the file checksum to the recorded baseline."""
    if not hash_file.exists():
        print(
            f"No baseline at {hash_file}; run 'record' first.",
            file=sys.stderr,
        )
        return EXIT_RUNTIME_ERROR

    expected = hash_file.read_text(encoding="utf-8").strip()
    actual = _compute_hash(env_file)
    if expected != actual:
        print(
            f"Environment checksum mismatch (expected {expected}, got {actual}).",
            file=sys.stderr,
        )
        return EXIT_CHECKSUM_ERROR
    print("Environment checksum OK.")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate AX Architect settings and detect .env drift."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, (help_text, needs_hash) in _COMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--env-file", default=Path(".env"), type=Path)
        if needs_hash:
            sub.add_argument("--hash-file", required=True, type=Path)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    env_file: Path = args.env_file

    try:
        settings = load_settings(env_file)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except ValidationError as exc:
        print(f"Invalid settings:\n{exc.json(indent=2)}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ConfigurationError as exc:
        print(f"Gateway is not configured: {exc.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    print(describe(settings))

    if args.command == "record":
        checksum = _compute_hash(env_file)
        args.hash_file.write_text(f"{checksum}\n", encoding="utf-8")
        print(f"Recorded checksum to {args.hash_file}")
        return EXIT_OK
    if args.command == "verify":
        return compare_checksum(env_file, args.hash_file)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
