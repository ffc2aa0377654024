"""Command-line utilities for sigcore."""

from __future__ import annotations

import argparse
import json
import sys

from .logging_pipeline import configure_logging
from .primitives import generate_keypair_buffers, sha256, sign, verify
from .settings import get_settings
from .types import EncodedSig, KeypairBuffers, bytes_from_hex


def _read_stdin() -> str | None:
    """Read the message from stdin if available."""
    try:
        if sys.stdin and not sys.stdin.isatty():
            return sys.stdin.read()
    except IOError as e:
        print(f"Error reading stdin: {e}", file=sys.stderr)
    return None


def _load_message(message: str | None) -> str:
    """Return the message from ``--message`` or stdin."""
    if message is not None:
        return message
    stdin_payload = _read_stdin()
    if stdin_payload is not None:
        return stdin_payload
    raise ValueError("No message provided. Use --message or pipe text via stdin.")


def _hex_bytes(value: str) -> bytes:
    try:
        return bytes_from_hex(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid hex value: {value!r}") from exc


def _emit(payload: dict[str, object], quiet: bool) -> None:
    if not quiet:
        print(json.dumps(payload, separators=(",", ":")))


def _cmd_keygen(args: argparse.Namespace) -> int:
    keypair = generate_keypair_buffers()
    _emit({"pubkey": keypair.pubkey_hex(), "secret": keypair.secret_hex()}, args.quiet)
    return 0


def _cmd_hash(args: argparse.Namespace) -> int:
    digest = sha256(_load_message(args.message))
    _emit({"sha256": digest.hex()}, args.quiet)
    return 0


def _cmd_sign(args: argparse.Namespace) -> int:
    # Signing only reads the secret half.
    keypair = KeypairBuffers(pubkey=b"", secret=args.secret)
    signature = sign(keypair, _load_message(args.message))
    _emit({"signature": signature}, args.quiet)
    return 0


def _cmd_verify(args: argparse.Namespace) -> int:
    is_valid = verify(
        args.public_key, EncodedSig(args.signature), _load_message(args.message)
    )
    _emit({"valid": is_valid}, args.quiet)
    return 0 if is_valid else 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sigcore",
        description="Hash, generate keys, sign and verify with Ed25519.",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Quiet mode: suppress output, just return exit code.",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    keygen = subcommands.add_parser("keygen", help="Generate a fresh keypair.")
    keygen.set_defaults(handler=_cmd_keygen)

    hash_cmd = subcommands.add_parser("hash", help="SHA-256 a message.")
    hash_cmd.add_argument("--message", "-m", help="Message text. Defaults to stdin.")
    hash_cmd.set_defaults(handler=_cmd_hash)

    sign_cmd = subcommands.add_parser("sign", help="Sign a message.")
    sign_cmd.add_argument(
        "--secret", "-s", required=True, type=_hex_bytes, help="Secret key hex."
    )
    sign_cmd.add_argument("--message", "-m", help="Message text. Defaults to stdin.")
    sign_cmd.set_defaults(handler=_cmd_sign)

    verify_cmd = subcommands.add_parser("verify", help="Verify a signature.")
    verify_cmd.add_argument(
        "--public-key", "-k", required=True, type=_hex_bytes, help="Public key hex."
    )
    verify_cmd.add_argument(
        "--signature", "-g", required=True, help="Encoded signature."
    )
    verify_cmd.add_argument("--message", "-m", help="Message text. Defaults to stdin.")
    verify_cmd.set_defaults(handler=_cmd_verify)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the sigcore command line."""
    parser = _build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # pragma: no cover - controlled via tests
        exit_code = int(exc.code) if isinstance(exc.code, int) else 1
        return 0 if exit_code == 0 else 1

    configure_logging(get_settings())

    try:
        return int(args.handler(args))
    except Exception as exc:
        if not args.quiet:
            print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
