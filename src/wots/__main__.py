"""
One-time signature command line interface.

Keys and signatures are stored as base64 text files.

Usage::

    python -m wots keygen --private key.sk --public key.pk
    python -m wots sign --private key.sk --message msg.txt --signature msg.sig
    python -m wots verify --public key.pk --message msg.txt --signature msg.sig
    python -m wots --hash sha512 info

Commands:
    keygen   Generate a key pair
    sign     Sign a file; the private key file is emptied afterwards
    verify   Verify a signature; exits with status 1 if it is invalid
    info     Print key and signature sizes

Options:
    --hash   Hash function name (default: $WOTS_HASH or sha256)
    -v       Enable debug logging
"""

from __future__ import annotations

import argparse
import base64
import binascii
import logging
import sys
from pathlib import Path

from wots.config import WOTS_HASH, WOTS_WORKERS
from wots.exceptions import WotsError
from wots.hashing import HASH_FUNCTIONS, get_hash_factory
from wots.interface import WotsScheme

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the command line tool."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def read_b64(path: Path) -> bytes:
    """Read and decode a base64 text file."""
    try:
        return base64.b64decode(path.read_text().strip(), validate=True)
    except binascii.Error as e:
        raise ValueError(f"{path} is not valid base64: {e}") from e


def write_b64(path: Path, data: bytes) -> None:
    """Write `data` to `path` as a base64 text line."""
    path.write_text(base64.b64encode(data).decode("ascii") + "\n")


def cmd_keygen(scheme: WotsScheme, args: argparse.Namespace) -> int:
    """Generate a key pair and write both halves."""
    pk, sk = scheme.key_gen()
    write_b64(args.private, sk.to_bytes())
    write_b64(args.public, pk)
    logger.info("Wrote private key to %s and public key to %s", args.private, args.public)
    return 0


def cmd_sign(scheme: WotsScheme, args: argparse.Namespace) -> int:
    """Sign a message file, then destroy the stored private key."""
    sk = scheme.key_from_bytes(read_b64(args.private))
    message = args.message.read_bytes()

    signature = scheme.sign(sk, message)
    write_b64(args.signature, signature)

    # The key cannot sign again, so it must not survive on disk either.
    args.private.write_text("")
    logger.info("Wrote signature to %s; private key %s erased", args.signature, args.private)
    return 0


def cmd_verify(scheme: WotsScheme, args: argparse.Namespace) -> int:
    """Verify a signature, reporting through the exit status."""
    pk = read_b64(args.public)
    signature = read_b64(args.signature)
    message = args.message.read_bytes()

    if scheme.verify(pk, message, signature):
        print("signature valid")
        return 0
    print("signature INVALID")
    return 1


def cmd_info(scheme: WotsScheme, args: argparse.Namespace) -> int:
    """Print the sizes of the selected scheme."""
    config = scheme.config
    print(f"hash:             {args.hash}")
    print(f"digest size:      {config.digest_size}")
    print(f"private key size: {config.private_key_size}")
    print(f"public key size:  {config.public_key_size}")
    print(f"signature size:   {config.signature_size}")
    return 0


COMMANDS = {
    "keygen": cmd_keygen,
    "sign": cmd_sign,
    "verify": cmd_verify,
    "info": cmd_info,
}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="wots",
        description="Winternitz one-time signatures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--hash",
        default=WOTS_HASH,
        choices=sorted(HASH_FUNCTIONS),
        help=f"Hash function (default: {WOTS_HASH})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    keygen = sub.add_parser("keygen", help="Generate a key pair")
    keygen.add_argument("--private", required=True, type=Path, help="Private key output file")
    keygen.add_argument("--public", required=True, type=Path, help="Public key output file")

    sign = sub.add_parser("sign", help="Sign a message file")
    sign.add_argument("--private", required=True, type=Path, help="Private key file")
    sign.add_argument("--message", required=True, type=Path, help="File to sign")
    sign.add_argument("--signature", required=True, type=Path, help="Signature output file")

    verify = sub.add_parser("verify", help="Verify a signature")
    verify.add_argument("--public", required=True, type=Path, help="Public key file")
    verify.add_argument("--message", required=True, type=Path, help="Signed file")
    verify.add_argument("--signature", required=True, type=Path, help="Signature file")

    sub.add_parser("info", help="Print key and signature sizes")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    scheme = WotsScheme.from_hash(get_hash_factory(args.hash), max_workers=WOTS_WORKERS)

    try:
        return COMMANDS[args.command](scheme, args)
    except (WotsError, ValueError, OSError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
