"""
onetime – command-line entry point.

Usage
-----
    python main.py hotp JBSWY3DPEHPK3PXP --counter 0
    python main.py totp JBSWY3DPEHPK3PXP --verify 123456 --window 1

Or, if installed as a package:
    onetime totp JBSWY3DPEHPK3PXP
"""

import argparse
import logging
import sys
import time
from typing import Optional, Sequence

from onetime.algorithm import Algorithm
from onetime.configuration import DEFAULT_DIGITS, Configuration
from onetime.hotp import HOTP
from onetime.totp import DEFAULT_PERIOD, TOTP
from onetime.utils import decode_secret, format_otp

logger = logging.getLogger("onetime")

EXIT_INVALID = 1
EXIT_USAGE = 2


# ── Logging setup ─────────────────────────────────────────────────────────────

def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


# ── Argument parsing ──────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("secret", help="Shared secret, base32 unless --ascii is given.")
    common.add_argument(
        "--ascii", action="store_true", help="Treat the secret as raw UTF-8 text."
    )
    common.add_argument(
        "--algorithm",
        default=Algorithm.SHA1.value,
        choices=[a.value for a in Algorithm],
        type=str.upper,
        help="HMAC algorithm (default: SHA1).",
    )
    common.add_argument("--digits", type=int, default=DEFAULT_DIGITS)
    common.add_argument(
        "--offset", type=int, default=None, help="Fixed truncation offset."
    )
    common.add_argument(
        "--window", type=int, default=None, help="Accepted drift on each side (0-5)."
    )
    common.add_argument("--verify", metavar="CODE", help="Validate CODE instead of printing.")
    common.add_argument(
        "--group", action="store_true", help="Print the code in groups of three digits."
    )
    common.add_argument("-v", "--verbose", action="store_true")

    parser = argparse.ArgumentParser(
        prog="onetime", description="Generate and verify HOTP/TOTP one-time passwords."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    hotp = commands.add_parser("hotp", parents=[common], help="Counter-based password.")
    hotp.add_argument("--counter", type=int, required=True)

    totp = commands.add_parser("totp", parents=[common], help="Time-based password.")
    totp.add_argument(
        "--time", type=float, default=None, help="Unix timestamp (default: now)."
    )
    totp.add_argument("--period", type=float, default=DEFAULT_PERIOD)
    return parser


# ── Commands ──────────────────────────────────────────────────────────────────

def _build_hotp(args: argparse.Namespace) -> HOTP:
    secret = args.secret.encode("utf-8") if args.ascii else decode_secret(args.secret)
    configuration = Configuration(
        algorithm=args.algorithm,
        digits=args.digits,
        offset=args.offset,
        window=args.window,
    )
    return HOTP(secret, configuration)


def _report(skew: Optional[int]) -> int:
    if skew is None:
        print("invalid")
        return EXIT_INVALID
    print(f"valid (skew {skew:+d})")
    return 0


def _run(args: argparse.Namespace) -> int:
    hotp = _build_hotp(args)
    code = args.verify.replace(" ", "") if args.verify is not None else None

    if args.command == "hotp":
        if code is not None:
            return _report(hotp.skew(args.counter, code))
        password = hotp.generate_password(args.counter)
    else:
        totp = TOTP(hotp, period=args.period)
        now = args.time if args.time is not None else time.time()
        if code is not None:
            return _report(totp.skew(now, code))
        password = totp.generate_password(now)
        logger.info("Password expires in %.0f s.", totp.remaining_seconds(now))

    print(format_otp(password) if args.group else password)
    return 0


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return _run(args)
    except ValueError as exc:
        logger.debug("Rejected input: %s", type(exc).__name__)
        print(f"onetime: error: {exc}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
