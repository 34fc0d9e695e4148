"""
Command-line interface.
"""
from __future__ import annotations

import argparse
import sys

from loguru import logger

from .config import DEFAULT_CONFIG, PRESETS, GeneratorConfig, resolve_length
from .entropy import strength_label
from .errors import StrongPwError
from .generator import generate_password_with_meta
from .log import configure_logging
from .oracle import POLICY_NAMES, policy_from_name
from .randomness import RandomSource, SystemRandomSource


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="strongpw",
        description="Generate a strong, readable password.",
    )
    # Length and entropy are strings on purpose: anything unparseable is
    # treated as "not given" instead of an error.
    parser.add_argument(
        "-l", "-s", "--length", "--size",
        dest="length",
        help=f"password length ({DEFAULT_CONFIG.min_length}-{DEFAULT_CONFIG.max_length}, "
        "out-of-range values are clamped)",
    )
    parser.add_argument(
        "-e", "--entropy",
        help="target entropy in bits; picks the shortest length that reaches it",
    )
    parser.add_argument(
        "-p", "--preset",
        choices=sorted(PRESETS),
        help="named length preset (overridden by --length / --entropy)",
    )
    parser.add_argument(
        "--policy",
        choices=POLICY_NAMES,
        default=DEFAULT_CONFIG.policy,
        help="how the zxcvbn result is judged (default: %(default)s)",
    )
    parser.add_argument(
        "--min-score",
        type=int,
        choices=range(0, 5),
        help="fixed minimum zxcvbn score for the threshold policy",
    )
    parser.add_argument("-n", "--count", type=int, default=1, help="number of passwords")
    parser.add_argument(
        "-c", "--clipboard",
        action="store_true",
        help="copy the password to the clipboard instead of printing it",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_CONFIG.clipboard_timeout,
        help="seconds before the clipboard is cleared (default: %(default)s)",
    )
    parser.add_argument(
        "--show-entropy",
        action="store_true",
        help="print the estimated entropy after each password",
    )
    parser.add_argument(
        "--quantum",
        action="store_true",
        help="draw randomness from a simulated quantum circuit (needs qiskit-aer)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)

    return parser.parse_args(argv)


def _make_rng(args: argparse.Namespace, config: GeneratorConfig) -> RandomSource:
    if args.quantum:
        from .quantum_engine import QuantumRandomSource

        return QuantumRandomSource(config)
    return SystemRandomSource()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging({0: "WARNING", 1: "DEBUG"}.get(args.verbose, "TRACE"))

    config = GeneratorConfig(
        policy=args.policy,
        min_score=args.min_score,
        clipboard_timeout=args.timeout,
    )

    if args.clipboard and args.count != 1:
        logger.warning("--clipboard copies a single password; ignoring --count")
        args.count = 1

    try:
        length = resolve_length(args.length, args.entropy, args.preset, config)
        policy = policy_from_name(config.policy, config.min_score)
        rng = _make_rng(args, config)

        outcomes = [
            generate_password_with_meta(length, config=config, rng=rng, policy=policy)
            for _ in range(max(1, args.count))
        ]
    except StrongPwError as exc:
        logger.error("{}", exc)
        return 2
    except KeyboardInterrupt:
        return 130

    for outcome in outcomes:
        if not args.clipboard:
            print(outcome.password)
        if args.show_entropy:
            print(
                f"entropy: {outcome.entropy_bits:.1f} bits "
                f"({strength_label(outcome.entropy_bits)}, "
                f"{outcome.attempts} attempt(s))",
                file=sys.stderr if args.clipboard else sys.stdout,
            )

    if args.clipboard:
        from .clipboard import ClearReason, TransientClipboard

        clip = TransientClipboard(config.clipboard_timeout)
        print(
            f"Password copied to clipboard (clears in {config.clipboard_timeout:g}s).",
            file=sys.stderr,
        )
        reason = clip.copy_and_wait(outcomes[0].password)
        if reason is ClearReason.SIGNAL and clip.last_signal is not None:
            return 128 + clip.last_signal

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
