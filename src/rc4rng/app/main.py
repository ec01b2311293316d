from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence

import orjson

from rc4rng.core.config.settings import settings
from rc4rng.core.engine.engine import RC4
from rc4rng.core.engine.factory import create_engine
from rc4rng.core.engine.snapshot import EngineSnapshot
from rc4rng.core.errors import RC4Error
from rc4rng.core.logging.setup import bind_context, configure_logging, get_logger

log = get_logger(__name__)

KINDS = ("byte", "uint32", "float", "ranged")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rc4rng",
        description="Generate reproducible values from an RC4-based engine (not for cryptographic use)",
    )
    parser.add_argument("--key", default=None, help="Seed key string (default: RC4RNG_DEFAULT_KEY or random)")
    parser.add_argument(
        "--profile",
        choices=("rc4", "rc4small"),
        default=None,
        help="Engine profile (default: RC4RNG_PROFILE)",
    )
    parser.add_argument("--count", type=int, default=1, help="Number of values to generate")
    parser.add_argument("--kind", choices=KINDS, default="byte", help="Value kind")
    parser.add_argument("--min", dest="lo", type=int, default=0, help="Lower bound for --kind ranged")
    parser.add_argument("--max", dest="hi", type=int, default=None, help="Upper bound for --kind ranged (inclusive)")
    parser.add_argument(
        "--resume",
        default=None,
        help="Start from a saved state: 18-char hex string (rc4small) or snapshot JSON",
    )
    parser.add_argument("--state", action="store_true", help="Include the final engine state in the output")
    return parser


def _is_snapshot_json(resume: Optional[str]) -> bool:
    return resume is not None and resume.lstrip().startswith("{")


def _engine_from_args(args: argparse.Namespace) -> RC4:
    resume = args.resume
    if _is_snapshot_json(resume):
        return EngineSnapshot.from_json(resume).restore()

    engine = create_engine(args.key, profile=args.profile)
    if resume is not None:
        engine.import_state_text(resume)
    return engine


def _generate(engine: RC4, args: argparse.Namespace) -> list[Any]:
    if args.kind == "byte":
        return [engine.next_byte() for _ in range(args.count)]
    if args.kind == "uint32":
        return [engine.next_uint32() for _ in range(args.count)]
    if args.kind == "float":
        return [engine.next_float() for _ in range(args.count)]

    if args.hi is None:
        raise ValueError("--kind ranged requires --max")
    return [engine.next_ranged(args.lo, args.hi) for _ in range(args.count)]


def _state_payload(engine: RC4) -> Any:
    if engine.size == 16:
        return engine.export_state_text()
    return EngineSnapshot.capture(engine).model_dump()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.count < 0:
        parser.error("--count must be >= 0")
    if _is_snapshot_json(args.resume) and (args.key is not None or args.profile is not None):
        # the snapshot carries its own configuration
        parser.error("--key and --profile cannot be combined with a snapshot JSON --resume")

    configure_logging(level=settings.log_level)
    bind_context(component="cli", environment=settings.env)

    try:
        engine = _engine_from_args(args)
        values = _generate(engine, args)
    except (RC4Error, ValueError) as exc:
        # engine rejections, bad snapshot JSON, missing --max
        log.warning("cli.rejected", error_type=type(exc).__name__)
        print(f"rc4rng: error: {exc}", file=sys.stderr)
        return 2

    profile = engine.profile
    payload: dict[str, Any] = {
        "profile": profile.name if profile is not None else None,
        "kind": args.kind,
        "values": values,
    }
    if args.state:
        payload["state"] = _state_payload(engine)

    sys.stdout.write(orjson.dumps(payload).decode("utf-8") + "\n")
    log.info("cli.generated", kind=args.kind, count=len(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
