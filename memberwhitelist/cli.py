"""Check whitelist files against a type catalog and query member exposure."""

import argparse
import logging
import sys
from pathlib import Path

from .errors import MemberWhitelistError
from .loader import WhitelistLoader
from .models.members import MemberDescriptor
from .resolver.catalog import CatalogResolver, MarkerOverrideCheck

EXIT_EXPOSED = 0
EXIT_NOT_EXPOSED = 1
EXIT_ERROR = 2


def parse_params(text: str | None) -> tuple[str, ...]:
    """Split ``int, java.lang.String[]`` into canonical parameter type names."""
    if not text or not text.strip():
        return ()
    return tuple("".join(p.split()) for p in text.split(","))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memberwhitelist-check",
        description="Validate member whitelists and query which members they expose",
    )
    parser.add_argument(
        "--whitelist", required=True, action="append", type=Path,
        help="Whitelist file (.json or one entry per line); repeatable",
    )
    parser.add_argument("--catalog", required=True, type=Path, help="Type catalog JSON file")
    parser.add_argument("--audit-log", type=Path, help="Append build events to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log ignored entries")
    parser.add_argument("--type", dest="type_name", help="Concrete type to query")
    member = parser.add_mutually_exclusive_group()
    member.add_argument("--field", help="Field name to query")
    member.add_argument("--method", help="Method name to query")
    member.add_argument("--constructor", action="store_true", help="Query a constructor")
    parser.add_argument("--params", help="Comma separated parameter types")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for whitelist checking."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    has_member = args.field is not None or args.method is not None or args.constructor
    if has_member != (args.type_name is not None):
        parser.error("--type requires one of --field, --method or --constructor, and vice versa")
    if args.params is not None and args.field is not None:
        parser.error("--params cannot be used with --field")

    try:
        resolver = CatalogResolver.load(args.catalog)
        loader = WhitelistLoader(
            resolver, MarkerOverrideCheck(), audit_log_path=args.audit_log
        )
        policy = loader.load(*args.whitelist)
    except MemberWhitelistError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.type_name is None:
        print(f"{policy.active_count} active, {len(policy.ignored)} ignored")
        for failure in policy.ignored:
            print(f"  ignored: {failure.raw_text.strip()} ({failure.reason})")
        return 0

    concrete = resolver.resolve_type(args.type_name)
    if concrete is None:
        print(f"ERROR: Type not found in catalog: {args.type_name}", file=sys.stderr)
        return EXIT_ERROR

    params = parse_params(args.params)
    if args.field is not None:
        member = MemberDescriptor.field(args.field)
    elif args.method is not None:
        member = MemberDescriptor.method(args.method, *params)
    else:
        member = MemberDescriptor.constructor(concrete.name, *params)

    exposed = policy.is_exposed(concrete, member)
    print(f"{concrete.name}.{member}: {'exposed' if exposed else 'not exposed'}")
    return EXIT_EXPOSED if exposed else EXIT_NOT_EXPOSED


if __name__ == "__main__":
    sys.exit(main())
