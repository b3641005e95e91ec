# app/cli/collections.py
"""
CLI commands for inspecting configured collections.

Usage:
    python -m app.cli.collections list
    python -m app.cli.collections resolve ai
    python -m app.cli.collections check
"""

import argparse
import sys

from dotenv import load_dotenv

load_dotenv()


def cmd_list(args) -> int:
    """Print every configured collection."""
    from app.services.collection_registry import get_collection_registry

    registry = get_collection_registry()
    if registry.is_empty():
        print("No collections configured (REDLIB_COLLECTIONS is unset or has no valid entries)")
        return 0

    print(f"\n=== Collections ({len(registry)}) ===\n")
    width = max(len(c.name) for c in registry.all())
    for collection in registry.all():
        print(f"  {collection.name.ljust(width)}  -> {collection.target}")
    print()
    return 0


def cmd_resolve(args) -> int:
    """Print the target of one alias."""
    from app.services.collection_registry import get_collection_registry

    target = get_collection_registry().resolve(args.name)
    if target is None:
        print(f"Error: Collection '{args.name}' not found")
        return 1

    print(target)
    return 0


def cmd_check(args) -> int:
    """Validate REDLIB_COLLECTIONS and report dropped entries."""
    from app.config import get_setting
    from app.constants import SettingKeys
    from app.services.collection_registry import inspect_collection_string

    raw = get_setting(SettingKeys.COLLECTIONS)
    if raw is None:
        print(f"{SettingKeys.COLLECTIONS} is not set")
        return 0

    report = inspect_collection_string(raw)
    collections = report.to_map()
    print(f"Accepted: {len(collections)} collection(s)")

    duplicates = len(report.accepted) - len(collections)
    if duplicates:
        print(f"  {duplicates} duplicate alias(es) overridden by later entries")

    if report.dropped:
        print(f"Dropped: {len(report.dropped)} entr{'y' if len(report.dropped) == 1 else 'ies'}")
        for entry, reason in report.dropped:
            print(f"  {entry!r}: {reason}")
        return 1

    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Inspect configured collections")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all collections")

    resolve_parser = subparsers.add_parser("resolve", help="Show the target of a collection")
    resolve_parser.add_argument("name", help="Collection alias (case-sensitive)")

    subparsers.add_parser("check", help="Validate the collections setting")

    args = parser.parse_args(argv)

    commands = {
        "list": cmd_list,
        "resolve": cmd_resolve,
        "check": cmd_check,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
