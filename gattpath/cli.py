"""
Command-line interface for gattpath.
"""

import argparse
import json
import os
import sys

import yaml

# Ensure logging subsystem is initialised immediately
import gattpath.core.log  # noqa: F401  # side-effect import creates log files

from . import __version__
from gattpath.core import config
from gattpath.core.errors import GattPathError, HandleParseError
from gattpath.core.log import get_logger, set_level, print_and_log, LOG__DEBUG

logger = get_logger(__name__)


def parse_args(args=None):
    parser = argparse.ArgumentParser(
        description="gattpath - typed, sortable handles for BlueZ GATT object paths"
    )
    parser.add_argument("--version", action="version", version=f"gattpath {__version__}")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Stop at the first path that is not a GATT attribute",
    )
    parser.add_argument("--config", help=f"Settings file (default {config.CONFIG_FILE})")

    subparsers = parser.add_subparsers(dest="mode", help="Operation mode")

    # Parse mode
    parse_parser = subparsers.add_parser("parse", help="Print kind, handle and parent of each path")
    parse_parser.add_argument(
        "paths",
        nargs="+",
        help=f"BlueZ object paths, e.g. {config.DEFAULT_ADAPTER_PATH}/dev_01_02_03_04_05_06/service0025",
    )

    # Sort mode
    sort_parser = subparsers.add_parser("sort", help="Print paths in handle order")
    sort_parser.add_argument("source", nargs="?", default="-", help="File with one path per line (default stdin)")

    # Tree mode
    tree_parser = subparsers.add_parser("tree", help="Assemble the Service/Characteristic/Descriptor tree")
    tree_parser.add_argument("source", nargs="?", default="-", help="File with one path per line (default stdin)")
    tree_parser.add_argument("--device", help="Only keep attributes below this device path")
    tree_parser.add_argument("--format", choices=config.OUTPUT_FORMATS, default=None, help="Output format")

    # Introspect mode
    intro_parser = subparsers.add_parser("introspect", help="List child paths from a saved Introspect XML dump")
    intro_parser.add_argument("xml", help="Introspect XML file ('-' for stdin)")
    intro_parser.add_argument("--base", required=True, help="Object path the dump was taken from")

    return parser.parse_args(args)


def _read_text(source):
    if source in (None, "-"):
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as fh:
        return fh.read()


def _read_paths(source):
    return [line.strip() for line in _read_text(source).splitlines() if line.strip()]


def _collect(paths, strict):
    """Parse *paths*, returning ``(path, handle)`` pairs; skip or raise on failures."""
    from gattpath.gatt.parser import parse

    pairs = []
    for path in paths:
        try:
            pairs.append((path, parse(path)))
        except HandleParseError as exc:
            if strict:
                raise
            print(f"[-] {exc}", file=sys.stderr)
            logger.info(f"Skipped {path}: {exc.reason}")
    return pairs


def _reject(path):
    """Raise the parse failure for *path*, or a generic one if it names an enclosing attribute."""
    from gattpath.gatt.parser import parse

    parse(path)
    raise HandleParseError(path, "last segment is not a GATT attribute")


def _render_tree_text(tree):
    lines = []
    for service in tree.services:
        lines.append(f"{service.path}  [{service.handle}]")
        for char in service.characteristics:
            lines.append(f"  {char.path.rsplit('/', 1)[-1]}  [{char.handle}]")
            for desc in char.descriptors:
                lines.append(f"    {desc.path.rsplit('/', 1)[-1]}  [{desc.handle}]")
    for orphan in tree.orphans:
        lines.append(f"[!] orphan: {orphan}")
    return "\n".join(lines)


def main(args=None):
    """Main entry point for gattpath."""
    args = parse_args(args)

    try:
        settings = config.load_settings(args.config)
    except (GattPathError, yaml.YAMLError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # GATTPATH_LOG_LEVEL overrides the settings file
    try:
        set_level(os.getenv("GATTPATH_LOG_LEVEL") or settings["log_level"])
    except GattPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    strict = settings["strict"] if args.strict is None else args.strict
    print_and_log(f"[*] gattpath {args.mode} strict={strict}", LOG__DEBUG)

    try:
        if args.mode == "parse":
            for path, handle in _collect(args.paths, strict):
                print(f"{handle.kind.value}\t0x{handle.handle:04x}\t0x{handle.parent:04x}\t{path}")
            return 0

        elif args.mode == "sort":
            from gattpath.gatt.handle import sort_key

            pairs = _collect(_read_paths(args.source), strict)
            for path, _handle in sorted(pairs, key=lambda pair: sort_key(pair[1])):
                print(path)
            return 0

        elif args.mode == "tree":
            from gattpath.gatt.tree import build_tree

            tree = build_tree(_read_paths(args.source), device_path=args.device)
            if tree.skipped:
                if strict:
                    _reject(tree.skipped[0])
                for path in tree.skipped:
                    print(f"[-] Skipped non-attribute path {path}", file=sys.stderr)
                    logger.info(f"Skipped {path}: not a GATT attribute path")
            fmt = args.format or settings["output_format"]
            if fmt == "json":
                print(json.dumps(tree.to_dict(), indent=2))
            elif fmt == "yaml":
                print(yaml.safe_dump(tree.to_dict(), sort_keys=False), end="")
            else:
                print(_render_tree_text(tree))
            return 0

        elif args.mode == "introspect":
            from gattpath.gatt.introspect import child_paths

            for path in child_paths(_read_text(args.xml), args.base):
                print(path)
            return 0

        else:
            print("[!] No mode given, see --help", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1
    except GattPathError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return e.code
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
