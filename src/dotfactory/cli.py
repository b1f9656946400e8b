"""
Command Line Interface for dotfactory presets

Provides the dotfactory-presets entry point for listing, inspecting,
adding, deleting and converting output configuration presets.
"""

import sys
import argparse
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from .config import OutputConfiguration
from .errors import PresetError
from .manager import PresetManager


def _open_store(path: str, must_exist: bool = True) -> Optional[PresetManager]:
    """Load a preset file into a new manager.

    Returns None (after printing why) when an existing file cannot be
    loaded, or when a required file is missing.
    """
    store = PresetManager()
    if store.load(path):
        return store
    if Path(path).exists():
        print(f"Error: {store.last_load_error}")
        return None
    if must_exist:
        print(f"Error: Preset file not found: {path}")
        return None
    return store


def _parse_overrides(items: List[str]) -> Dict[str, str]:
    """Parse FIELD=VALUE strings into a dict keyed by attribute name.

    FIELD may be the attribute name or its camelCase file alias.
    """
    aliases = {info.alias: name for name, info in OutputConfiguration.model_fields.items()}
    overrides = {}
    for item in items:
        if '=' not in item:
            raise ValueError(f"Expected FIELD=VALUE, got: {item}")
        key, value = item.split('=', 1)
        key = aliases.get(key.strip(), key.strip())
        if key not in OutputConfiguration.model_fields:
            raise ValueError(f"Unknown setting: {key}")
        overrides[key] = value
    return overrides


def _format_value(value) -> str:
    if isinstance(value, Enum):
        display = getattr(value, 'display', None)
        return f"{value.value} ({display})" if display else value.value
    if isinstance(value, str):
        return repr(value)
    return str(value)


def list_command(args: argparse.Namespace) -> int:
    """Execute list command."""
    store = _open_store(args.file)
    if store is None:
        return 1

    if store.count() == 0:
        print("No presets")
        return 0

    for idx, name in enumerate(store.names()):
        print(f"{idx}: {name}")
    return 0


def show_command(args: argparse.Namespace) -> int:
    """Execute show command."""
    store = _open_store(args.file)
    if store is None:
        return 1

    try:
        preset = store.get_at(args.index)
    except PresetError as e:
        print(f"Error: {e}")
        return 1

    print("=" * 60)
    print(f"Preset {args.index}: {preset.display_name}")
    print("=" * 60)
    for field_name in OutputConfiguration.model_fields:
        print(f"  {field_name}: {_format_value(getattr(preset, field_name))}")
    return 0


def add_command(args: argparse.Namespace) -> int:
    """Execute add command."""
    store = _open_store(args.file, must_exist=False)
    if store is None:
        return 1

    try:
        if args.source is not None:
            base = store.get_at(args.source)
        else:
            base = store.working

        data = base.model_dump()
        data.update(_parse_overrides(args.set))
        data['display_name'] = args.name
        preset = OutputConfiguration.model_validate(data)

        idx = store.add(preset)
        store.save(args.file)
    except (PresetError, ValidationError, ValueError) as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    print(f"Added preset {idx}: {preset.display_name}")
    return 0


def delete_command(args: argparse.Namespace) -> int:
    """Execute delete command."""
    store = _open_store(args.file)
    if store is None:
        return 1

    before = store.count()
    store.delete(args.index)
    if store.count() == before:
        print(f"No preset at index {args.index}, nothing deleted")
        return 0

    try:
        store.save(args.file)
    except PresetError as e:
        print(f"Error: {e}")
        return 1

    print(f"Deleted preset {args.index}, {store.count()} remaining")
    return 0


def convert_command(args: argparse.Namespace) -> int:
    """Execute convert command."""
    store = _open_store(args.source)
    if store is None:
        return 1

    try:
        store.save(args.destination)
    except PresetError as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    print(f"Wrote {store.count()} presets to {args.destination}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='dotfactory-presets',
        description='Manage dotfactory output configuration presets',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list presets.xml
  %(prog)s add presets.yaml --name "Font8x8" --set rotation=rotate_ninety
  %(prog)s convert presets.xml presets.yaml
        """
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Show detailed output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    list_parser = subparsers.add_parser('list', help='List preset names')
    list_parser.add_argument('file', help='Preset file (YAML, JSON or XML)')

    show_parser = subparsers.add_parser('show', help='Show every setting of one preset')
    show_parser.add_argument('file', help='Preset file (YAML, JSON or XML)')
    show_parser.add_argument('index', type=int, help='Preset index')

    add_parser = subparsers.add_parser('add', help='Add a preset')
    add_parser.add_argument('file', help='Preset file; created if missing')
    add_parser.add_argument('--name', '-n', required=True, help='Display name')
    add_parser.add_argument('--from', dest='source', type=int, help='Copy settings from this preset index')
    add_parser.add_argument('--set', '-s', action='append', default=[], metavar='FIELD=VALUE',
                            help='Override a setting (repeatable)')

    delete_parser = subparsers.add_parser('delete', help='Delete a preset')
    delete_parser.add_argument('file', help='Preset file (YAML, JSON or XML)')
    delete_parser.add_argument('index', type=int, help='Preset index')

    convert_parser = subparsers.add_parser('convert', help='Rewrite a preset file in another format')
    convert_parser.add_argument('source', help='Input preset file')
    convert_parser.add_argument('destination', help='Output preset file; format from suffix')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.ERROR,
                        format='%(levelname)s %(name)s: %(message)s')

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == 'list':
        return list_command(args)
    elif args.command == 'show':
        return show_command(args)
    elif args.command == 'add':
        return add_command(args)
    elif args.command == 'delete':
        return delete_command(args)
    elif args.command == 'convert':
        return convert_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
