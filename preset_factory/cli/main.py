"""CLI: preset-factory extensions, load, config validate."""

from __future__ import annotations

import argparse
import sys

from ..config import configure_logging, load_config, validate_config
from ..manager import PresetFactoryManager
from ..types import MeshSize, PresetFactoryError


def _parse_mesh(value: str) -> MeshSize:
    width, sep, height = value.lower().partition("x")
    try:
        if not sep:
            raise ValueError(value)
        return MeshSize(int(width), int(height))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid mesh size '{value}', expected WIDTHxHEIGHT")


def _get_manager(args) -> PresetFactoryManager:
    config = load_config(args.config)
    configure_logging(config, verbose=args.verbose)
    mesh = getattr(args, "mesh", None) or config.mesh
    manager = PresetFactoryManager()
    manager.initialize(mesh.width, mesh.height)
    return manager


def cmd_extensions(args):
    """List handled extension tags."""
    try:
        manager = _get_manager(args)
    except PresetFactoryError as e:
        print(f"Error ({e.kind.value}): {e}", file=sys.stderr)
        sys.exit(1)

    with manager:
        for extension in manager.extensions_handled():
            print(extension)


def cmd_load(args):
    """Load a preset and print a short description."""
    try:
        with _get_manager(args) as manager:
            preset = manager.create_preset_from_file(args.target)
    except PresetFactoryError as e:
        print(f"Error ({e.kind.value}): {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Name:       {preset.name}")
    print(f"Format:     {preset.format}")
    print(f"Mesh:       {preset.mesh}")
    parameters = getattr(preset, "parameters", None)
    if parameters is not None:
        print(f"Parameters: {len(parameters)}")


def cmd_config_validate(args):
    """Validate config file."""
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        print("Config validation errors:")
        for err in errors:
            print(f"  - {err}")
        sys.exit(1)
    else:
        print("Config is valid.")
        print(f"  Mesh: {config.mesh}")
        print(f"  Log level: {config.log_level}")


def main():
    parser = argparse.ArgumentParser(
        prog="preset-factory",
        description="Load visual presets through the extension-keyed factory registry",
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # extensions
    subparsers.add_parser("extensions", help="List handled preset extensions")

    # load
    load_parser = subparsers.add_parser("load", help="Load a preset file or URL")
    load_parser.add_argument("target", help="Path, file:// URL or idle:// URL")
    load_parser.add_argument("--mesh", type=_parse_mesh, help="Mesh size override (e.g. 48x36)")

    # config
    config_parser = subparsers.add_parser("config", help="Config operations")
    config_sub = config_parser.add_subparsers(dest="config_command")
    config_sub.add_parser("validate", help="Validate config file")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "extensions":
        cmd_extensions(args)
    elif args.command == "load":
        cmd_load(args)
    elif args.command == "config":
        if args.config_command == "validate":
            cmd_config_validate(args)
        else:
            print("Usage: preset-factory config validate")
            sys.exit(1)


if __name__ == "__main__":
    main()
