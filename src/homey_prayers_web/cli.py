"""Command-line interface for Homey Prayers Web."""

import argparse
import json
import sys
from pathlib import Path

from homey_prayers_web import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="homey-prayers-web",
        description="Prayer times settings web server",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"homey-prayers-web {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the web server")
    serve_parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Config file path (default: config/default.json)",
    )
    serve_parser.add_argument(
        "--host",
        "-H",
        help="Server address (overrides HOST)",
    )
    serve_parser.add_argument(
        "--port",
        "-p",
        type=int,
        help="Server port (overrides PORT)",
    )
    serve_parser.add_argument(
        "--log-level",
        "-l",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides LOG_LEVEL)",
    )

    # config command
    config_parser = subparsers.add_parser("config", help="Show resolved configuration")
    config_parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Config file path (default: config/default.json)",
    )

    return parser


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the web server."""
    from homey_prayers_web.config import AppConfig, setup_logging
    from homey_prayers_web.main import serve

    try:
        config = AppConfig.from_file(args.config)
    except (OSError, ValueError) as e:
        print(f"Configuration could not be loaded: {e}", file=sys.stderr)
        return 1

    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port
    if args.log_level:
        config.log_level = args.log_level

    setup_logging(config.log_level, config.debug)
    return serve(config)


def cmd_config(args: argparse.Namespace) -> int:
    """Print resolved configuration."""
    from homey_prayers_web.config import AppConfig

    try:
        config = AppConfig.from_file(args.config)
    except (OSError, ValueError) as e:
        print(f"Configuration could not be loaded: {e}", file=sys.stderr)
        return 1

    print(json.dumps(config.to_dict(), indent=2))
    return 0


def main() -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        # Default to serve
        args.command = "serve"
        args.config = None
        args.host = None
        args.port = None
        args.log_level = None

    commands = {
        "serve": cmd_serve,
        "config": cmd_config,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        return cmd_func(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
