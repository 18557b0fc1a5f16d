#!/usr/bin/env python3
"""
bluecanary CLI Tool
Renders and applies color-sliced Deployments, serves the sentiment model
and smoke tests canary instances
"""

import argparse
import asyncio
import logging
import sys

from bluecanary import env_vars
from bluecanary.cli.command.command import Command
from bluecanary.cli.command.manifest import ManifestCommand
from bluecanary.cli.command.model import ModelCommand
from bluecanary.cli.command.serve import ServeCommand
from bluecanary.cli.command.smoke import SmokeCommand
from bluecanary.config import BlueCanaryConfig
from bluecanary.logger import init_logger

logger = init_logger("bluecanary.cli")

COMMANDS: list[type[Command]] = [ManifestCommand, ServeCommand, SmokeCommand, ModelCommand]


def resolve_config_path(args: argparse.Namespace):
    """Command line --config wins, then BLUECANARY_CONFIG, then the bundled local config"""
    if args.config or env_vars.BLUECANARY_CONFIG:
        return
    default_path = BlueCanaryConfig.default_path()
    if default_path.exists():
        args.config = str(default_path)


def create_parser(command_classes: list[type[Command]]):
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        description="bluecanary blue/green and canary deployment tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render the green slice of the fastapi-app template
  bluecanary manifest render --template fastapi-app --color green -o kubernetes/deployment-green.yaml

  # Check a manifest and promote it from blue to green
  bluecanary manifest validate kubernetes/deployment-blue.yaml
  bluecanary manifest promote kubernetes/deployment-blue.yaml --color green

  # Route the Service to the green pods
  bluecanary manifest switch --service fastapi-app-service --color green

  # Serve predictions locally and smoke test a canary VM
  bluecanary serve --port 8080
  bluecanary smoke --host 10.128.0.7 --port 8080
        """,
    )

    # Global parameters
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--config", help="Path to config file (default: bluecanary-conf/bluecanary-local.yml)")
    parser.add_argument(
        "--httpx-log-level",
        help="httpx log level (default: WARNING, options: DEBUG, INFO, WARNING, ERROR)",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for command_class in command_classes:
        asyncio.run(command_class.add_parser_to(subparsers))

    return parser


def find_command(command: str, subclasses: list[type[Command]]) -> type[Command] | None:
    """Find command by name"""
    for subclass in subclasses:
        if command == subclass.name:
            return subclass
    return None


def config_log(args: argparse.Namespace):
    """Configure logging"""
    logging.getLogger("httpx").setLevel(getattr(logging, args.httpx_log_level))
    logging.getLogger("httpcore").setLevel(getattr(logging, args.httpx_log_level))
    if args.verbose:
        for name in ("bluecanary", *(n for n in logging.root.manager.loggerDict if n.startswith("bluecanary"))):
            logging.getLogger(name).setLevel(logging.DEBUG)


def main(argv: list[str] | None = None):
    """Main function"""
    parser = create_parser(COMMANDS)
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    resolve_config_path(args)
    config_log(args)

    try:
        command = find_command(args.command, COMMANDS)
        if not command:
            raise ValueError(f"Error: Unknown command '{args.command}'")
        asyncio.run(command().arun(args))
    except Exception as e:
        # Ensure all logs are flushed to the console
        root_logger = logging.getLogger()
        for handler in root_logger.handlers:
            handler.flush()
        raise e


if __name__ == "__main__":
    main()
