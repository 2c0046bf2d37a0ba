"""
vstoolsets CLI argument parser.

This module implements the command-line interface for vstoolsets using argparse.
"""

import argparse
import importlib
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from vstoolsets import __version__
from vstoolsets.core.exceptions import VsToolsetsError

logger = logging.getLogger(__name__)


class CLI:
    """vstoolsets command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="vstoolsets",
            description="vstoolsets - locate complete Visual Studio C++ toolsets",
            epilog='Use "vstoolsets COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"vstoolsets {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./vstoolsets.yaml)",
        )
        parser.add_argument(
            "--program-files",
            type=Path,
            metavar="PATH",
            help="Override the Program Files (x86) directory",
        )
        parser.add_argument(
            "--vswhere",
            type=Path,
            metavar="PATH",
            help="Override the path to vswhere.exe",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_find_command(subparsers)
        self._add_instances_command(subparsers)

        return parser

    def _add_find_command(self, subparsers):
        """Add 'find' subcommand."""
        parser = subparsers.add_parser(
            "find",
            help="Find usable toolsets, preferred first",
            description="Locate, rank and validate Visual Studio toolsets",
        )
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format [default: text]",
        )
        parser.add_argument(
            "--target-arch",
            metavar="ARCH",
            help="Only list toolsets able to target ARCH (x86, x64, arm, arm64)",
        )

    def _add_instances_command(self, subparsers):
        """Add 'instances' subcommand."""
        parser = subparsers.add_parser(
            "instances",
            help="List installation candidates in ranked order",
            description="List Visual Studio installation candidates without validation",
        )
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format [default: text]",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except (VsToolsetsError, ValueError) as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        # Command module mapping
        command_map = {
            "find": "vstoolsets.cli.commands.find",
            "instances": "vstoolsets.cli.commands.instances",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
