"""Command line argument parser."""

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from webpath.config.config import Config
from webpath.platform.logging import logger, setup_logger
from webpath.shared.host_location import HostLocation
from webpath.ui.cli.args.options import CLIArgs, InitConfigArgs, OperationArgs

_SINGLE_PATH_COMMANDS: dict[str, str] = {
    "normalize": "Normalize a path, reducing '..' and '.' parts",
    "is-absolute": "Report whether a path is absolute",
    "dirname": "Print the directory name of a path",
    "extname": "Print the extension of a path",
    "parse": "Split a path into root, dir, base, ext and name",
    "escape": "Percent-encode characters that are unsafe in a URI",
}

_FORMAT_FIELDS: tuple[str, ...] = ("root", "dir", "base", "name", "ext")


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def _common_options() -> argparse.ArgumentParser:
        """Options accepted before or after the subcommand.

        Defaults are suppressed so a subcommand never resets a value given
        ahead of it.
        """

        common = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
        _ = common.add_argument(
            "--location",
            type=str,
            help="Pathname of the current location (overrides the config file)",
            metavar="PATHNAME",
        )
        _ = common.add_argument(
            "--origin",
            type=str,
            help="Host origin treated as an absolute prefix (overrides the config file)",
            metavar="ORIGIN",
        )
        _ = common.add_argument(
            "--json",
            action="store_true",
            dest="json_output",
            help="Print the result as JSON",
        )
        _ = common.add_argument(
            "--verbose",
            action="store_true",
            help="Show operation traces",
        )
        _ = common.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )
        return common

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="webpath",
            description="webpath - POSIX-style path manipulation for URL-based hosts.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            parents=[ArgumentParser._common_options()],
        )
        common = ArgumentParser._common_options()
        subparsers = parser.add_subparsers(dest="command", required=True)

        for name, help_text in _SINGLE_PATH_COMMANDS.items():
            single = subparsers.add_parser(name, help=help_text, parents=[common])
            _ = single.add_argument("paths", nargs=1, metavar="PATH")

        for name, help_text in (
            ("join", "Join paths and normalize the result"),
            ("resolve", "Resolve paths into an absolute path"),
        ):
            multi = subparsers.add_parser(name, help=help_text, parents=[common])
            _ = multi.add_argument("paths", nargs="*", metavar="PATH")

        relative_parser = subparsers.add_parser(
            "relative",
            help="Combine FROM and TO the way relative() does",
            parents=[common],
        )
        _ = relative_parser.add_argument("paths", nargs=2, metavar="PATH")

        basename_parser = subparsers.add_parser(
            "basename",
            help="Print the last portion of a path",
            parents=[common],
        )
        _ = basename_parser.add_argument("paths", nargs=1, metavar="PATH")
        _ = basename_parser.add_argument(
            "--ext",
            type=str,
            help="Extension to strip from the result",
        )

        segments_parser = subparsers.add_parser(
            "segments",
            help="Print the segments of a path, one per line",
            parents=[common],
        )
        _ = segments_parser.add_argument("paths", nargs=1, metavar="PATH")
        _ = segments_parser.add_argument(
            "--keep-empty",
            action="store_true",
            help="Keep empty segments produced by repeated separators",
        )

        format_parser = subparsers.add_parser(
            "format",
            help="Build a path from root, dir, base, name and ext parts",
            parents=[common],
        )
        for field_name in _FORMAT_FIELDS:
            _ = format_parser.add_argument(
                f"--{field_name}",
                type=str,
                help=f"The '{field_name}' part of the path",
            )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a configuration file with the current settings",
            parents=[common],
        )
        _ = init_parser.add_argument(
            "--target",
            type=str,
            help="File to write (defaults to the standard config location)",
            metavar="CONFIG_PATH",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argument parsing fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        _ = setup_logger(console_level=log_level)
        configuration = Config.load()
        if configuration.log_file is not None:
            _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        location = ArgumentParser._build_location(configuration, parsed_args)
        command: str = parsed_args.command

        if command == "init-config":
            return InitConfigArgs(
                command="init-config",
                target=Path(parsed_args.target) if parsed_args.target else None,
                force=bool(parsed_args.force),
                location=location,
                quiet=is_quiet,
            )

        if command in {*_SINGLE_PATH_COMMANDS, "join", "resolve", "relative", "basename", "segments", "format"}:
            return ArgumentParser._process_operation(parsed_args, location)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _build_location(configuration: Config, parsed_args: argparse.Namespace) -> HostLocation:
        """Apply command line overrides on top of the configured location."""

        location = configuration.to_location()
        if getattr(parsed_args, "location", None) is not None:
            location = dataclasses.replace(location, pathname=parsed_args.location)
        if getattr(parsed_args, "origin", None) is not None:
            location = dataclasses.replace(location, origin=parsed_args.origin)
        return location

    @staticmethod
    def _process_operation(
        parsed_args: argparse.Namespace, location: HostLocation
    ) -> OperationArgs:
        parts: dict[str, str] = {}
        if parsed_args.command == "format":
            for field_name in _FORMAT_FIELDS:
                value = getattr(parsed_args, field_name)
                if value is not None:
                    parts[field_name] = value

        return OperationArgs(
            command=parsed_args.command,
            paths=list(getattr(parsed_args, "paths", [])),
            location=location,
            json_output=bool(getattr(parsed_args, "json_output", False)),
            verbose=bool(getattr(parsed_args, "verbose", False)),
            quiet=bool(getattr(parsed_args, "quiet", False)),
            ext=getattr(parsed_args, "ext", None),
            keep_empty=bool(getattr(parsed_args, "keep_empty", False)),
            parts=parts,
        )
