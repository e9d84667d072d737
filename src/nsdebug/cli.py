"""Main CLI entry point for nsdebug.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--debug, --log-level, --no-color, ...)
  2. Second pass: dispatch to subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  nsdebug --debug 'app:*' log -n app:db "connected"     # works
  nsdebug log -n app:db "connected" --debug 'app:*'     # also works

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from nsdebug._version import BASE_VERSION, VERSION
from nsdebug.config import COLOR_MODES, device_kwargs, resolve_config
from nsdebug.core.device import Device


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--debug": {"aliases": ["-d"], "metavar": "FILTER", "dest": "filter",
                "default": None,
                "help": "Namespace filter, e.g. 'app:*,db' (default: $DEBUG)"},
    "--log-level": {"aliases": ["-l"], "metavar": "LEVEL", "default": None,
                    "help": "Minimum level for tagged messages (default: $LOG_LEVEL)"},
    "--color": {"choices": COLOR_MODES, "default": None,
                "help": "Colorize output (default: auto-detect terminal)"},
    "--no-color": {"action": "store_const", "const": "never", "dest": "color",
                   "help": "Disable colored output"},
    "--no-pid": {"action": "store_false", "dest": "pid", "default": None,
                 "help": "Omit the process id from plain output"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: nearest .nsdebug.json)"},
    "--output": {"aliases": ["-o"], "metavar": "PATH", "default": None,
                 "help": "Append output to PATH instead of stderr"},
}


def _add_global_flags(parser):
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    _add_global_flags(global_parser)
    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared argument parser for namespace-scoped flags."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--namespace", "-n", metavar="NS", default=None,
                        help="Namespace (or namespace prefix) to work under")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in nsdebug.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from nsdebug.commands import check, log
    return [log, check]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="nsdebug",
        description="nsdebug — namespace filtered debug logging",
        epilog=(
            "Run 'nsdebug <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--debug, --log-level, --no-color, ...) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"nsdebug {BASE_VERSION} ({VERSION})",
    )
    _add_global_flags(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


def build_device(global_args, io=None, environ=None):
    """Create the Device described by the global flags and config layers."""
    resolved = resolve_config(
        overrides={
            "filter": global_args.filter,
            "level": global_args.log_level,
            "color": global_args.color,
            "pid": global_args.pid,
        },
        environ=environ,
        config_path=global_args.config,
    )
    return Device(io, **device_kwargs(resolved))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for nsdebug CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Pass 2: parse subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    if not remaining:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(remaining)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    output = None
    if global_args.output:
        try:
            output = open(global_args.output, "a", encoding="utf-8")
        except OSError as e:
            print(f"  ERROR: cannot open {global_args.output}: {e.strerror}",
                  file=sys.stderr)
            return 1

    try:
        args.device = build_device(global_args, io=output)
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    finally:
        if output is not None:
            output.close()


if __name__ == "__main__":
    sys.exit(main())
