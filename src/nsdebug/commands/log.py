"""nsdebug log — write messages through a namespace handle.

Messages come from the command line or, when none are given, one per
line from stdin:

    nsdebug log -n deploy "starting rollout"
    make 2>&1 | nsdebug log -n build --level info
"""

import sys

from nsdebug.core.levels import LEVEL_TEXT, normalize_level


def register(subparsers, parents):
    """Register the log subcommand."""
    parser = subparsers.add_parser(
        "log",
        parents=parents,
        help="Log a message (or stdin lines) under a namespace",
        description="Log a message, or each line of stdin, under a namespace.",
    )
    parser.add_argument("message", nargs="*",
                        help="Message words (default: read lines from stdin)")
    parser.add_argument("--level", metavar="LEVEL", default=None,
                        help=f"Tag messages with a level ({', '.join(LEVEL_TEXT)})")
    parser.set_defaults(func=run)


def _stdin_lines():
    for line in sys.stdin:
        yield line.rstrip("\r\n")


def run(args):
    """Execute the log command."""
    level = None
    if args.level is not None:
        level = normalize_level(args.level)
        if level is None:
            print(f"  ERROR: unknown level {args.level!r} "
                  f"(expected one of {', '.join(LEVEL_TEXT)})", file=sys.stderr)
            return 1

    log = args.device.on(args.namespace)
    messages = [" ".join(args.message)] if args.message else _stdin_lines()
    for message in messages:
        log.log(message, level=level)
    return 0
