"""nsdebug check — show which namespaces the active filter enables.

    DEBUG='worker:*' nsdebug check worker:a db
      filter: worker:*
      worker:a  enabled
      db        disabled

With --namespace, each argument is taken relative to that prefix.
Exits 0 when every namespace is enabled, 1 otherwise.
"""


def register(subparsers, parents):
    """Register the check subcommand."""
    parser = subparsers.add_parser(
        "check",
        parents=parents,
        help="Report whether namespaces are enabled",
        description="Report whether the active filter enables each namespace.",
    )
    parser.add_argument("namespaces", nargs="*", metavar="NS",
                        help="Namespaces to check (default: the --namespace itself)")
    parser.set_defaults(func=run)


def run(args):
    """Execute the check command."""
    base = args.device.on(args.namespace)
    if args.namespaces:
        handles = [base.on(ns) for ns in args.namespaces]
    else:
        handles = [base]

    print(f"  filter: {args.device.filter or '(nothing enabled)'}")
    width = max(len(h.namespace or "(root)") for h in handles)
    all_enabled = True
    for handle in handles:
        state = "enabled" if handle.enabled else "disabled"
        all_enabled = all_enabled and handle.enabled
        print(f"  {handle.namespace or '(root)':<{width}}  {state}")
    return 0 if all_enabled else 1
