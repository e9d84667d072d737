"""
Function tracing decorator.

Logs entry, return value and exceptions at DEBUG level on the namespace
'trace:<module>' of the default device, so tracing is switched on with
the same filter as everything else:

    DEBUG='trace:*' python app.py
"""

import functools
import inspect
from pathlib import Path

from .levels import DEBUG


def _summarize(value) -> str:
    """Short repr for trace output: long strings and lists are abridged."""
    if isinstance(value, Path):
        return f"Path('{value}')"
    if isinstance(value, str) and len(value) > 50:
        return f"'{value[:47]}...'"
    if isinstance(value, (list, tuple)) and len(value) > 3:
        return f"[...{len(value)} items...]"
    return repr(value)


def _format_args(func_name, args, kwargs) -> str:
    args_repr = []
    remaining_args = args
    # Bound methods get 'self' instead of the instance repr
    if args and func_name != '__init__' and hasattr(type(args[0]), func_name):
        args_repr.append('self')
        remaining_args = args[1:]
    for arg in remaining_args:
        args_repr.append(_summarize(arg))
    for key, value in kwargs.items():
        args_repr.append(f"{key}={_summarize(value)}")
    return ', '.join(args_repr)


def trace(func=None, *, logger=None):
    """Decorator to trace function calls through a namespace logger.

    Usable bare (@trace) or with an explicit handle
    (@trace(logger=device.on('trace:db'))). Without one, the handle is
    'trace:<module>' on the default device, resolved at call time.
    Nothing is formatted unless the handle is enabled.
    """
    if func is None:
        return functools.partial(trace, logger=logger)

    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    func_name = func.__name__

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        log = logger
        if log is None:
            # Lazy import to avoid circular dependency
            from .device import get_device
            log = get_device().on(f"trace:{module_name}")

        if not log.enabled:
            return func(*args, **kwargs)

        log.log(lambda: f">> {func_name}({_format_args(func_name, args, kwargs)})",
                level=DEBUG)
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            log.log(f"!! {func_name} raised: {type(e).__name__}: {e}", level=DEBUG)
            raise
        if result is not None:
            log.log(lambda: f"<< {func_name} returned: {_summarize(result)}",
                    level=DEBUG)
        return result

    return wrapper
