"""
Namespace filter compilation and matching.

Filter syntax (the DEBUG environment variable):
    Comma and/or whitespace separated glob patterns, '*' is the only
    wildcard and matches any run of characters (including none).

    Examples:
        *                   # everything, including the root namespace
        worker:*            # worker:a, worker:a:b, worker:
        db,http:*           # db and anything under http:
        "db http:*"         # same, whitespace separated

Patterns are anchored: 'work' does not match 'worker'. An empty filter
enables nothing.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple


_SEPARATORS = re.compile(r'[\s,]+')


def split_filter(filter_string: Optional[str]) -> Tuple[str, ...]:
    """Split a filter string into its non-empty tokens."""
    if not filter_string:
        return ()
    return tuple(tok for tok in _SEPARATORS.split(filter_string) if tok)


def compile_pattern(token: str) -> Optional[re.Pattern]:
    """Compile one glob token into an anchored regex.

    Returns None when the token cannot be compiled; callers drop it.
    """
    body = '.*?'.join(re.escape(part) for part in token.split('*'))
    try:
        return re.compile(rf'\A(?:{body})\Z', re.DOTALL)
    except re.error:
        return None


@dataclass(frozen=True)
class NamespaceFilter:
    """Immutable compiled filter.

    Attributes:
        rules: Compiled anchored patterns, in filter order
        patterns: Source tokens that produced the rules
    """
    rules: Tuple[re.Pattern, ...] = ()
    patterns: Tuple[str, ...] = ()

    def matches(self, namespace: Optional[str]) -> bool:
        """True if any rule matches the whole namespace.

        The root namespace (None) is matched as the empty string.
        """
        text = '' if namespace is None else str(namespace)
        return any(rule.match(text) for rule in self.rules)

    def __bool__(self) -> bool:
        return bool(self.rules)

    def __str__(self) -> str:
        return ','.join(self.patterns)


def compile_filter(filter_string: Optional[str]) -> NamespaceFilter:
    """Compile a filter string into a NamespaceFilter.

    Args:
        filter_string: Filter such as "worker:*,db" (None or "" = deny all)

    Returns:
        NamespaceFilter with one rule per usable token
    """
    rules = []
    patterns = []
    for token in split_filter(filter_string):
        rule = compile_pattern(token)
        if rule is None:
            continue
        rules.append(rule)
        patterns.append(token)
    return NamespaceFilter(rules=tuple(rules), patterns=tuple(patterns))
