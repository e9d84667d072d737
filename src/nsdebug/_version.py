"""
Version information for nsdebug.

This file is the canonical source for version numbers.

Format: MAJOR.MINOR.PATCH[-PHASE]_BRANCH_BUILD-YYYYMMDD-COMMITHASH
Example: 0.3.0-beta_main_7-20261017-5e1f0c2a
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 3
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta", "rc1", ...

# Auto-updated by git hooks - do not edit manually
__version__ = "0.3.0-beta_main_7-20261017-5e1f0c2a"
__app_name__ = "nsdebug"

_PEP440_PHASES = {"alpha": "a0", "beta": "b0"}


def get_version():
    """Return the full version string including branch and build info."""
    return __version__


def get_base_version():
    """Return MAJOR.MINOR.PATCH[-PHASE]."""
    if "_" in __version__:
        return __version__.split("_", 1)[0]
    return f"{MAJOR}.{MINOR}.{PATCH}" + (f"-{PHASE}" if PHASE else "")


def get_pip_version():
    """
    Return a PEP 440 version for setuptools.

    0.3.0-beta_main_7-20261017-hash -> 0.3.0b0
    0.3.0-beta_dev_7-20261017-hash  -> 0.3.0b0.dev7
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base += _PEP440_PHASES.get(PHASE, PHASE)

    parts = __version__.split("_")
    if len(parts) < 3 or parts[1] == "main":
        return base
    build_num = parts[2].split("-")[0] or "0"
    return f"{base}.dev{build_num}"


VERSION = get_version()
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
