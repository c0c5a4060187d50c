# -*- coding: utf-8 -*-
"""Location: ./testbackend/cli.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Test Backend CLI.

A tiny wrapper around Uvicorn's own command line. It prepends the default
application path and appends ``--host``/``--port`` from the settings when the
caller did not pass them, then hands control to ``uvicorn.main``. Every other
flag is forwarded untouched.

Examples:
    >>> _insert_defaults(["--reload"])[0] == DEFAULT_APP
    True
    >>> "--host" in _insert_defaults(["--uds", "/tmp/app.sock"])
    False
"""

# Future
from __future__ import annotations

# Standard
import sys
from typing import List

# Third-Party
import uvicorn

# First-Party
from testbackend import __version__
from testbackend.config import settings

DEFAULT_APP = "testbackend.main:app"
DEFAULT_HOST = settings.host
DEFAULT_PORT = settings.port


def _needs_app(pos_args: List[str]) -> bool:
    """Return True when the first CLI token is not an app path.

    Args:
        pos_args: Arguments after the program name.

    Returns:
        True if no ``module:app`` argument leads the list.

    Examples:
        >>> _needs_app([])
        True
        >>> _needs_app(["--reload"])
        True
        >>> _needs_app(["pkg.mod:app"])
        False
    """
    return len(pos_args) == 0 or pos_args[0].startswith("-")


def _has_option(args: List[str], name: str) -> bool:
    """Return True if ``name`` appears as ``--name value`` or ``--name=value``.

    Args:
        args: CLI arguments.
        name: Option name including the leading dashes.

    Returns:
        Whether the option is present.

    Examples:
        >>> _has_option(["--port=9000"], "--port")
        True
        >>> _has_option(["--portal"], "--port")
        False
    """
    return any(arg == name or arg.startswith(f"{name}=") for arg in args)


def _insert_defaults(raw_args: List[str]) -> List[str]:
    """Inject the default app path, host and port into the argument list.

    The input list is not modified.

    Args:
        raw_args: Arguments after the program name.

    Returns:
        A new argument list for Uvicorn.
    """
    args = list(raw_args)

    if _needs_app(args):
        args.insert(0, DEFAULT_APP)

    # A Unix domain socket replaces host/port binding entirely
    if _has_option(args, "--uds"):
        return args

    if not _has_option(args, "--host"):
        args.extend(["--host", DEFAULT_HOST])
    if not _has_option(args, "--port"):
        args.extend(["--port", str(DEFAULT_PORT)])
    return args


def main() -> None:
    """Entry point for the ``testbackend`` console script."""
    cli_args = sys.argv[1:]

    if "--version" in cli_args or "-V" in cli_args:
        print(f"testbackend {__version__}")
        return

    sys.argv = [sys.argv[0], *_insert_defaults(cli_args)]
    uvicorn.main()  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":  # pragma: no cover
    main()
