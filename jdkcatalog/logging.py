# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Output channel shared by the parser, catalog loader and CLI.

Library code never prints directly. It reports through a ``Logger``,
either passed in (``parse(text, logger=...)``) or the process-wide one
returned by ``get_global_logger()``. The process-wide logger is silent
until the CLI installs a ``DefaultLogger`` built from ``--verbose`` and
``--debug``; ``catalog --json`` keeps it silent so stdout stays JSON.

Levels, as DefaultLogger renders them:
- step: ``[2/4] Loading catalog...`` on stdout, always
- warning: ``[WARNING] [VERSION] ...`` on stderr, always
- verbose: ``[CATALOG] ...`` with --verbose
- debug: ``[VERSION] ...`` with --debug
"""

from __future__ import annotations

import sys
from typing import Protocol


class Logger(Protocol):
    """Anything with these four methods can be passed as ``logger=``."""

    def step(self, step: int, total: int, message: str) -> None:
        """Announce step ``step`` of ``total`` (1-based)."""
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Detail shown with --verbose."""
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Detail shown with --debug, such as the selected parse shape."""
        ...

    def warning(self, prefix: str, message: str) -> None:
        """Recoverable problem, e.g. text with no version number in it."""
        ...


class DefaultLogger:
    """Prints steps and enabled levels to stdout, warnings to stderr."""

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        self._verbose = verbose or debug
        self._debug = debug

    def step(self, step: int, total: int, message: str) -> None:
        print(f"[{step}/{total}] {message}")

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            print(f"[{prefix}] {message}")

    def warning(self, prefix: str, message: str) -> None:
        print(f"[WARNING] [{prefix}] {message}", file=sys.stderr)


class SilentLogger:
    """Drops everything, warnings included. The process-wide default."""

    def step(self, step: int, total: int, message: str) -> None:
        """Suppress step output."""
        pass

    def verbose(self, prefix: str, message: str) -> None:
        """Suppress verbose output."""
        pass

    def debug(self, prefix: str, message: str) -> None:
        """Suppress debug output."""
        pass

    def warning(self, prefix: str, message: str) -> None:
        """Suppress warnings."""
        pass


_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Build the DefaultLogger the CLI installs for --verbose/--debug."""
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Logger used by parse() and load_catalog() when none is passed."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Replace the process-wide logger; the CLI calls this once per command."""
    global _global_logger
    _global_logger = logger
