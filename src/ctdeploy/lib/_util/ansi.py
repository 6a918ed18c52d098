# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Pure ANSI color utilities.

Library modules use these directly; ``ui_utils.terminal`` builds the status
printers (header, success, warning, error) on top of them.
"""

import os
import sys

RESET = "\x1b[0m"

# SGR parameters matching the palette of the status printers
RED = "0;31"
GREEN = "0;32"
YELLOW = "1;33"
BLUE = "0;34"


def supports_color() -> bool:
    """Check if stdout supports color output.

    Follows the NO_COLOR (https://no-color.org/) and FORCE_COLOR conventions.
    NO_COLOR always wins. FORCE_COLOR (when set and not ``"0"``) forces color
    on even when stdout is not a TTY. Otherwise falls back to ``isatty()``.
    """
    if "NO_COLOR" in os.environ:
        return False
    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    return sys.stdout.isatty()


def color(text: str, code: str, enabled: bool) -> str:
    """Wrap *text* in ANSI escape codes when *enabled* is True."""
    if not enabled:
        return text
    return f"\x1b[{code}m{text}{RESET}"


def red(text: str, enabled: bool) -> str:
    return color(text, RED, enabled)


def green(text: str, enabled: bool) -> str:
    return color(text, GREEN, enabled)


def yellow(text: str, enabled: bool) -> str:
    return color(text, YELLOW, enabled)


def blue(text: str, enabled: bool) -> str:
    return color(text, BLUE, enabled)
