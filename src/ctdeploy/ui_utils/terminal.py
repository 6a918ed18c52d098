"""Terminal status printers.

Core color functions live in ``ctdeploy.lib._util.ansi``; this module
re-exports them and adds the framed header and the success / warning /
error lines every command prints.
"""

from ctdeploy.lib._util.ansi import (  # noqa: F401  -- re-exports
    blue,
    color,
    green,
    red,
    supports_color,
    yellow,
)
from ctdeploy.lib._util.emoji import draw_emoji

HEADER_RULE = "=" * 32

SUCCESS_EMOJI = "✅"
WARNING_EMOJI = "⚠️"
ERROR_EMOJI = "❌"


def print_header(title: str) -> None:
    enabled = supports_color()
    print(blue(HEADER_RULE, enabled))
    print(blue(f"  {title}", enabled))
    print(blue(HEADER_RULE, enabled))


def print_success(message: str) -> None:
    print(green(f"{draw_emoji(SUCCESS_EMOJI)} {message}", supports_color()))


def print_warning(message: str) -> None:
    print(yellow(f"{draw_emoji(WARNING_EMOJI)} {message}", supports_color()))


def print_error(message: str) -> None:
    print(red(f"{draw_emoji(ERROR_EMOJI)} {message}", supports_color()))
