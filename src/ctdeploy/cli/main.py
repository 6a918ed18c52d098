#!/usr/bin/env python3

import argparse
import sys

from .. import __version__
from ..lib._util.logging_utils import _log_debug
from ..lib.core.config import load_bundled_defaults
from ..lib.core.paths import APP_NAME, project_root
from ..lib.core.project import ProjectSettings, load_settings, settings_from_config
from ..lib.toolchain import ToolFailed
from ..ui_utils.terminal import print_error, print_warning
from .commands import build, info, verify

# Optional: bash completion via argcomplete
try:
    import argcomplete  # type: ignore
except Exception:  # pragma: no cover - optional dep
    argcomplete = None  # type: ignore

_COMMAND_MODULES = (build, verify, info)

# First arguments that select the help block ("" matches an explicit empty arg)
HELP_ALIASES = ("", "help", "--help", "-h")

_COMMAND_SUMMARY = (
    ("compile", "Compile contracts"),
    ("deploy [network]", "Deploy to specified network"),
    ("flatten", "Flatten contract for verification"),
    ("verify [network]", "Show verification instructions"),
    ("info", "Show compiler and deployment info"),
    ("help", "Show this help message"),
)

_COLUMN = 26


def show_help(settings: ProjectSettings) -> None:
    """Print the usage block."""
    example_network = settings.network_names[0] if settings.network_names else "base_sepolia"

    print(f"{APP_NAME} {__version__}: deployment helper for {settings.contract.name} contracts")
    print()
    print(f"Usage: {APP_NAME} [command] [options]")
    print()
    print("Commands:")
    for usage, summary in _COMMAND_SUMMARY:
        print(f"  {usage:<{_COLUMN}} {summary}")
    print()
    print("Networks:")
    if settings.networks:
        for network in settings.networks.values():
            print(f"  {network.name:<{_COLUMN}} {network.label}")
    else:
        print("  (none configured)")
    print()
    print("Examples:")
    print(f"  {APP_NAME} compile")
    print(f"  {APP_NAME} deploy {example_network}")
    print(f"  {APP_NAME} flatten")
    print(f"  {APP_NAME} verify {example_network}")
    print(f"  {APP_NAME} info")
    print()
    print("Environment Variables:")
    print(f"  {'PRIVATE_KEY':<{_COLUMN}} Private key for deployment (required)")
    print(f"  {'CTDEPLOY_PROJECT_DIR':<{_COLUMN}} Truffle project directory (default: cwd)")
    print(f"  {'CTDEPLOY_CONFIG_FILE':<{_COLUMN}} Global config file override")
    print()
    print("Prerequisites:")
    print("  - Node.js and npm installed")
    print("  - Truffle installed globally")
    print("  - PRIVATE_KEY environment variable set")


def _settings_for_help() -> ProjectSettings:
    """Project settings for the usage block, or the bundled defaults if they are broken."""
    try:
        return load_settings()
    except SystemExit as e:
        print_warning(f"{e.code} (showing built-in defaults)")
        print()
        return settings_from_config(load_bundled_defaults(), project_root())


def build_parser() -> tuple[argparse.ArgumentParser, argparse._SubParsersAction]:
    """Return the top-level parser and its sub-parser action.

    Built-in ``-h`` handling is disabled everywhere; help is one of the
    commands and stray arguments are ignored rather than rejected.
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_NAME} – compile, deploy and verify Truffle contracts",
        add_help=False,
    )
    sub = parser.add_subparsers(dest="cmd")
    for module in _COMMAND_MODULES:
        module.register(sub)
    sub.add_parser("help", help="Show this help message", add_help=False)
    return parser, sub


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser, sub = build_parser()

    # Enable bash completion if argcomplete is present and activated
    if argcomplete is not None:  # pragma: no cover - shell integration
        try:
            argcomplete.autocomplete(parser)  # type: ignore[attr-defined]
        except Exception:
            pass

    if not argv or argv[0] in HELP_ALIASES:
        show_help(_settings_for_help())
        return

    if argv[0] not in sub.choices:
        print_error(f"Unknown command: {argv[0]}")
        print()
        show_help(_settings_for_help())
        raise SystemExit(1)

    settings = load_settings()

    args, extra = parser.parse_known_args(argv)
    # The network is the second argument verbatim, even when it looks like an option
    if hasattr(args, "network") and len(argv) > 1:
        args.network = argv[1]
        extra = [a for a in extra if a != argv[1]]
    if extra:
        _log_debug(f"{args.cmd}: ignoring extra arguments {extra}")

    try:
        for module in _COMMAND_MODULES:
            if module.dispatch(args, settings):
                return
    except ToolFailed as e:
        print_error(f"{e.reason}: {e.command_line}")
        raise SystemExit(e.returncode)

    show_help(settings)


if __name__ == "__main__":
    main()
