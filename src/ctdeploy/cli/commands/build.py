"""Build and deployment commands: compile, deploy."""

from __future__ import annotations

import argparse
import os

from ...lib.core.paths import APP_NAME
from ...lib.core.project import ProjectSettings
from ...lib.toolchain import npm_run, truffle_migrate
from ...ui_utils.terminal import print_error, print_header, print_success
from ._completers import complete_network_names, set_completer

PRIVATE_KEY_ENV = "PRIVATE_KEY"


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register compile and deploy subcommands."""
    subparsers.add_parser("compile", help="Compile contracts", add_help=False)

    p_deploy = subparsers.add_parser(
        "deploy", help="Deploy to specified network", add_help=False
    )
    set_completer(
        p_deploy.add_argument("network", nargs="?", default="", help="Target network"),
        complete_network_names,
    )


def dispatch(args: argparse.Namespace, settings: ProjectSettings) -> bool:
    """Handle compile and deploy.  Returns True if handled."""
    if args.cmd == "compile":
        compile_contracts(settings)
        return True
    if args.cmd == "deploy":
        deploy_to_network(settings, args.network)
        return True
    return False


def require_private_key() -> str:
    """Return the deployer key from the environment or exit 1."""
    private_key = os.environ.get(PRIVATE_KEY_ENV, "")
    if not private_key:
        print_error(f"{PRIVATE_KEY_ENV} environment variable is not set")
        print(f"Please set it with: export {PRIVATE_KEY_ENV}=0x...")
        raise SystemExit(1)
    print_success(f"{PRIVATE_KEY_ENV} is set")
    return private_key


def compile_contracts(settings: ProjectSettings) -> None:
    print_header("Compiling Contracts")
    npm_run(settings, "compile")
    print_success("Contracts compiled successfully")


def deploy_to_network(settings: ProjectSettings, network: str) -> None:
    """Migrate to *network*, then refresh and show networks.json."""
    if not network:
        print_error("Network name is required")
        print(f"Usage: {APP_NAME} deploy [network_name]")
        print(f"Available networks: {', '.join(settings.network_names)}")
        raise SystemExit(1)

    print_header(f"Deploying to {network}")
    private_key = require_private_key()

    print(f"Deploying {settings.contract.name} contract to {network}...")
    truffle_migrate(settings, network, private_key)
    print_success("Deployment completed!")

    print_header("Updating networks.json")
    npm_run(settings, "injectnetinfo")
    print_success("networks.json updated")

    print_header("Deployment Information")
    npm_run(settings, "networks")
