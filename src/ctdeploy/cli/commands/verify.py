"""Block explorer verification commands: flatten, verify."""

from __future__ import annotations

import argparse

from ...lib.artifacts import file_stats
from ...lib.core.paths import APP_NAME
from ...lib.core.project import NetworkInfo, ProjectSettings
from ...lib.toolchain import flatten_to_file, flattener_available, install_flattener
from ...ui_utils.terminal import print_error, print_header, print_success, print_warning
from ._completers import complete_network_names, set_completer


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register flatten and verify subcommands."""
    subparsers.add_parser("flatten", help="Flatten contract for verification", add_help=False)

    p_verify = subparsers.add_parser(
        "verify", help="Show verification instructions", add_help=False
    )
    set_completer(
        p_verify.add_argument("network", nargs="?", default="", help="Target network"),
        complete_network_names,
    )


def dispatch(args: argparse.Namespace, settings: ProjectSettings) -> bool:
    """Handle flatten and verify.  Returns True if handled."""
    if args.cmd == "flatten":
        flatten_contract(settings)
        return True
    if args.cmd == "verify":
        verify_contract(settings, args.network)
        return True
    return False


def flatten_contract(settings: ProjectSettings) -> None:
    """Write the flattened source and report its size."""
    print_header("Flattening Contract")

    flattener = settings.toolchain.flattener
    if not flattener_available(settings):
        print_warning(f"{flattener} not found, installing...")
        install_flattener(settings)

    output = flatten_to_file(settings)
    print_success(f"Contract flattened to {settings.contract.flattened}")

    stats = file_stats(output)
    print(f"File size: {stats.size_bytes} bytes")
    print(f"Lines: {stats.lines}")


def _resolve_deployed_network(settings: ProjectSettings, name: str) -> NetworkInfo:
    """Return the network if it is known and deployed, otherwise exit 1."""
    network = settings.network(name)
    if network is None:
        print_error(f"Unknown network: {name}")
        print(f"Available networks: {', '.join(settings.network_names)}")
        raise SystemExit(1)
    if not network.deployed:
        print_warning(f"{network.title} contract not deployed yet")
        print(f"Deploy first with: {APP_NAME} deploy {network.name}")
        raise SystemExit(1)
    return network


def verify_contract(settings: ProjectSettings, name: str) -> None:
    """Print everything needed for a manual single-file verification."""
    network = _resolve_deployed_network(settings, name)
    address = network.address
    meta = settings.verification
    flattened = settings.contract.flattened

    print(f"{network.title} Contract: {address}")
    if network.verify_url:
        print(f"Verification URL: {network.verify_url}")

    print_header("Contract Verification Info")
    print(f"Contract Address: {address}")
    print(f"Contract Name: {settings.contract.name}")
    print(f"Compiler: {meta.compiler}")
    print(f"Optimization: {'Yes (enabled)' if meta.optimization else 'No (disabled)'}")
    print(f"Runs: {meta.runs}")
    print(f"License: {meta.license}")
    print()

    if not settings.flattened_path.is_file():
        print_warning("Flattened contract not found. Flattening now...")
        flatten_contract(settings)

    print(f"Flattened contract ready: {flattened}")
    print()
    print("Manual verification steps:")
    if network.verify_url:
        open_page = "Go to the verification URL above"
    else:
        open_page = f"Open the {network.title} block explorer's contract verification page"
    steps = [
        open_page,
        f"Enter contract address: {address}",
        "Select 'Solidity (Single file)'",
        f"Enter compiler version: {meta.compiler}",
        f"Select license: {meta.license}",
        f"Paste content from {flattened}",
        "Complete CAPTCHA and submit",
    ]
    for number, step in enumerate(steps, start=1):
        print(f"{number}. {step}")
