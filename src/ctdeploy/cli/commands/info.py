"""Informational command: compiler version and deployed addresses."""

from __future__ import annotations

import argparse

from ...lib.artifacts import extract_compiler_version
from ...lib.core.project import ProjectSettings
from ...lib.toolchain import npm_run
from ...ui_utils.terminal import print_error, print_header, print_warning


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the info subcommand."""
    subparsers.add_parser("info", help="Show compiler and deployment info", add_help=False)


def dispatch(args: argparse.Namespace, settings: ProjectSettings) -> bool:
    """Handle info.  Returns True if handled."""
    if args.cmd == "info":
        show_compiler_info(settings)
        return True
    return False


def show_compiler_info(settings: ProjectSettings) -> None:
    print_header("Compiler Information")

    artifact = settings.artifact_path
    if not artifact.is_file():
        print_error("Build artifacts not found. Run 'npm run compile' first.")
        raise SystemExit(1)

    version = extract_compiler_version(artifact)
    if version is None:
        print_warning(f"No compiler version found in {settings.contract.artifact}")
        version = ""
    print(f"Compiler Version: {version}")

    print()
    print("Contract Addresses:")
    npm_run(settings, "networks")
