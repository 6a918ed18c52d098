# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Typed view of the resolved configuration.

``load_settings()`` is the single entry point the CLI uses; everything else
in this module turns raw config sections into small frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .._util.config_stack import ConfigFileError
from .config import get_section, load_config
from .paths import project_root


@dataclass(frozen=True)
class ContractLayout:
    """Contract name and project-relative file locations."""

    name: str
    source: str
    artifact: str
    flattened: str


@dataclass(frozen=True)
class NetworkInfo:
    """A named deployment target.

    ``address`` is None while the contract has not been deployed there.
    """

    name: str
    label: str
    title: str
    address: str | None
    verify_url: str | None

    @property
    def deployed(self) -> bool:
        return bool(self.address)


@dataclass(frozen=True)
class VerificationMetadata:
    """Compiler settings a block explorer asks for during verification."""

    compiler: str
    optimization: bool
    runs: int
    license: str


@dataclass(frozen=True)
class Toolchain:
    """Executable names of the delegated tools."""

    npm: str
    npx: str
    truffle: str
    flattener: str


@dataclass(frozen=True)
class ProjectSettings:
    root: Path
    contract: ContractLayout
    verification: VerificationMetadata
    networks: dict[str, NetworkInfo]
    toolchain: Toolchain

    def path(self, relative: str) -> Path:
        """Resolve a project-relative path against the project root."""
        return self.root / relative

    @property
    def artifact_path(self) -> Path:
        return self.path(self.contract.artifact)

    @property
    def flattened_path(self) -> Path:
        return self.path(self.contract.flattened)

    def network(self, name: str) -> NetworkInfo | None:
        """Exact-match lookup in the known-network table."""
        return self.networks.get(name)

    @property
    def network_names(self) -> list[str]:
        return list(self.networks)


def _address(value: Any) -> str | None:
    """Normalize a configured contract address.

    YAML reads an unquoted ``0x...`` as an integer; turn it back into a
    20-byte hex string.
    """
    if value is None or value == "":
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return f"0x{value:040x}"
    return str(value)


def _parse_networks(section: dict[str, Any]) -> dict[str, NetworkInfo]:
    networks: dict[str, NetworkInfo] = {}
    for name, raw in section.items():
        entry = raw if isinstance(raw, dict) else {}
        label = str(entry.get("label") or name)
        networks[str(name)] = NetworkInfo(
            name=str(name),
            label=label,
            title=str(entry.get("title") or label),
            address=_address(entry.get("address")),
            verify_url=entry.get("verify_url") or None,
        )
    return networks


def settings_from_config(cfg: dict[str, Any], root: Path) -> ProjectSettings:
    """Build ``ProjectSettings`` from a merged config dict.

    Raises ``ValueError`` when a required value is missing or has the wrong
    type.
    """
    contract = get_section(cfg, "contract")
    verification = get_section(cfg, "verification")
    toolchain = get_section(cfg, "toolchain")

    name = contract.get("name")
    if not name:
        raise ValueError("contract.name is not set")

    try:
        runs = int(verification.get("runs", 200))
    except (TypeError, ValueError):
        raise ValueError(f"verification.runs must be an integer, got {verification.get('runs')!r}")

    return ProjectSettings(
        root=root,
        contract=ContractLayout(
            name=str(name),
            source=str(contract.get("source") or f"contracts/{name}.sol"),
            artifact=str(contract.get("artifact") or f"build/contracts/{name}.json"),
            flattened=str(contract.get("flattened") or f"{name}_flattened.sol"),
        ),
        verification=VerificationMetadata(
            compiler=str(verification.get("compiler", "")),
            optimization=bool(verification.get("optimization", True)),
            runs=runs,
            license=str(verification.get("license", "")),
        ),
        networks=_parse_networks(get_section(cfg, "networks")),
        toolchain=Toolchain(
            npm=str(toolchain.get("npm") or "npm"),
            npx=str(toolchain.get("npx") or "npx"),
            truffle=str(toolchain.get("truffle") or "truffle"),
            flattener=str(toolchain.get("flattener") or "truffle-flattener"),
        ),
    )


def load_settings(root: Path | None = None) -> ProjectSettings:
    """Resolve configuration for the project at *root* (default: project_root()).

    Configuration problems are reported as ``SystemExit`` with a message,
    like every other precondition failure of the CLI.
    """
    root = root or project_root()
    try:
        cfg = load_config(root)
        return settings_from_config(cfg, root)
    except ConfigFileError as e:
        raise SystemExit(f"Invalid configuration file {e.path}: {e.reason}")
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}")
