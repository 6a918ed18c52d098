# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Layered config resolution.

Domain-agnostic: knows nothing about contracts or networks.

Terminology
-----------
- **Scope**: one config layer (``"defaults"``, ``"global"``, ``"project"``).
- **Stack**: an ordered list of scopes, lowest-priority first.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


class ConfigFileError(Exception):
    """A config layer exists but cannot be read as a YAML mapping."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base*, returning a **new** dict.

    * Dicts are merged key by key.
    * A ``None`` value in *override* removes the key from the result, so a
      higher layer can unset something a lower layer defined.
    * Anything else in *override* (scalars, lists) replaces the base value.

    Key order is preserved: base keys first, then keys new in *override*.
    """
    merged: dict = {}
    for key in [*base, *(k for k in override if k not in base)]:
        if key not in override:
            merged[key] = base[key]
            continue
        ov = override[key]
        if ov is None:
            continue
        bv = base.get(key)
        if isinstance(ov, dict) and isinstance(bv, dict):
            merged[key] = deep_merge(bv, ov)
        else:
            merged[key] = ov
    return merged


@dataclass(frozen=True)
class ConfigScope:
    """A single layer in the config stack."""

    level: str
    source: Path | None
    data: dict


class ConfigStack:
    """Ordered collection of config scopes, lowest-priority first.

    Usage::

        stack = ConfigStack()
        stack.push(ConfigScope("defaults", None, defaults))
        stack.push(load_yaml_scope("project", project_dir / "ctdeploy.yml"))
        resolved = stack.resolve()
    """

    def __init__(self) -> None:
        self._scopes: list[ConfigScope] = []

    def push(self, scope: ConfigScope) -> None:
        """Append a scope (higher priority than all previous)."""
        self._scopes.append(scope)

    def resolve(self) -> dict:
        """Deep-merge all scopes in order and return the result."""
        result: dict = {}
        for scope in self._scopes:
            result = deep_merge(result, scope.data)
        return result

    @property
    def scopes(self) -> list[ConfigScope]:
        return list(self._scopes)


def load_yaml_scope(level: str, path: Path) -> ConfigScope:
    """Load a YAML file into a ConfigScope.  Returns empty data if missing.

    Raises ``ConfigFileError`` when the file is not valid YAML or its top
    level is not a mapping.
    """
    if not path.is_file():
        return ConfigScope(level=level, source=path, data={})
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigFileError(path, str(e)) from e
    if not isinstance(data, dict):
        raise ConfigFileError(path, "top level must be a mapping")
    return ConfigScope(level=level, source=path, data=data)
