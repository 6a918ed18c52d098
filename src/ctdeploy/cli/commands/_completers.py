"""Shared argcomplete completers and helpers for CLI commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from typing import Any

from ...lib.core.project import load_settings


def complete_network_names(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:  # pragma: no cover
    """Return known network names matching *prefix* for argcomplete."""
    try:
        names = load_settings().network_names
    except (SystemExit, OSError):
        return []
    if prefix:
        names = [n for n in names if n.startswith(prefix)]
    return names


def set_completer(action: argparse.Action, fn: Callable[..., Any]) -> None:
    """Attach an argcomplete completer to *action*."""
    action.completer = fn  # type: ignore[attr-defined]
